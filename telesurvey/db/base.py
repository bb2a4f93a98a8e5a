"""
공용 DB 베이스/엔진 팩토리.
Base, build_engine, build_sessionmaker 정의는 telesurvey.db.session 한 곳에서 관리한다.
"""
from telesurvey.db.session import Base, build_engine, build_sessionmaker

__all__ = ["Base", "build_engine", "build_sessionmaker"]
