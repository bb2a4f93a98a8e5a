# telesurvey/db/session.py
# SQLAlchemy 기본 세팅. DB URL은 .env의 DATABASE_URL을 사용.

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def build_engine(database_url: str | None) -> Engine:
    if not database_url:
        raise RuntimeError("DATABASE_URL 환경변수가 설정되어 있지 않습니다.")

    if database_url.startswith("sqlite"):
        # 로컬/테스트용. 메모리 DB 는 커넥션 하나를 모든 스레드가 공유
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)

    # Supabase Postgres 연결용 URL (예: postgresql+psycopg2://...)
    return create_engine(
        database_url,
        pool_pre_ping=True,  # 끊어진 커넥션 자동 감지
        pool_size=30,        # Supabase Session mode를 30으로 확대한 값에 맞춤
        max_overflow=0,      # 풀 크기 초과 연결 금지
        pool_timeout=30,     # 풀 고갈 시 대기 시간(초) 후 Timeout
    )


def build_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
