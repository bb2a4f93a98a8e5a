# telesurvey/services/sql_store.py
# DATABASE_URL 로 직접 붙는 설문 저장소 (Supabase Postgres / 로컬 sqlite)
import logging
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from telesurvey.db.base import Base, build_sessionmaker
from telesurvey.models.survey import TelegramSurvey
from telesurvey.schemas.survey import SurveyInsert, SurveyResponse
from telesurvey.services.errors import StoreError

logger = logging.getLogger(__name__)


class SqlSurveyStore:
    def __init__(self, engine: Engine, create_tables: bool = False):
        self.engine = engine
        self.SessionLocal = build_sessionmaker(engine)
        if create_tables:
            # 운영 스키마는 Supabase 가 관리. 로컬/테스트에서만 생성
            Base.metadata.create_all(bind=engine)

    def count(self) -> int:
        try:
            with self.SessionLocal() as db:
                return db.query(TelegramSurvey).count()
        except SQLAlchemyError as e:
            logger.error("[STORE] count failed: %r", e)
            raise StoreError("count", str(e)) from e

    def select_page(self, start: int, end: int) -> List[SurveyResponse]:
        try:
            with self.SessionLocal() as db:
                rows = (
                    db.query(TelegramSurvey)
                    .order_by(TelegramSurvey.submitted_at.desc())
                    .offset(start)
                    .limit(end - start + 1)
                    .all()
                )
                return [SurveyResponse.model_validate(r) for r in rows]
        except SQLAlchemyError as e:
            logger.error("[STORE] select_page failed range=[%s, %s]: %r", start, end, e)
            raise StoreError("select_page", str(e)) from e

    def insert(self, record: SurveyInsert) -> Optional[SurveyResponse]:
        try:
            with self.SessionLocal() as db:
                row = TelegramSurvey(**record.model_dump())
                db.add(row)
                db.commit()
                db.refresh(row)
                return SurveyResponse.model_validate(row)
        except SQLAlchemyError as e:
            logger.error("[STORE] insert failed: %r", e)
            raise StoreError("insert", str(e)) from e
