# telesurvey/deps.py
from functools import lru_cache

from telesurvey.config import settings
from telesurvey.services.store import SurveyStore

# ----------------------------
# 설문 저장소
#  - 프로세스당 하나만 만들어 재사용
#  - 테스트는 app.dependency_overrides[get_store] 로 교체
# ----------------------------
@lru_cache(maxsize=1)
def _build_store() -> SurveyStore:
    if settings.store_backend == "sql":
        from telesurvey.db.base import build_engine
        from telesurvey.services.sql_store import SqlSurveyStore

        engine = build_engine(settings.database_url)
        return SqlSurveyStore(engine, create_tables=engine.dialect.name == "sqlite")

    from telesurvey.services.supabase_client import SupabaseSurveyStore, get_client

    client = get_client(settings.supabase_url, settings.supabase_key)
    return SupabaseSurveyStore(client, table=settings.survey_table)


def get_store() -> SurveyStore:
    return _build_store()
