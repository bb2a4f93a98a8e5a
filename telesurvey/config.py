# telesurvey/config.py


from dotenv import load_dotenv
from pathlib import Path
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()  # .env 파일 먼저 읽기

BASE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    # 환경 구분
    app_env: str = "local"
    log_level: str = "INFO"

    # 저장소 선택: supabase(운영) | sql(DATABASE_URL 직접 연결, 로컬/테스트)
    store_backend: Literal["supabase", "sql"] = "supabase"

    # Supabase
    supabase_url: str | None = None          # SUPABASE_URL
    supabase_key: str | None = None          # SUPABASE_KEY (anon key)

    # SQL (Supabase Postgres 또는 sqlite)
    database_url: str | None = None          # DATABASE_URL

    # 설문 테이블 / 대시보드
    survey_table: str = "telegram_survey"
    page_size: int = 10
    top_content_limit: int = 10

    # CORS
    cors_allow_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),  # 루트 .env 절대경로
        env_file_encoding="utf-8",
        extra="ignore",                   # 필요 없는 env 무시
    )

settings = Settings()
