import logging
from supabase import create_client, Client
from typing import List, Optional # return type info

from telesurvey.schemas.survey import SurveyInsert, SurveyResponse
from telesurvey.services.errors import StoreError

logger = logging.getLogger(__name__)


# supabase client 초기화
def get_client(supabase_url: Optional[str], supabase_key: Optional[str]) -> Client:
    if not supabase_key or not supabase_url:
        raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set in .env")
    return create_client(supabase_url, supabase_key)


# --telegram_survey table--

class SupabaseSurveyStore:
    def __init__(self, client: Client, table: str = "telegram_survey"):
        self.client = client
        self.table = table

    # 전체 응답 수 (head 요청이라 row 는 받지 않음)
    def count(self) -> int:
        try:
            response = (
                self.client.table(self.table)
                .select("*", count="exact", head=True)
                .execute()
            )
        except Exception as e:
            logger.error("[STORE] count failed table=%s: %r", self.table, e)
            raise StoreError("count", str(e)) from e
        return response.count or 0

    # 최신순 한 페이지 조회 (row 검증 실패도 StoreError)
    def select_page(self, start: int, end: int) -> List[SurveyResponse]:
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .order("submitted_at", desc=True)
                .range(start, end)
                .execute()
            )
            rows = response.data if response.data else []
            return [SurveyResponse.model_validate(row) for row in rows]
        except Exception as e:
            logger.error("[STORE] select_page failed range=[%s, %s]: %r", start, end, e)
            raise StoreError("select_page", str(e)) from e

    # 설문 응답 저장
    def insert(self, record: SurveyInsert) -> Optional[SurveyResponse]:
        try:
            response = self.client.table(self.table).insert(record.model_dump()).execute()
            # RLS 로 select 가 막혀 있으면 data 가 비어서 돌아옴
            return SurveyResponse.model_validate(response.data[0]) if response.data else None
        except Exception as e:
            logger.error("[STORE] insert failed table=%s: %r", self.table, e)
            raise StoreError("insert", str(e)) from e
