# telesurvey/services/store.py
# 설문 저장소 인터페이스. 구현체: supabase_client.SupabaseSurveyStore, sql_store.SqlSurveyStore
from typing import List, Optional, Protocol

from telesurvey.schemas.survey import SurveyInsert, SurveyResponse


class SurveyStore(Protocol):
    def count(self) -> int:
        """전체 응답 수 (필터 없음)"""
        ...

    def select_page(self, start: int, end: int) -> List[SurveyResponse]:
        """submitted_at 내림차순, 0-based 양끝 포함 [start, end] 구간"""
        ...

    def insert(self, record: SurveyInsert) -> Optional[SurveyResponse]:
        """응답 1건 저장. id / submitted_at 은 저장소가 부여"""
        ...
