"""
대시보드 상태 / 조회 로직
- count + 페이지 조회 (서로 독립, 한쪽 실패해도 다른 쪽 결과는 반영)
- 페이지 이동 (범위 밖 이동은 무시)
- 상태: Idle -> Loading -> Ready | Failed(reason)
"""
import logging
import math
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple, Union

from telesurvey.schemas.survey import Distributions, Notice, SurveyResponse
from telesurvey.services.analytics import TOP_CONTENT_LIMIT, build_distributions
from telesurvey.services.errors import StoreError
from telesurvey.services.store import SurveyStore

logger = logging.getLogger(__name__)

PAGE_SIZE = 10

LOAD_FAILED_NOTICE = Notice(
    title="Error loading data",
    description="Failed to load survey responses. Please try again.",
    variant="destructive",
)


# ---- 상태 ----

@dataclass(frozen=True)
class Idle:
    kind: str = "idle"


@dataclass(frozen=True)
class Loading:
    kind: str = "loading"


@dataclass(frozen=True)
class Ready:
    kind: str = "ready"


@dataclass(frozen=True)
class Failed:
    reason: str
    kind: str = "failed"


LoadState = Union[Idle, Loading, Ready, Failed]


@dataclass(frozen=True)
class DashboardState:
    page: int = 1
    responses: List[SurveyResponse] = field(default_factory=list)
    total_count: int = 0
    status: LoadState = Idle()


# ---- 계산 헬퍼 ----

def page_range(
    page: int, page_size: int = PAGE_SIZE, total_count: Optional[int] = None
) -> Tuple[int, int]:
    """
    0-based 양끝 포함 offset.
    전체 수를 알면 end 를 마지막 row(total_count - 1) 로 자른다.
    예: page=2, total_count=15 -> (10, 14)
    """
    start, end = (page - 1) * page_size, page * page_size - 1
    if total_count is not None:
        end = min(end, total_count - 1)
    return start, end


def total_pages(total_count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(total_count / page_size)


def clamp_page(page: int, pages: int) -> int:
    return max(1, min(page, max(pages, 1)))


# ---- 상태 전이 ----

def set_page(state: DashboardState, page: int) -> DashboardState:
    return replace(state, page=page)


def set_responses(state: DashboardState, responses: List[SurveyResponse]) -> DashboardState:
    return replace(state, responses=list(responses))


def set_total(state: DashboardState, total_count: int) -> DashboardState:
    return replace(state, total_count=total_count)


def set_status(state: DashboardState, status: LoadState) -> DashboardState:
    return replace(state, status=status)


class DashboardController:
    """대시보드 한 화면의 상태를 소유. 요청마다 새로 만든다."""

    def __init__(
        self,
        store: SurveyStore,
        page_size: int = PAGE_SIZE,
        top_content_limit: int = TOP_CONTENT_LIMIT,
    ):
        self.store = store
        self.page_size = page_size
        self.top_content_limit = top_content_limit
        self.state = DashboardState()

    # -- 파생 값 --

    @property
    def total_pages(self) -> int:
        return total_pages(self.state.total_count, self.page_size)

    @property
    def notice(self) -> Optional[Notice]:
        return LOAD_FAILED_NOTICE if isinstance(self.state.status, Failed) else None

    def distributions(self) -> Distributions:
        return build_distributions(self.state.responses, self.top_content_limit)

    # -- 조회 --

    def _fetch_count(self) -> Optional[str]:
        try:
            self.state = set_total(self.state, self.store.count())
        except StoreError as e:
            return str(e)
        return None

    def _fetch_page(self, count_known: bool) -> Optional[str]:
        total = self.state.total_count if count_known else None
        start, end = page_range(self.state.page, self.page_size, total)
        if start > end:
            # 응답이 0건 - 범위 밖 offset 으로 조회하지 않음
            self.state = set_responses(self.state, [])
            return None
        try:
            self.state = set_responses(self.state, self.store.select_page(start, end))
        except StoreError as e:
            return str(e)
        return None

    def _finish(self, errors: List[Optional[str]]) -> DashboardState:
        reasons = [e for e in errors if e]
        if reasons:
            logger.error("[DASHBOARD] load failed page=%s: %s", self.state.page, "; ".join(reasons))
            self.state = set_status(self.state, Failed("; ".join(reasons)))
        else:
            logger.info(
                "[DASHBOARD] loaded page=%s rows=%s total=%s",
                self.state.page,
                len(self.state.responses),
                self.state.total_count,
            )
            self.state = set_status(self.state, Ready())
        return self.state

    def refresh(self) -> DashboardState:
        """현재 페이지 기준으로 count + 페이지 다시 조회"""
        self.state = set_status(self.state, Loading())
        count_error = self._fetch_count()
        return self._finish([count_error, self._fetch_page(count_known=not count_error)])

    def open(self, page: int = 1) -> DashboardState:
        """
        첫 진입 (mount).
        count 를 먼저 받아 요청 페이지를 [1, total_pages] 로 맞춘 뒤 페이지 조회
        """
        self.state = set_status(self.state, Loading())
        count_error = self._fetch_count()
        if count_error:
            # 전체 수를 모르면 하한만 맞춤
            self.state = set_page(self.state, max(1, page))
        else:
            self.state = set_page(self.state, clamp_page(page, self.total_pages))
        return self._finish([count_error, self._fetch_page(count_known=not count_error)])

    # -- 페이지 이동 --
    # 같은 controller 를 계속 들고 있는 쪽(프로세스 내 사용)의 이동 API.
    # HTTP 화면은 요청마다 새 controller 라 open(page) 로 진입한다.

    def go_to(self, page: int) -> bool:
        """범위 밖이거나 현재 페이지면 아무 것도 안 함 (조회 없음)"""
        if page < 1 or page > self.total_pages or page == self.state.page:
            return False
        self.state = set_page(self.state, page)
        self.refresh()
        return True

    def previous(self) -> bool:
        return self.go_to(max(self.state.page - 1, 1))

    def next(self) -> bool:
        return self.go_to(min(self.state.page + 1, self.total_pages))
