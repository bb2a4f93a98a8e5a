# telesurvey/routers/dashboard.py
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from telesurvey.config import settings
from telesurvey.deps import get_store
from telesurvey.schemas.survey import DashboardOut
from telesurvey.services.charts import build_dashboard_charts
from telesurvey.services.dashboard_service import DashboardController
from telesurvey.services.store import SurveyStore
from telesurvey.templating import templates

router = APIRouter(tags=["dashboard"])


def _open_dashboard(store: SurveyStore, page: int) -> DashboardController:
    controller = DashboardController(
        store,
        page_size=settings.page_size,
        top_content_limit=settings.top_content_limit,
    )
    controller.open(page)
    return controller


# 결과 화면
# GET /dashboard?page=2
@router.get("/dashboard", response_class=HTMLResponse)
def dashboard_page(
    request: Request,
    page: int = Query(1, description="1부터 시작하는 페이지 번호"),
    store: SurveyStore = Depends(get_store),
):
    controller = _open_dashboard(store, page)
    state = controller.state

    # 응답이 없으면 빈 화면만 - 차트는 만들지 않음
    charts = build_dashboard_charts(controller.distributions()) if state.responses else None

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "state": state,
            "page": state.page,
            "total_count": state.total_count,
            "total_pages": controller.total_pages,
            "responses": state.responses,
            "notice": controller.notice,
            "charts": charts,
        },
    )


# GET /api/dashboard?page=2
@router.get("/api/dashboard", response_model=DashboardOut)
def dashboard_data(
    page: int = Query(1, description="1부터 시작하는 페이지 번호"),
    store: SurveyStore = Depends(get_store),
):
    controller = _open_dashboard(store, page)
    state = controller.state
    return DashboardOut(
        page=state.page,
        page_size=controller.page_size,
        total_count=state.total_count,
        total_pages=controller.total_pages,
        status=state.status.kind,
        notice=controller.notice,
        responses=state.responses,
        distributions=controller.distributions(),
    )
