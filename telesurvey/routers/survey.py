# telesurvey/routers/survey.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from telesurvey.deps import get_store
from telesurvey.schemas.survey import (
    AGE_GROUPS,
    CONTENT_PREFERENCES,
    OTHER_REASON,
    RECOMMEND_OPTIONS,
    USAGE_DURATIONS,
    USAGE_REASONS,
    Notice,
    SubmitResponse,
    SurveyDraft,
)
from telesurvey.services.errors import SurveyValidationError
from telesurvey.services.intake_service import IntakeService, reset_draft
from telesurvey.services.store import SurveyStore
from telesurvey.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["survey"])


# ---------- Helpers ----------
def _draft_from_form(form) -> SurveyDraft:
    return SurveyDraft(
        name=form.get("name", ""),
        age_group=form.get("age_group", ""),
        usage_duration=form.get("usage_duration", ""),
        usage_reason=form.getlist("usage_reason"),
        content_preference=form.getlist("content_preference"),
        regular_bots_or_channels=form.get("regular_bots_or_channels", ""),
        recommend_telegram=form.get("recommend_telegram", ""),
        improvement_suggestions=form.get("improvement_suggestions", ""),
        other_usage_reason=form.get("other_usage_reason", ""),
    )


def _render_form(
    request: Request,
    draft: SurveyDraft,
    notice: Optional[Notice] = None,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "survey.html",
        {
            "draft": draft,
            "notice": notice,
            "age_groups": AGE_GROUPS,
            "usage_durations": USAGE_DURATIONS,
            "usage_reasons": USAGE_REASONS,
            "other_reason": OTHER_REASON,
            "content_preferences": CONTENT_PREFERENCES,
            "recommend_options": RECOMMEND_OPTIONS,
        },
        status_code=status_code,
    )


# ---------- Pages ----------
@router.get("/", response_class=HTMLResponse)
def survey_form(request: Request):
    return _render_form(request, reset_draft())


@router.post("/survey", response_class=HTMLResponse)
async def submit_survey_form(request: Request, store: SurveyStore = Depends(get_store)):
    """
    설문 폼 제출.
    - 검증 실패: 입력값 유지 + 422
    - 저장 실패: 입력값 유지 + 500 (다시 제출 가능)
    - 성공: 빈 폼 + 완료 알림
    """
    draft = _draft_from_form(await request.form())
    try:
        outcome = await run_in_threadpool(IntakeService.submit, draft, store)
    except SurveyValidationError as e:
        notice = Notice(title=e.title, description=e.description, variant="destructive")
        return _render_form(request, draft, notice, status_code=422)

    return _render_form(
        request,
        outcome.draft,
        outcome.notice,
        status_code=200 if outcome.ok else 500,
    )


# ---------- API ----------
@router.post("/api/survey", response_model=SubmitResponse, status_code=status.HTTP_201_CREATED)
def submit_survey(payload: SurveyDraft, store: SurveyStore = Depends(get_store)):
    try:
        outcome = IntakeService.submit(payload, store)
    except SurveyValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": e.code, "detail": e.description},
        )

    if not outcome.ok:
        raise HTTPException(
            status_code=500,
            detail={"message": "submission_failed", "detail": outcome.notice.description},
        )

    return SubmitResponse(message="survey_submitted", record=outcome.record)
