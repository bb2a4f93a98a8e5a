"""
설문 제출 비즈니스 로직
- 작성 중 상태(draft) 전이
- 필수값 검증
- "Other" 선택지 치환
- 저장소 insert 1회
"""
import logging
from typing import List, Optional

from pydantic import BaseModel

from telesurvey.schemas.survey import (
    AGE_GROUPS,
    CONTENT_PREFERENCES,
    OTHER_REASON,
    RECOMMEND_OPTIONS,
    USAGE_DURATIONS,
    USAGE_REASONS,
    Notice,
    SurveyDraft,
    SurveyInsert,
    SurveyResponse,
)
from telesurvey.services.errors import StoreError, SurveyValidationError
from telesurvey.services.store import SurveyStore

logger = logging.getLogger(__name__)

MULTI_CHOICE_FIELDS = ("usage_reason", "content_preference")

SUBMITTED_NOTICE = Notice(
    title="Thank you for submitting the survey!",
    description="Your response has been recorded successfully.",
)
SUBMIT_FAILED_NOTICE = Notice(
    title="Submission failed",
    description="There was an error submitting your response. Please try again.",
    variant="destructive",
)


# -- draft 상태 전이 --

def set_draft(draft: SurveyDraft, **changes) -> SurveyDraft:
    return draft.model_copy(update=changes)


def toggle_choice(draft: SurveyDraft, field: str, value: str) -> SurveyDraft:
    """다중 선택 체크박스 토글 - 있으면 빼고 없으면 뒤에 추가"""
    if field not in MULTI_CHOICE_FIELDS:
        raise ValueError(f"not a multiple choice field: {field}")
    current: List[str] = getattr(draft, field)
    if value in current:
        updated = [item for item in current if item != value]
    else:
        updated = [*current, value]
    return set_draft(draft, **{field: updated})


def reset_draft() -> SurveyDraft:
    return SurveyDraft()


# -- 검증 / 변환 --

def validate_draft(draft: SurveyDraft) -> None:
    if not draft.age_group or not draft.usage_duration or not draft.recommend_telegram:
        raise SurveyValidationError(
            "missing_fields",
            "Missing fields",
            "Please fill in all required fields.",
        )

    if not draft.usage_reason or not draft.content_preference:
        raise SurveyValidationError(
            "missing_selections",
            "Missing selections",
            "Please select at least one option for usage reason and content preference.",
        )

    # 폼 밖에서 직접 들어온 요청 대비 - 고정 선택지만 허용
    invalid = (
        (draft.age_group not in AGE_GROUPS)
        or (draft.usage_duration not in USAGE_DURATIONS)
        or (draft.recommend_telegram not in RECOMMEND_OPTIONS)
        or any(r not in USAGE_REASONS for r in draft.usage_reason)
        or any(c not in CONTENT_PREFERENCES for c in draft.content_preference)
    )
    if invalid:
        raise SurveyValidationError(
            "invalid_choice",
            "Invalid selection",
            "One or more answers are not valid options.",
        )


def final_usage_reasons(usage_reason: List[str], other_usage_reason: str) -> List[str]:
    """"Other" + 직접 입력값이 있으면: 나머지 이유를 먼저, 입력값을 맨 뒤에"""
    custom = other_usage_reason.strip()
    if OTHER_REASON in usage_reason and custom:
        return [r for r in usage_reason if r != OTHER_REASON] + [custom]
    return list(usage_reason)


def _blank_to_none(value: str) -> Optional[str]:
    # 공백만 있으면 None, 아니면 입력 그대로
    return value if value.strip() else None


def build_insert(draft: SurveyDraft) -> SurveyInsert:
    return SurveyInsert(
        name=_blank_to_none(draft.name),
        age_group=draft.age_group,
        usage_duration=draft.usage_duration,
        usage_reason=final_usage_reasons(draft.usage_reason, draft.other_usage_reason),
        content_preference=list(draft.content_preference),
        regular_bots_or_channels=_blank_to_none(draft.regular_bots_or_channels),
        recommend_telegram=draft.recommend_telegram,
        improvement_suggestions=_blank_to_none(draft.improvement_suggestions),
    )


# -- 제출 --

class SubmitOutcome(BaseModel):
    ok: bool
    draft: SurveyDraft
    notice: Notice
    record: Optional[SurveyResponse] = None


class IntakeService:
    """설문 제출 처리"""

    @staticmethod
    def submit(draft: SurveyDraft, store: SurveyStore) -> SubmitOutcome:
        """
        draft 검증 후 저장소에 1회 insert

        Returns:
            성공: 초기화된 draft + 완료 알림
            실패: 입력값 그대로의 draft + 실패 알림 (재시도용)

        Raises:
            SurveyValidationError: 필수값 누락 (저장소 호출 없음)
        """
        validate_draft(draft)
        payload = build_insert(draft)

        try:
            record = store.insert(payload)
        except StoreError as e:
            logger.error("[SURVEY_SUBMIT] insert failed: %s", e)
            return SubmitOutcome(ok=False, draft=draft, notice=SUBMIT_FAILED_NOTICE)

        logger.info("[SURVEY_SUBMIT] recorded id=%s", record.id if record else None)
        return SubmitOutcome(ok=True, draft=reset_draft(), notice=SUBMITTED_NOTICE, record=record)
