import pytest

from telesurvey.schemas.survey import SurveyDraft
from telesurvey.services.errors import SurveyValidationError
from telesurvey.services.intake_service import (
    IntakeService,
    build_insert,
    final_usage_reasons,
    reset_draft,
    set_draft,
    toggle_choice,
)

from fakes import FakeStore


def complete_draft(**changes) -> SurveyDraft:
    draft = SurveyDraft(
        name="Alice",
        age_group="25–34",
        usage_duration="More than 3 years",
        usage_reason=["For privacy and security"],
        content_preference=["📚 E-books & Study Material"],
        regular_bots_or_channels="@newsbot",
        recommend_telegram="Maybe",
        improvement_suggestions="Better search",
    )
    return set_draft(draft, **changes)


# ---- draft transitions ----

def test_toggle_choice_adds_then_removes_preserving_order():
    draft = reset_draft()
    draft = toggle_choice(draft, "usage_reason", "To chat with friends")
    draft = toggle_choice(draft, "usage_reason", "For bots and automation")
    draft = toggle_choice(draft, "usage_reason", "Other")
    assert draft.usage_reason == ["To chat with friends", "For bots and automation", "Other"]

    draft = toggle_choice(draft, "usage_reason", "For bots and automation")
    assert draft.usage_reason == ["To chat with friends", "Other"]


def test_toggle_choice_rejects_single_choice_field():
    with pytest.raises(ValueError):
        toggle_choice(reset_draft(), "age_group", "45+")


def test_set_draft_does_not_mutate_original():
    draft = reset_draft()
    updated = set_draft(draft, age_group="45+")
    assert draft.age_group == ""
    assert updated.age_group == "45+"


# ---- validation ----

@pytest.mark.parametrize(
    "changes, code",
    [
        ({"age_group": ""}, "missing_fields"),
        ({"usage_duration": ""}, "missing_fields"),
        ({"recommend_telegram": ""}, "missing_fields"),
        ({"usage_reason": []}, "missing_selections"),
        ({"content_preference": []}, "missing_selections"),
        ({"age_group": "", "usage_reason": []}, "missing_fields"),
        ({"age_group": "99+"}, "invalid_choice"),
        ({"content_preference": ["Cat pictures"]}, "invalid_choice"),
    ],
)
def test_invalid_draft_never_reaches_store(changes, code):
    store = FakeStore()
    with pytest.raises(SurveyValidationError) as exc:
        IntakeService.submit(complete_draft(**changes), store)
    assert exc.value.code == code
    assert store.calls == []


# ---- "Other" handling ----

def test_other_alone_is_replaced_by_custom_value():
    assert final_usage_reasons(["Other"], "Custom X") == ["Custom X"]


def test_other_custom_value_goes_after_co_selected_reasons():
    reasons = ["To chat with friends", "Other", "For bots and automation"]
    assert final_usage_reasons(reasons, "Custom X") == [
        "To chat with friends",
        "For bots and automation",
        "Custom X",
    ]


def test_other_without_custom_value_is_kept():
    assert final_usage_reasons(["Other", "To chat with friends"], "") == ["Other", "To chat with friends"]


def test_custom_value_ignored_when_other_not_selected():
    assert final_usage_reasons(["To chat with friends"], "Custom X") == ["To chat with friends"]


def test_submit_inserts_normalized_reasons():
    store = FakeStore()
    draft = complete_draft(usage_reason=["Other"], other_usage_reason="Custom X")

    outcome = IntakeService.submit(draft, store)

    assert outcome.ok
    assert len(store.inserts) == 1
    assert store.inserts[0].usage_reason == ["Custom X"]


# ---- optional fields ----

def test_blank_optional_fields_become_none():
    payload = build_insert(
        complete_draft(name="", regular_bots_or_channels="   ", improvement_suggestions="")
    )
    assert payload.name is None
    assert payload.regular_bots_or_channels is None
    assert payload.improvement_suggestions is None
    assert "other_usage_reason" not in payload.model_dump()


def test_non_blank_optional_fields_kept_as_typed():
    payload = build_insert(complete_draft(name="  Alice ", improvement_suggestions="Dark mode\n"))
    assert payload.name == "  Alice "
    assert payload.improvement_suggestions == "Dark mode\n"


# ---- outcome ----

def test_successful_submit_resets_draft():
    store = FakeStore()
    outcome = IntakeService.submit(complete_draft(), store)

    assert outcome.ok
    assert outcome.draft == reset_draft()
    assert outcome.notice.title == "Thank you for submitting the survey!"
    assert outcome.record is not None
    assert outcome.record.name == "Alice"


def test_failed_submit_keeps_draft_for_retry():
    store = FakeStore()
    store.fail_insert = True
    draft = complete_draft()

    outcome = IntakeService.submit(draft, store)

    assert not outcome.ok
    assert outcome.draft == draft
    assert outcome.notice.title == "Submission failed"
    assert outcome.notice.variant == "destructive"
    # no automatic retry
    assert len(store.inserts) == 1
