from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from telesurvey.models.survey import TelegramSurvey
from telesurvey.schemas.survey import SurveyDraft, SurveyInsert
from telesurvey.services.errors import StoreError
from telesurvey.services.intake_service import IntakeService
from telesurvey.services.supabase_client import SupabaseSurveyStore, get_client


def sample_insert(**changes) -> SurveyInsert:
    data = {
        "age_group": "35–44",
        "usage_duration": "6 months – 1 year",
        "usage_reason": ["For cloud-based messaging", "Custom X"],
        "content_preference": ["📱 Tech Updates"],
        "recommend_telegram": "Yes",
    }
    data.update(changes)
    return SurveyInsert(**data)


# ---- SQL store ----

def test_sql_insert_assigns_id_and_timestamp(sql_store):
    record = sql_store.insert(sample_insert(name="Bob"))
    assert record.id
    assert record.submitted_at is not None
    assert record.usage_reason == ["For cloud-based messaging", "Custom X"]
    assert sql_store.count() == 1


def test_blank_optional_fields_round_trip_as_none(sql_store):
    draft = SurveyDraft(
        name="",
        age_group="Under 18",
        usage_duration="Less than 6 months",
        usage_reason=["To chat with friends"],
        content_preference=["🎮 Gaming Tips"],
        regular_bots_or_channels="",
        recommend_telegram="No",
        improvement_suggestions="",
    )
    IntakeService.submit(draft, sql_store)

    [stored] = sql_store.select_page(0, 9)
    assert stored.name is None
    assert stored.regular_bots_or_channels is None
    assert stored.improvement_suggestions is None


def test_sql_select_page_newest_first(sql_store):
    base = datetime(2025, 1, 1, 12, 0)
    with sql_store.SessionLocal() as db:
        for i in range(15):
            db.add(
                TelegramSurvey(
                    name=f"user-{i}",
                    submitted_at=base + timedelta(minutes=i),
                    **sample_insert().model_dump(exclude={"name"}),
                )
            )
        db.commit()

    first = sql_store.select_page(0, 9)
    second = sql_store.select_page(10, 19)

    assert sql_store.count() == 15
    assert [r.name for r in first][:3] == ["user-14", "user-13", "user-12"]
    assert len(second) == 5
    assert second[-1].name == "user-0"


def test_sql_errors_become_store_errors(sql_store):
    # NOT NULL violation on age_group
    bad = SurveyInsert.model_construct(**{**sample_insert().model_dump(), "age_group": None})
    with pytest.raises(StoreError) as exc:
        sql_store.insert(bad)
    assert exc.value.operation == "insert"


# ---- Supabase store ----

def test_get_client_requires_credentials():
    with pytest.raises(ValueError):
        get_client(None, "key")
    with pytest.raises(ValueError):
        get_client("https://example.supabase.co", "")


def test_supabase_count_uses_head_request():
    client = MagicMock()
    query = client.table.return_value.select.return_value
    query.execute.return_value = MagicMock(count=25)

    store = SupabaseSurveyStore(client)

    assert store.count() == 25
    client.table.assert_called_with("telegram_survey")
    client.table.return_value.select.assert_called_with("*", count="exact", head=True)


def test_supabase_select_page_orders_and_ranges():
    client = MagicMock()
    ranged = client.table.return_value.select.return_value.order.return_value.range.return_value
    ranged.execute.return_value = MagicMock(
        data=[
            {
                "id": "b1c2",
                "name": None,
                "age_group": "45+",
                "usage_duration": "1–3 years",
                "usage_reason": ["To join groups and channels"],
                "content_preference": ["💬 Motivational Quotes"],
                "regular_bots_or_channels": None,
                "recommend_telegram": "Maybe",
                "improvement_suggestions": None,
                "submitted_at": "2025-03-05T14:30:00+00:00",
            }
        ]
    )

    rows = SupabaseSurveyStore(client).select_page(10, 14)

    client.table.return_value.select.return_value.order.assert_called_with("submitted_at", desc=True)
    client.table.return_value.select.return_value.order.return_value.range.assert_called_with(10, 14)
    assert rows[0].id == "b1c2"
    assert rows[0].submitted_at.year == 2025


def test_supabase_insert_sends_none_not_empty_strings():
    client = MagicMock()
    client.table.return_value.insert.return_value.execute.return_value = MagicMock(data=[])

    result = SupabaseSurveyStore(client).insert(sample_insert())

    sent = client.table.return_value.insert.call_args.args[0]
    assert sent["name"] is None
    assert sent["improvement_suggestions"] is None
    assert "id" not in sent and "submitted_at" not in sent
    assert result is None


def test_supabase_failures_become_store_errors():
    client = MagicMock()
    client.table.return_value.select.return_value.execute.side_effect = RuntimeError("network down")

    with pytest.raises(StoreError) as exc:
        SupabaseSurveyStore(client).count()
    assert exc.value.operation == "count"


def test_supabase_malformed_row_becomes_store_error():
    client = MagicMock()
    ranged = client.table.return_value.select.return_value.order.return_value.range.return_value
    ranged.execute.return_value = MagicMock(data=[{"id": "x1", "age_group": "45+"}])

    with pytest.raises(StoreError) as exc:
        SupabaseSurveyStore(client).select_page(0, 9)
    assert exc.value.operation == "select_page"


def test_supabase_malformed_insert_result_becomes_store_error():
    client = MagicMock()
    client.table.return_value.insert.return_value.execute.return_value = MagicMock(data=[{"id": None}])

    with pytest.raises(StoreError) as exc:
        SupabaseSurveyStore(client).insert(sample_insert())
    assert exc.value.operation == "insert"
