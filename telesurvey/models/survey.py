# telesurvey/models/survey.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.types import JSON
from telesurvey.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TelegramSurvey(Base):
    __tablename__ = "telegram_survey"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=True)

    age_group = Column(String(50), nullable=False)
    usage_duration = Column(String(50), nullable=False)

    # 선택 순서 유지 ["To chat with friends", "직접 입력한 이유", ...]
    usage_reason = Column(JSON, nullable=False)
    content_preference = Column(JSON, nullable=False)

    regular_bots_or_channels = Column(Text, nullable=True)
    recommend_telegram = Column(String(10), nullable=False)
    improvement_suggestions = Column(Text, nullable=True)

    submitted_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
