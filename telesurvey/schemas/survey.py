from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional, List, Literal

# -- 선택지 --

AGE_GROUPS = [
    "Under 18",
    "18–24",
    "25–34",
    "35–44",
    "45+",
]

USAGE_DURATIONS = [
    "Less than 6 months",
    "6 months – 1 year",
    "1–3 years",
    "More than 3 years",
]

OTHER_REASON = "Other"  # 자유 입력값으로 치환되는 센티넬

USAGE_REASONS = [
    "To join groups and channels",
    "For privacy and security",
    "For cloud-based messaging",
    "To download movies, web series, or books",
    "For business/marketing purposes",
    "To chat with friends",
    "For bots and automation",
    OTHER_REASON,
]

CONTENT_PREFERENCES = [
    "📽 Movies & Web Series",
    "📚 E-books & Study Material",
    "🎓 Educational Content",
    "📰 News & Updates",
    "💸 Job Alerts",
    "🎮 Gaming Tips",
    "💬 Motivational Quotes",
    "🤖 Useful Bots",
    "📱 Tech Updates",
    "🎧 Music & Podcasts",
]

RECOMMEND_OPTIONS = ["Yes", "No", "Maybe"]


# -- Request --

# 설문 작성 중 상태 (other_usage_reason 은 저장되지 않는 임시 입력칸)
class SurveyDraft(BaseModel):
    name: str = ""
    age_group: str = ""
    usage_duration: str = ""
    usage_reason: List[str] = Field(default_factory=list)
    content_preference: List[str] = Field(default_factory=list)
    regular_bots_or_channels: str = ""
    recommend_telegram: str = ""
    improvement_suggestions: str = ""
    other_usage_reason: str = ""


# 저장소 insert 요청 - id / submitted_at 은 저장소가 부여
class SurveyInsert(BaseModel):
    name: Optional[str] = None
    age_group: str
    usage_duration: str
    usage_reason: List[str]
    content_preference: List[str]
    regular_bots_or_channels: Optional[str] = None
    recommend_telegram: str
    improvement_suggestions: Optional[str] = None


# -- Response --

class SurveyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: Optional[str] = None
    age_group: str
    usage_duration: str
    usage_reason: List[str] = Field(default_factory=list)
    content_preference: List[str] = Field(default_factory=list)
    regular_bots_or_channels: Optional[str] = None
    recommend_telegram: str
    improvement_suggestions: Optional[str] = None
    submitted_at: datetime


# 차트 한 칸 {label, count}
class ChartPoint(BaseModel):
    label: str
    count: int


class Distributions(BaseModel):
    age_group: List[ChartPoint] = Field(default_factory=list)
    recommendation: List[ChartPoint] = Field(default_factory=list)
    usage_duration: List[ChartPoint] = Field(default_factory=list)
    content_preference: List[ChartPoint] = Field(default_factory=list)


# 화면 알림 (토스트)
class Notice(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class SubmitResponse(BaseModel):
    message: str
    record: Optional[SurveyResponse] = None


class DashboardOut(BaseModel):
    page: int
    page_size: int
    total_count: int
    total_pages: int
    status: Literal["idle", "loading", "ready", "failed"]
    notice: Optional[Notice] = None
    responses: List[SurveyResponse]
    distributions: Distributions
