# telesurvey/services/analytics.py
# 현재 페이지에 불러온 응답만으로 차트용 분포 계산 (전체 데이터 집계 아님)
import re
from collections import Counter
from typing import Iterable, List, Sequence

from telesurvey.schemas.survey import ChartPoint, Distributions, SurveyResponse

TOP_CONTENT_LIMIT = 10

# 앞쪽 이모지(공백 아닌 토큰) + 공백 하나 제거
_LABEL_PREFIX = re.compile(r"^\S+ ")


def _to_points(counts: Counter) -> List[ChartPoint]:
    # Counter 는 처음 등장한 순서를 유지
    return [ChartPoint(label=label, count=n) for label, n in counts.items()]


def frequency(values: Iterable[str]) -> List[ChartPoint]:
    return _to_points(Counter(values))


def strip_label_prefix(label: str) -> str:
    return _LABEL_PREFIX.sub("", label, count=1)


def age_group_distribution(responses: Sequence[SurveyResponse]) -> List[ChartPoint]:
    return frequency(r.age_group for r in responses)


def recommendation_distribution(responses: Sequence[SurveyResponse]) -> List[ChartPoint]:
    return frequency(r.recommend_telegram for r in responses)


def usage_duration_distribution(responses: Sequence[SurveyResponse]) -> List[ChartPoint]:
    return frequency(r.usage_duration for r in responses)


def content_preference_distribution(
    responses: Sequence[SurveyResponse], limit: int = TOP_CONTENT_LIMIT
) -> List[ChartPoint]:
    counts = Counter(item for r in responses for item in r.content_preference)
    points = [ChartPoint(label=strip_label_prefix(label), count=n) for label, n in counts.items()]
    # sorted 는 stable - 동률이면 처음 등장한 순서
    points = sorted(points, key=lambda p: p.count, reverse=True)
    return points[:limit]


def build_distributions(
    responses: Sequence[SurveyResponse], top_content_limit: int = TOP_CONTENT_LIMIT
) -> Distributions:
    return Distributions(
        age_group=age_group_distribution(responses),
        recommendation=recommendation_distribution(responses),
        usage_duration=usage_duration_distribution(responses),
        content_preference=content_preference_distribution(responses, top_content_limit),
    )
