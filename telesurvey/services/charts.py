from __future__ import annotations

from typing import Any, Dict, List

import altair as alt

from telesurvey.schemas.survey import ChartPoint, Distributions

alt.data_transformers.disable_max_rows()

COLORS = [
    "#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884D8",
    "#82CA9D", "#FFC658", "#FF7C7C", "#8DD1E1", "#D084D0",
]


def to_vega_spec(chart: alt.TopLevelMixin) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def _data(points: List[ChartPoint]) -> alt.Data:
    return alt.Data(values=[p.model_dump() for p in points])


def pie_chart(points: List[ChartPoint], title: str) -> alt.LayerChart:
    # sort=None: 데이터 순서(처음 등장 순) 그대로
    base = alt.Chart().encode(
        theta=alt.Theta("count:Q", stack=True),
        color=alt.Color("label:N", sort=None, scale=alt.Scale(range=COLORS)),
    )
    arc = base.mark_arc(outerRadius=80).encode(tooltip=["label:N", "count:Q"])
    # 조각 라벨 "18–24 42%"
    text = base.mark_text(radius=110).encode(text=alt.Text("slice_label:N"))
    return (
        alt.layer(arc, text, data=_data(points), title=title)
        .transform_joinaggregate(total="sum(count)")
        .transform_calculate(
            slice_label="datum.label + ' ' + round(datum.count / datum.total * 100) + '%'"
        )
        .properties(height=300)
    )


def bar_chart(points: List[ChartPoint], title: str, color: str) -> alt.Chart:
    return (
        alt.Chart(_data(points), title=title)
        .mark_bar(color=color)
        .encode(
            x=alt.X("label:N", sort=None, title=None, axis=alt.Axis(labelAngle=-45)),
            y=alt.Y("count:Q", title=None),
            tooltip=["label:N", "count:Q"],
        )
        .properties(height=300)
    )


def build_dashboard_charts(distributions: Distributions) -> Dict[str, Dict[str, Any]]:
    """대시보드 차트 4개를 vega-lite spec 으로"""
    return {
        "age_group": to_vega_spec(pie_chart(distributions.age_group, "Age Groups Distribution")),
        "recommendation": to_vega_spec(
            pie_chart(distributions.recommendation, "Would Recommend Telegram")
        ),
        "usage_duration": to_vega_spec(
            bar_chart(distributions.usage_duration, "Telegram Usage Duration", "#8884d8")
        ),
        "content_preference": to_vega_spec(
            bar_chart(distributions.content_preference, "Top Content Preferences", "#82ca9d")
        ),
    }
