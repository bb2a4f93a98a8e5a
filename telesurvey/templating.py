# telesurvey/templating.py
# 서버 렌더링 템플릿 (Jinja2) 공용 인스턴스 + 필터
from datetime import datetime
from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


def format_submitted_at(value: datetime) -> str:
    # 예: Mar 05, 2025 14:30
    return value.strftime("%b %d, %Y %H:%M")


templates.env.filters["submitted_at"] = format_submitted_at
