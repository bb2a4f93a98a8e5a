# telesurvey/main.py

# ------------------------
# 환경 변수 로드
# ------------------------
from dotenv import load_dotenv
load_dotenv()

import logging

# ------------------------
# FastAPI, CORS 미들웨어 import
# ------------------------
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from telesurvey.config import settings

# ------------------------
# 라우터 import
# ------------------------
from telesurvey.routers import survey as survey_router
from telesurvey.routers import dashboard as dashboard_router

# ------------------------
# 0) 로깅
# ------------------------
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ------------------------
# 1) FastAPI 앱 생성
# ------------------------
app = FastAPI(title="Telegram Survey")

# ------------------------
# 2) CORS 미들웨어 추가
#    - 기본값은 전체 허용 (CORS_ALLOW_ORIGINS 로 제한)
# ------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,  # 쿠키 안 쓰면 False
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------
# 3) 라우터 등록
#    - 설문 폼 (/, /survey, /api/survey)
#    - 결과 대시보드 (/dashboard, /api/dashboard)
# ------------------------
app.include_router(survey_router.router)
app.include_router(dashboard_router.router)

# ------------------------
# 4) health check
# ------------------------
@app.get("/health")
def health():
    return {"ok": True}
