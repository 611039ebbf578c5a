# app/backend/main.py
import os
import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import text

from app.backend.core.config import get_settings
from app.backend.core.errors import AppError
from app.backend.core.logging_config import setup_logging
from app.db.session import get_engine

# 라우터
from app.backend.routers import auth, tweet, user

setup_logging()
logger = logging.getLogger(__name__)

settings = get_settings()

# prod 에서는 Swagger 노출 안 함
app = FastAPI(
    title="VidTube Backend",
    version=os.getenv("APP_VERSION", "0.1.0"),
    docs_url=None if settings.app_env == "prod" else "/docs",
    redoc_url=None,
)

# CORS (쿠키 기반 인증이라 credentials 허용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError):
    # 서비스 계층은 로그를 남기지 않는다 → 여기서 한 번만
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message,
                     exc_info=exc.__cause__ or exc)
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    # 깨진 JSON, 타입 불일치 등도 AppError 와 같은 바디 모양으로 400
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"success": False, "message": message})


# 라우터 등록
app.include_router(auth.auth_router)
app.include_router(user.user_router)
app.include_router(tweet.tweet_router)


@app.get("/health")
def health_app():
    return {"ok": True}


@app.get("/health/db")
def health_db():
    # Migration is a deployment concern. Runtime only verifies DB connectivity.
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception:
        logger.exception("DB health check failed")
        raise HTTPException(status_code=500, detail="Database connection failed")
