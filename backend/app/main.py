# FastAPI 진입점
# - MongoDB 연결 (앱 시작 시 1회, 실패하면 서버 시작 중단)
# - 라우터 등록
# - 서비스 예외 -> HTTP 상태 코드 매핑

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.database import connect_mongo, get_user_collection
from .core.exceptions import InvalidIdentifier, MalformedPayload, StoreUnavailable, UserNotFound
from .core.logging import configure_logging
from .repositories.user_repository import UserRepository
from .api.v1.users import router as user_router

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


def create_app(repository: Optional[UserRepository] = None) -> FastAPI:
    """애플리케이션을 생성합니다.

    repository 를 넘기면 MongoDB 에 연결하지 않고 그 저장소를 사용합니다 (테스트용).
    """
    configure_logging(settings.LOG_LEVEL)

    # 연결 실패 시 예외를 삼키지 않습니다: uvicorn 이 시작을 중단하고 프로세스가 종료됩니다.
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if app.state.user_repository is None:
            client = await connect_mongo(settings)
            app.state.user_repository = UserRepository(get_user_collection(client, settings))
        try:
            yield
        finally:
            if client is not None:
                client.close()
                logger.info("[MongoDB] 연결 종료")

    app = FastAPI(
        title=settings.APP_NAME,
        description="MongoDB 기반 사용자 생성/조회/삭제 API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.user_repository = repository

    @app.exception_handler(InvalidIdentifier)
    async def invalid_identifier_handler(request: Request, exc: InvalidIdentifier):
        return _error(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(UserNotFound)
    async def user_not_found_handler(request: Request, exc: UserNotFound):
        return _error(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(MalformedPayload)
    async def malformed_payload_handler(request: Request, exc: MalformedPayload):
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)

    # 본문 JSON 디코딩/타입 오류는 FastAPI 기본값(422) 대신 400 으로 응답
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Malformed payload") if errors else "Malformed payload"
        return await malformed_payload_handler(request, MalformedPayload(message))

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    app.include_router(user_router)
    return app


app = create_app()
