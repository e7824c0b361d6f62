# MongoDB 연결 관리
# - 프로세스 시작 시 1회 연결 + ping 으로 실제 연결 확인
# - 연결 실패는 치명적 오류: 예외를 그대로 올려 서버가 요청을 받기 전에 종료되게 함
# - 클라이언트는 전역 변수가 아니라 app.state 에 보관하고 의존성으로 주입

import logging
import re

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from .config import Settings
from .exceptions import StoreUnavailable

logger = logging.getLogger(__name__)

_CREDENTIALS_RE = re.compile(r"//[^@/]+@")


def mask_uri(uri: str) -> str:
    """로그 출력용으로 URI 안의 사용자명/비밀번호를 가립니다."""
    return _CREDENTIALS_RE.sub("//***@", uri)


async def connect_mongo(settings: Settings) -> AsyncIOMotorClient:
    """MongoDB 클라이언트를 만들고 ping 으로 연결을 확인합니다.

    Raises:
        StoreUnavailable: 클라이언트 생성 또는 ping 실패
    """
    uri = mask_uri(settings.MONGODB_URI)
    try:
        # motor 클라이언트는 내부 커넥션 풀을 가지며 여러 요청에서 동시에 사용해도 안전합니다.
        client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            timeoutMS=settings.MONGODB_TIMEOUT_MS,
        )
    except PyMongoError as e:
        logger.error(f"[MongoDB] 클라이언트 생성 실패 ({uri}): {e}")
        raise StoreUnavailable("connect", str(e)) from e

    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        logger.error(f"[MongoDB] ping 실패 ({uri}): {e}")
        raise StoreUnavailable("ping", str(e)) from e

    logger.info(f"[MongoDB] 연결 성공: {uri}")
    return client


def get_user_collection(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorCollection:
    return client[settings.MONGODB_DATABASE][settings.MONGODB_COLLECTION]
