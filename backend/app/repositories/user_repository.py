# 사용자 저장소 레이어
# - 데이터 접근(조회/생성/삭제)만 담당 (서비스 로직 분리)
# - 고정된 컬렉션 하나에 대해서만 동작
# - pymongo 오류는 StoreUnavailable 로 변환하여 "문서 없음"과 구분
# - BSON 인코딩 오류는 MalformedPayload (요청 값 문제)

import logging
from typing import Optional

from bson import ObjectId
from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from ..core.exceptions import MalformedPayload, StoreUnavailable

logger = logging.getLogger(__name__)

class UserRepository:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_by_id(self, oid: ObjectId) -> Optional[dict]:
        try:
            return await self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"[UserRepository] find 실패 (_id={oid}): {e}", exc_info=True)
            raise StoreUnavailable("find", str(e)) from e

    async def insert(self, document: dict) -> ObjectId:
        try:
            result = await self.collection.insert_one(document)
        except (BSONError, UnicodeEncodeError) as e:
            # 문서를 BSON 으로 인코딩하지 못함 (DocumentTooLarge 포함): 요청 값의 문제
            logger.warning(f"[UserRepository] insert 거부 (BSON 인코딩 실패): {e}")
            raise MalformedPayload(str(e)) from e
        except PyMongoError as e:
            logger.error(f"[UserRepository] insert 실패: {e}", exc_info=True)
            raise StoreUnavailable("insert", str(e)) from e
        return result.inserted_id

    async def delete_by_id(self, oid: ObjectId) -> int:
        try:
            result = await self.collection.delete_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"[UserRepository] delete 실패 (_id={oid}): {e}", exc_info=True)
            raise StoreUnavailable("delete", str(e)) from e
        return result.deleted_count
