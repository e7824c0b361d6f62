# 사용자 서비스 레이어
# - id 검증 -> 저장소 호출 -> 응답 스키마 변환
# - 조회/삭제 대상이 없으면 UserNotFound, 저장소 오류는 StoreUnavailable 그대로 전파

import logging

from bson import ObjectId
from fastapi import Depends, Request

from ..core.exceptions import UserNotFound
from ..core.identifiers import parse_object_id
from ..repositories.user_repository import UserRepository
from ..schemas.user_schema import UserCreate, UserPublic

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def get_user(self, user_id: str) -> UserPublic:
        oid = parse_object_id(user_id)
        document = await self.repo.find_by_id(oid)
        if document is None:
            raise UserNotFound(user_id)
        return UserPublic.from_document(document)

    async def create_user(self, payload: UserCreate) -> UserPublic:
        # id 는 삽입 전에 서버에서 생성 (클라이언트 값은 스키마 단계에서 이미 버려짐)
        document = {"_id": ObjectId(), **payload.model_dump()}
        inserted_id = await self.repo.insert(document)
        logger.info(f"[UserService] 사용자 생성: {inserted_id}")
        return UserPublic.from_document(document)

    async def delete_user(self, user_id: str) -> ObjectId:
        oid = parse_object_id(user_id)
        deleted = await self.repo.delete_by_id(oid)
        if deleted == 0:
            raise UserNotFound(user_id)
        logger.info(f"[UserService] 사용자 삭제: {oid}")
        return oid


def get_user_repository(request: Request) -> UserRepository:
    # startup 훅에서 app.state 에 넣어 둔 저장소 (테스트에서는 가짜 저장소)
    return request.app.state.user_repository


def get_user_service(repo: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repo)
