# 사용자 라우터
# - 조회: GET /user/{user_id}
# - 생성: POST /user
# - 삭제: DELETE /user/{user_id}

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from ...schemas.user_schema import UserCreate, UserPublic
from ...services.user_service import UserService, get_user_service

router = APIRouter(prefix="/user", tags=["user"])

@router.get("/{user_id}", response_model=UserPublic, summary="id 로 사용자 조회")
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return await service.get_user(user_id)

@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED, summary="사용자 생성 (id 는 서버에서 생성)")
async def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    return await service.create_user(payload)

@router.delete("/{user_id}", response_class=PlainTextResponse, summary="id 로 사용자 삭제")
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    oid = await service.delete_user(user_id)
    return f"Deleted user {oid}\n"
