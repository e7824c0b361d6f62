# 요청/응답 스키마 정의 (Pydantic 모델)

from pydantic import BaseModel, ConfigDict

class UserCreate(BaseModel):
    # 알 수 없는 필드(클라이언트가 보낸 id 포함)는 무시, 누락된 필드는 빈 문자열
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""

class UserPublic(BaseModel):
    id: str
    name: str = ""
    email: str = ""

    @classmethod
    def from_document(cls, document: dict) -> "UserPublic":
        return cls(
            id=str(document["_id"]),
            name=document.get("name", ""),
            email=document.get("email", ""),
        )
