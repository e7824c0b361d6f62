# 테스트 공용 픽스처
# - MongoDB 없이 동작하는 메모리 저장소(FakeUserRepository)
# - 가짜 저장소를 주입한 FastAPI TestClient

from typing import Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.core.exceptions import StoreUnavailable
from app.main import create_app


class FakeUserRepository:
    """UserRepository 와 같은 인터페이스의 메모리 저장소.

    fail=True 이면 모든 작업이 StoreUnavailable 을 발생시킵니다.
    """

    def __init__(self, fail: bool = False):
        self.documents: dict = {}
        self.fail = fail
        self.calls: list = []

    def _check(self, operation: str):
        self.calls.append(operation)
        if self.fail:
            raise StoreUnavailable(operation, "connection refused")

    async def find_by_id(self, oid: ObjectId) -> Optional[dict]:
        self._check("find")
        document = self.documents.get(oid)
        return dict(document) if document is not None else None

    async def insert(self, document: dict) -> ObjectId:
        self._check("insert")
        self.documents[document["_id"]] = dict(document)
        return document["_id"]

    async def delete_by_id(self, oid: ObjectId) -> int:
        self._check("delete")
        return 1 if self.documents.pop(oid, None) is not None else 0


@pytest.fixture
def repo():
    return FakeUserRepository()


@pytest.fixture
def client(repo):
    with TestClient(create_app(repository=repo)) as c:
        yield c


@pytest.fixture
def failing_client():
    with TestClient(create_app(repository=FakeUserRepository(fail=True))) as c:
        yield c
