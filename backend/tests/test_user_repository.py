# 저장소 테스트: motor 컬렉션을 AsyncMock 으로 대체
import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import bson
import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect, DocumentTooLarge, ServerSelectionTimeoutError

from app.core.exceptions import MalformedPayload, StoreUnavailable
from app.repositories.user_repository import UserRepository

def _collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection

def test_find_by_id_queries_by_object_id():
    oid = ObjectId()
    collection = _collection()
    collection.find_one.return_value = {"_id": oid, "name": "Ada"}

    document = asyncio.run(UserRepository(collection).find_by_id(oid))

    collection.find_one.assert_awaited_once_with({"_id": oid})
    assert document["name"] == "Ada"

def test_find_by_id_missing_returns_none():
    collection = _collection()
    collection.find_one.return_value = None
    assert asyncio.run(UserRepository(collection).find_by_id(ObjectId())) is None

def test_insert_returns_inserted_id():
    oid = ObjectId()
    collection = _collection()
    collection.insert_one.return_value = SimpleNamespace(inserted_id=oid)

    assert asyncio.run(UserRepository(collection).insert({"_id": oid, "name": "Ada"})) == oid

def test_delete_by_id_returns_deleted_count():
    oid = ObjectId()
    collection = _collection()
    collection.delete_one.return_value = SimpleNamespace(deleted_count=0)

    assert asyncio.run(UserRepository(collection).delete_by_id(oid)) == 0
    collection.delete_one.assert_awaited_once_with({"_id": oid})

@pytest.mark.parametrize("method, operation, arg", [
    ("find_by_id", "find", ObjectId()),
    ("insert", "insert", {"_id": ObjectId()}),
    ("delete_by_id", "delete", ObjectId()),
])
def test_driver_errors_become_store_unavailable(method, operation, arg):
    collection = _collection()
    collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
    collection.insert_one.side_effect = AutoReconnect("connection reset")
    collection.delete_one.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(StoreUnavailable) as exc_info:
        asyncio.run(getattr(UserRepository(collection), method)(arg))
    assert exc_info.value.operation == operation

def test_insert_document_too_large_is_malformed_payload():
    collection = _collection()
    collection.insert_one.side_effect = DocumentTooLarge("BSON document too large")

    with pytest.raises(MalformedPayload):
        asyncio.run(UserRepository(collection).insert({"_id": ObjectId(), "name": "A" * 10}))

def test_insert_unencodable_string_is_malformed_payload():
    # 실제 BSON 인코딩: 짝 없는 서로게이트는 UTF-8 로 인코딩할 수 없음
    collection = _collection()
    collection.insert_one.side_effect = bson.encode

    with pytest.raises(MalformedPayload):
        asyncio.run(UserRepository(collection).insert({"_id": ObjectId(), "name": "\ud800"}))
