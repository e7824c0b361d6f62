# ObjectId 검증 유틸리티
# - 경로 파라미터(24자리 16진수 문자열)를 12바이트 ObjectId 로 변환
# - DB 호출 전에 잘못된 형식을 걸러냄 (I/O 없음)

import string

from bson import ObjectId

from .exceptions import InvalidIdentifier

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_object_id(value: str) -> ObjectId:
    """24자리 16진수 문자열을 ObjectId 로 변환합니다.

    ObjectId 생성자는 12바이트 bytes 도 받기 때문에 str 여부와 길이를 먼저 확인합니다.

    Raises:
        InvalidIdentifier: 문자열이 아니거나, 길이가 24가 아니거나, 16진수가 아닌 문자가 있는 경우
    """
    if not isinstance(value, str) or len(value) != 24 or not _HEX_DIGITS.issuperset(value):
        raise InvalidIdentifier(value)
    return ObjectId(value)
