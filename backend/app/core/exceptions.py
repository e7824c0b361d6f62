# 커스텀 예외 클래스 정의
# 라우터는 이 예외들을 HTTP 상태 코드로 변환합니다 (main.py 의 exception handler 참고).
#   InvalidIdentifier, UserNotFound -> 404
#   MalformedPayload                -> 400
#   StoreUnavailable                -> 500

class UserServiceError(Exception):
    """사용자 서비스 관련 기본 예외 클래스

    모든 사용자 관련 예외의 기본 클래스입니다.
    try-except 블록에서 이 타입만 잡으면 서비스 예외 전체를 처리할 수 있습니다.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidIdentifier(UserServiceError):
    """경로 파라미터가 24자리 16진수 ObjectId 형식이 아닐 때 발생하는 예외

    Attributes:
        value: 검증에 실패한 원본 값
    """
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid user id: {value!r}")


class UserNotFound(UserServiceError):
    """해당 id의 사용자 문서가 없을 때 발생하는 예외"""
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class StoreUnavailable(UserServiceError):
    """MongoDB 연결 또는 쿼리 실패 시 발생하는 예외

    "문서 없음"과 구분되는 인프라 오류입니다. 시작 시점에 발생하면 서버는 시작되지 않습니다.

    Attributes:
        operation: 실패한 작업 이름 (예: "find", "insert", "ping")
        message: 에러 메시지
    """
    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"[MongoDB] {operation} 실패: {message}")


class MalformedPayload(UserServiceError):
    """요청 본문을 User 로 디코딩하거나 BSON 으로 인코딩할 수 없을 때 발생하는 예외

    JSON 형식 오류, 필드 타입 오류, BSON 으로 저장할 수 없는 값(짝 없는 서로게이트 문자,
    최대 문서 크기 초과 등)을 포함합니다.

    Attributes:
        message: 에러 메시지
    """
    def __init__(self, message: str):
        super().__init__(f"Malformed payload: {message}")
