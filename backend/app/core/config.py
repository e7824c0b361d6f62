# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from pydantic import Field

# 프로젝트 루트 디렉토리 경로 찾기
# 이 파일은 backend/app/core/config.py에 있으므로 4단계 상위가 프로젝트 루트입니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "user-service"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    LOG_LEVEL: str = "INFO"

    # MongoDB 연결 문자열입니다. 운영 환경에서는 .env 또는 환경변수로 지정하세요.
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "user_service"
    MONGODB_COLLECTION: str = Field(default="users", description="사용자 문서 컬렉션명")
    # 서버 선택 타임아웃(밀리초). 이 시간 안에 연결하지 못하면 시작이 실패합니다.
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    # 개별 DB 작업 타임아웃(밀리초). pymongo의 timeoutMS 옵션으로 전달됩니다.
    MONGODB_TIMEOUT_MS: int = 10000

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
