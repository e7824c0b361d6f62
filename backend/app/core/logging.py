# 로깅 설정
# - 앱 시작 시 1회 호출
# - 각 모듈은 logging.getLogger(__name__) 로 로거를 가져다 씁니다

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
