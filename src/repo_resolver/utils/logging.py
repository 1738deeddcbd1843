"""
로깅 시스템 모듈

한국어 레벨명과 자격 증명 마스킹을 지원하는 리졸버 로깅을 제공합니다.
"""

import logging
import logging.handlers
import re
from pathlib import Path

from ..config.settings import Settings

ROOT_LOGGER_NAME = "repo_resolver"

# https://<token>:x-oauth-basic@github.com/... 형태의 복제 URL
_URL_CREDENTIALS = re.compile(r"(https?://)[^/@\s]+@")


class KoreanFormatter(logging.Formatter):
    """레벨명을 한국어로 출력하는 포맷터"""

    LEVEL_MAPPING = {
        'DEBUG': '디버그',
        'INFO': '정보',
        'WARNING': '경고',
        'ERROR': '오류',
        'CRITICAL': '치명적'
    }

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        record.levelname = self.LEVEL_MAPPING.get(levelname, levelname)
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class CredentialFilter(logging.Filter):
    """
    로그 메시지의 URL 자격 증명 마스킹 필터

    git 오류 메시지에는 토큰이 포함된 복제 URL이 그대로 들어갈 수 있으므로
    핸들러에 도달하기 전에 "https://***@" 형태로 치환합니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _URL_CREDENTIALS.sub(r"\1***@", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def _build_handlers(settings: Settings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if settings.log_file:
        log_file_path = Path(settings.log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        # 10MB, 백업 5개
        handlers.append(logging.handlers.RotatingFileHandler(
            filename=log_file_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        ))

    return handlers


def setup_logging(settings: Settings) -> logging.Logger:
    """
    리졸버 루트 로거 설정

    여러 번 호출해도 핸들러가 중복되지 않습니다.

    Args:
        settings: 시스템 설정 객체

    Returns:
        logging.Logger: 설정된 루트 로거
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper()))
    logger.handlers.clear()

    formatter = KoreanFormatter(fmt=settings.log_format, datefmt='%Y-%m-%d %H:%M:%S')
    credential_filter = CredentialFilter()

    for handler in _build_handlers(settings):
        handler.setFormatter(formatter)
        handler.addFilter(credential_filter)
        logger.addHandler(handler)

    logger.propagate = False

    logger.info("로깅 시스템이 초기화되었습니다")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    리졸버 루트 아래의 로거 반환

    모듈 이름(repo_resolver.*)은 그대로, 그 외 이름은 루트 아래에 붙입니다.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
