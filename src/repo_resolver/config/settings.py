"""
설정 관리 모듈

환경 변수를 통한 시스템 설정을 관리합니다.
"""

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from ..exceptions import ConfigurationException

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """시스템 설정 관리 클래스"""

    # 보안 설정
    whitelisted_owners: list[str] = Field(
        default_factory=list,
        description="코드 실행이 허용된 저장소 소유자 목록"
    )
    whitelist_case_sensitive: bool = Field(
        default=True,
        description="소유자 이름 비교 시 대소문자 구분 여부"
    )

    # 캐시 설정
    cache_dir: str = Field(
        default="./cache/repos",
        description="저장소 복제본 캐시 루트 디렉토리"
    )
    cache_max_age_hours: Optional[int] = Field(
        default=None,
        description="캐시 유효 시간 (시간, 지정하지 않으면 만료되지 않음)"
    )
    oauth_token: Optional[str] = Field(
        default=None,
        description="저장소 복제용 OAuth 토큰"
    )

    # GitHub API 설정
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub API 기본 URL"
    )
    github_token: Optional[str] = Field(
        default=None,
        description="GitHub API 토큰"
    )
    github_username: Optional[str] = Field(
        default=None,
        description="GitHub 기본 인증 사용자 이름"
    )
    github_password: Optional[str] = Field(
        default=None,
        description="GitHub 기본 인증 비밀번호"
    )
    github_api_timeout: int = Field(
        default=30,
        description="GitHub API 요청 타임아웃 (초)"
    )

    # 로깅 설정
    log_level: str = Field(
        default="INFO",
        description="로그 레벨"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="로그 포맷"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="로그 파일 경로"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        # 환경 변수 이름 대소문자 무시
        case_sensitive = False

    def validate_configuration(self) -> None:
        """설정 유효성 검증"""
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationException(
                "LOG_LEVEL", f"지원하지 않는 로그 레벨입니다: {self.log_level}"
            )

        if self.github_api_timeout <= 0:
            raise ConfigurationException(
                "GITHUB_API_TIMEOUT", "0보다 커야 합니다"
            )

        if self.cache_max_age_hours is not None and self.cache_max_age_hours <= 0:
            raise ConfigurationException(
                "CACHE_MAX_AGE_HOURS", "0보다 커야 합니다"
            )

        # 기본 인증은 사용자 이름과 비밀번호가 함께 필요
        if bool(self.github_username) != bool(self.github_password):
            raise ConfigurationException(
                "GITHUB_USERNAME/GITHUB_PASSWORD", "기본 인증 사용 시 둘 다 필요합니다"
            )

        # 캐시 디렉토리 생성
        os.makedirs(self.cache_dir, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    """
    설정 인스턴스를 반환합니다 (싱글톤 패턴)

    Returns:
        Settings: 설정 인스턴스
    """
    settings = Settings()
    settings.validate_configuration()
    return settings
