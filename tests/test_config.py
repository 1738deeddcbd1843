"""
설정 관리 테스트 모듈

시스템 설정 관리 기능을 테스트합니다.
"""

import tempfile
from pathlib import Path

import pytest

from repo_resolver.config.settings import Settings, get_settings
from repo_resolver.exceptions import ConfigurationException


class TestSettings:
    """설정 클래스 테스트"""

    def test_default_settings(self, monkeypatch):
        """기본 설정 테스트"""
        for name in ("WHITELISTED_OWNERS", "CACHE_DIR", "OAUTH_TOKEN", "GITHUB_TOKEN", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.whitelisted_owners == []
        assert settings.whitelist_case_sensitive is True
        assert settings.cache_dir == "./cache/repos"
        assert settings.cache_max_age_hours is None
        assert settings.oauth_token is None
        assert settings.github_api_url == "https://api.github.com"
        assert settings.github_api_timeout == 30
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_settings_from_env(self, monkeypatch):
        """환경 변수로부터 설정 로드 테스트"""
        monkeypatch.setenv("WHITELISTED_OWNERS", '["acme", "octo"]')
        monkeypatch.setenv("WHITELIST_CASE_SENSITIVE", "false")
        monkeypatch.setenv("CACHE_DIR", "/tmp/cache/repos")
        monkeypatch.setenv("CACHE_MAX_AGE_HOURS", "12")
        monkeypatch.setenv("OAUTH_TOKEN", "clone-token")
        monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")
        monkeypatch.setenv("GITHUB_TOKEN", "api-token")
        monkeypatch.setenv("GITHUB_API_TIMEOUT", "10")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.whitelisted_owners == ["acme", "octo"]
        assert settings.whitelist_case_sensitive is False
        assert settings.cache_dir == "/tmp/cache/repos"
        assert settings.cache_max_age_hours == 12
        assert settings.oauth_token == "clone-token"
        assert settings.github_api_url == "https://ghe.example.com/api/v3"
        assert settings.github_token == "api-token"
        assert settings.github_api_timeout == 10
        assert settings.log_level == "DEBUG"


class TestValidateConfiguration:
    """설정 유효성 검증 테스트"""

    def test_valid_configuration_creates_cache_dir(self):
        """유효한 설정 및 캐시 디렉토리 생성 테스트"""
        cache_dir = Path(tempfile.mkdtemp()) / "repos"
        settings = Settings(cache_dir=str(cache_dir))

        settings.validate_configuration()

        assert cache_dir.is_dir()

    def test_invalid_log_level(self):
        """잘못된 로그 레벨 테스트"""
        settings = Settings(log_level="VERBOSE", cache_dir=tempfile.mkdtemp())

        with pytest.raises(ConfigurationException) as exc_info:
            settings.validate_configuration()

        assert exc_info.value.config_key == "LOG_LEVEL"

    def test_invalid_timeout(self):
        """잘못된 타임아웃 테스트"""
        settings = Settings(github_api_timeout=0, cache_dir=tempfile.mkdtemp())

        with pytest.raises(ConfigurationException) as exc_info:
            settings.validate_configuration()

        assert exc_info.value.config_key == "GITHUB_API_TIMEOUT"

    def test_invalid_max_age(self):
        """잘못된 캐시 만료 시간 테스트"""
        settings = Settings(cache_max_age_hours=-1, cache_dir=tempfile.mkdtemp())

        with pytest.raises(ConfigurationException):
            settings.validate_configuration()

    def test_partial_basic_auth(self):
        """기본 인증 일부만 설정 테스트"""
        settings = Settings(github_username="someone", cache_dir=tempfile.mkdtemp())

        with pytest.raises(ConfigurationException) as exc_info:
            settings.validate_configuration()

        assert "GITHUB_USERNAME" in exc_info.value.config_key


class TestGetSettings:
    """설정 싱글톤 테스트"""

    def test_get_settings_cached(self, monkeypatch):
        """같은 인스턴스 반환 테스트"""
        monkeypatch.setenv("CACHE_DIR", tempfile.mkdtemp())
        get_settings.cache_clear()

        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
