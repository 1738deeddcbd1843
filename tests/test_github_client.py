"""
GitHub API 클라이언트 테스트 모듈

aiohttp 세션을 모킹하여 응답 처리와 오류 변환을 테스트합니다.
"""

import base64
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from repo_resolver.config.settings import Settings
from repo_resolver.exceptions import RemoteFetchFailed
from repo_resolver.repos.github_client import GitHubClient


def make_session(status=200, json_body=None, text_body=""):
    """모킹된 세션 생성"""
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=json_body)
    response.text = AsyncMock(return_value=text_body)

    session = MagicMock()
    session.get.return_value.__aenter__.return_value = response
    session.close = AsyncMock()
    return session


def file_body(content: str) -> dict:
    return {
        "type": "file",
        "encoding": "base64",
        "path": "scripts/run.rb",
        "content": base64.b64encode(content.encode("utf-8")).decode("ascii") + "\n"
    }


@pytest.fixture
def settings():
    return Settings(github_token="api-token")


@pytest.fixture
def client(settings):
    return GitHubClient(settings)


class TestGetFileContents:
    """파일 내용 조회 테스트"""

    @pytest.mark.asyncio
    async def test_decodes_base64_content(self, client):
        """base64 내용 디코딩 테스트"""
        client.session = make_session(json_body=file_body("puts 2"))

        content = await client.get_file_contents("acme", "widgets", "scripts/run.rb")

        assert content == "puts 2"
        client.session.get.assert_called_once_with(
            "https://api.github.com/repos/acme/widgets/contents/scripts/run.rb"
        )

    @pytest.mark.asyncio
    async def test_not_found(self, client):
        """404 응답 테스트"""
        client.session = make_session(status=404, text_body='{"message": "Not Found"}')

        with pytest.raises(RemoteFetchFailed) as exc_info:
            await client.get_file_contents("acme", "widgets", "missing.rb")

        assert exc_info.value.status == 404
        assert exc_info.value.path == "missing.rb"
        assert "Not Found" in exc_info.value.error_detail

    @pytest.mark.asyncio
    async def test_directory_listing_rejected(self, client):
        """디렉토리 경로 거부 테스트"""
        client.session = make_session(json_body=[{"type": "file", "name": "run.rb"}])

        with pytest.raises(RemoteFetchFailed):
            await client.get_file_contents("acme", "widgets", "scripts")

    @pytest.mark.asyncio
    async def test_unsupported_encoding(self, client):
        """지원하지 않는 인코딩 테스트"""
        body = {"type": "file", "encoding": "none", "content": ""}
        client.session = make_session(json_body=body)

        with pytest.raises(RemoteFetchFailed) as exc_info:
            await client.get_file_contents("acme", "widgets", "big.bin")

        assert "none" in exc_info.value.error_detail

    @pytest.mark.asyncio
    async def test_client_error_wrapped(self, client):
        """연결 오류 변환 테스트"""
        session = MagicMock()
        session.get.side_effect = aiohttp.ClientConnectionError("connection refused")
        client.session = session

        with pytest.raises(RemoteFetchFailed) as exc_info:
            await client.get_file_contents("acme", "widgets", "run.rb")

        assert exc_info.value.status is None
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientError)


class TestGetRepo:
    """저장소 정보 조회 테스트"""

    @pytest.mark.asyncio
    async def test_get_repo(self, client):
        """저장소 정보 조회 테스트"""
        client.session = make_session(json_body={"full_name": "acme/widgets"})

        metadata = await client.get_repo("acme", "widgets")

        assert metadata == {"full_name": "acme/widgets"}
        client.session.get.assert_called_once_with("https://api.github.com/repos/acme/widgets")

    @pytest.mark.asyncio
    async def test_get_repo_error(self, client):
        """저장소 정보 조회 실패 테스트"""
        client.session = make_session(status=403, text_body="rate limited")

        with pytest.raises(RemoteFetchFailed) as exc_info:
            await client.get_repo("acme", "widgets")

        assert exc_info.value.status == 403
        assert exc_info.value.path is None


class TestSession:
    """세션 관리 테스트"""

    def test_initialization(self, client):
        """초기화 테스트"""
        assert client.base_url == "https://api.github.com"
        assert client.session is None

    def test_trailing_slash_stripped(self):
        """API URL 끝 슬래시 제거 테스트"""
        client = GitHubClient(Settings(github_api_url="https://ghe.example.com/api/v3/"))

        assert client.base_url == "https://ghe.example.com/api/v3"

    def test_headers_with_token(self, client):
        """토큰 인증 헤더 테스트"""
        headers = client._build_headers()

        assert headers['Authorization'] == "Bearer api-token"
        assert headers['Accept'] == "application/vnd.github+json"

    def test_headers_without_token(self):
        """토큰 없는 헤더 테스트"""
        headers = GitHubClient(Settings(github_token=None))._build_headers()

        assert 'Authorization' not in headers

    @pytest.mark.asyncio
    async def test_session_created_lazily(self, client):
        """세션 지연 생성 테스트"""
        session = await client._get_session()

        try:
            assert isinstance(session, aiohttp.ClientSession)
            assert await client._get_session() is session
        finally:
            await client.close()

        assert client.session is None

    @pytest.mark.asyncio
    async def test_context_manager_closes_session(self, client):
        """컨텍스트 매니저 종료 시 세션 정리 테스트"""
        session = make_session()

        async with client:
            client.session = session

        session.close.assert_awaited_once()
        assert client.session is None
