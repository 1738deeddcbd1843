"""
GitHub API 클라이언트 모듈

저장소 정보와 파일 내용을 GitHub REST API로 조회하는 기능을 제공합니다.
"""

import base64
import binascii
from abc import ABC, abstractmethod
from typing import Any, Optional
from urllib.parse import quote

import aiohttp

from ..exceptions import RemoteFetchFailed
from ..utils.logging import get_logger

logger = get_logger(__name__)


class RemoteApiClient(ABC):
    """원격 저장소 API 클라이언트 추상 클래스"""

    @abstractmethod
    async def get_repo(self, owner: str, project: str) -> dict[str, Any]:
        """
        저장소 정보 조회 (추상 메서드)

        Args:
            owner: 저장소 소유자
            project: 저장소 이름

        Returns:
            저장소 메타데이터
        """
        pass

    @abstractmethod
    async def get_file_contents(self, owner: str, project: str, path: str) -> str:
        """
        파일 내용 조회 (추상 메서드)

        Args:
            owner: 저장소 소유자
            project: 저장소 이름
            path: 저장소 내 파일 경로

        Returns:
            디코딩된 파일 내용

        Raises:
            RemoteFetchFailed: 조회 실패 시
        """
        pass

    async def close(self) -> None:
        """리소스 정리"""
        pass


class GitHubClient(RemoteApiClient):
    """GitHub REST API 클라이언트"""

    def __init__(self, settings):
        """
        GitHub 클라이언트 초기화

        Args:
            settings: 시스템 설정
        """
        self.settings = settings
        self.base_url = settings.github_api_url.rstrip('/')
        self.session: Optional[aiohttp.ClientSession] = None
        self.logger = logger

    def _build_headers(self) -> dict[str, str]:
        headers = {
            'User-Agent': 'repo-resolver/0.1',
            'Accept': 'application/vnd.github+json'
        }
        if self.settings.github_token:
            headers['Authorization'] = f"Bearer {self.settings.github_token}"
        return headers

    async def _get_session(self) -> aiohttp.ClientSession:
        """HTTP 세션 생성"""
        if not self.session:
            auth = None
            if self.settings.github_username and self.settings.github_password:
                auth = aiohttp.BasicAuth(self.settings.github_username, self.settings.github_password)

            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.github_api_timeout),
                headers=self._build_headers(),
                auth=auth
            )
        return self.session

    async def _get_json(self, url: str, owner: str, project: str, path: Optional[str] = None) -> Any:
        session = await self._get_session()

        try:
            async with session.get(url) as response:
                if response.status != 200:
                    detail = await response.text()
                    self.logger.error(f"GitHub API 오류: HTTP {response.status} - {url}")
                    raise RemoteFetchFailed(owner, project, path, detail.strip(), response.status)
                return await response.json()

        except aiohttp.ClientError as e:
            self.logger.error(f"GitHub API 요청 오류: {e}")
            raise RemoteFetchFailed(owner, project, path, f"요청 오류: {e}") from e

    async def get_repo(self, owner: str, project: str) -> dict[str, Any]:
        """GitHub 저장소 정보 조회"""
        url = f"{self.base_url}/repos/{owner}/{project}"
        return await self._get_json(url, owner, project)

    async def get_file_contents(self, owner: str, project: str, path: str) -> str:
        """GitHub 파일 내용 조회"""
        url = f"{self.base_url}/repos/{owner}/{project}/contents/{quote(path)}"
        body = await self._get_json(url, owner, project, path)

        # 디렉토리 경로면 목록(배열)이 반환됨
        if not isinstance(body, dict) or body.get('type') != 'file':
            raise RemoteFetchFailed(owner, project, path, "파일이 아닌 경로입니다")

        if body.get('encoding') != 'base64':
            raise RemoteFetchFailed(
                owner, project, path, f"지원하지 않는 인코딩입니다: {body.get('encoding')}"
            )

        try:
            return base64.b64decode(body.get('content', '')).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise RemoteFetchFailed(owner, project, path, f"내용 디코딩 실패: {e}") from e

    async def close(self) -> None:
        """세션 정리"""
        if self.session:
            await self.session.close()
            self.session = None

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        await self.close()
