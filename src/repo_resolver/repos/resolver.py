"""
저장소 파일 리졸버 오케스트레이터 모듈

식별자 파싱, 화이트리스트 검사, 캐시/원격 조회를 통합하는 메인 인터페이스를 제공합니다.
"""

from pathlib import Path
from typing import Any, Callable, Optional

from ..config.settings import Settings
from ..exceptions import FileNotFound, InvalidIdentifier, RemoteFetchFailed
from ..models.base import FileRef, RepoRef
from ..models.enums import ContentSource
from ..utils.logging import get_logger
from .cache_store import CacheStore
from .fetcher import RepositoryFetcher
from .file_handle import ExecutionStrategy, FileHandle
from .github_client import GitHubClient, RemoteApiClient
from .locator import parse_file_identifier, parse_repo_identifier
from .security import SecurityGate

logger = get_logger(__name__)


class RepoResolver:
    """저장소 파일 리졸버 오케스트레이터"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        gate: Optional[SecurityGate] = None,
        cache_store: Optional[CacheStore] = None,
        client: Optional[RemoteApiClient] = None,
        fetcher: Optional[RepositoryFetcher] = None
    ):
        """
        리졸버 초기화

        Args:
            settings: 시스템 설정 (None이면 기본 설정 사용)
            gate: 화이트리스트 검사기 (None이면 설정으로 생성)
            cache_store: 캐시 저장소 (None이면 설정으로 생성)
            client: 원격 API 클라이언트 (None이면 GitHubClient 사용)
            fetcher: 저장소 가져오기 구현 (cache_store가 없을 때만 사용)
        """
        if settings is None:
            from ..config.settings import get_settings
            settings = get_settings()

        self.settings = settings
        self.logger = logger
        if gate is None:
            gate = SecurityGate.from_settings(settings)
        if cache_store is None:
            cache_store = CacheStore(settings, fetcher)
        if client is None:
            client = GitHubClient(settings)

        self.gate = gate
        self.cache_store = cache_store
        self.client = client

    def _admit(self, owner: str, project: str) -> RepoRef:
        """화이트리스트 검사 통과 후 저장소 참조 생성"""
        self.gate.ensure_whitelisted(owner)
        return RepoRef(owner=owner, project=project)

    def _guard(self, ref: RepoRef) -> None:
        self.gate.ensure_whitelisted(ref.owner)

    def repo(self, identifier: str) -> RepoRef:
        """
        저장소 식별자를 검사된 저장소 참조로 변환

        Args:
            identifier: "owner/project" 또는 GitHub URL

        Returns:
            저장소 참조

        Raises:
            InvalidIdentifier: 식별자 형식 오류
            OwnerNotWhitelisted: 허용되지 않은 소유자
        """
        owner, project = parse_repo_identifier(identifier)
        return self._admit(owner, project)

    async def resolve_file(
        self,
        ref: RepoRef,
        path: str,
        strategy: Optional[ExecutionStrategy] = None
    ) -> FileHandle:
        """
        저장소 파일 해석

        유효한 로컬 복제본이 있으면 디스크에서, 없으면 원격 API에서 가져옵니다.
        일반 해석은 복제를 수행하지 않습니다.

        Args:
            ref: 저장소 참조
            path: 저장소 내 파일 경로
            strategy: 실행 전략 (그대로 핸들에 부착)

        Returns:
            파일 핸들

        Raises:
            OwnerNotWhitelisted: 허용되지 않은 소유자
            FileNotFound: 유효한 캐시에 파일이 없을 때
            RemoteFetchFailed: 원격 조회 실패 시
        """
        self._guard(ref)

        if not path:
            raise InvalidIdentifier(f"{ref.full_name}/", "file")

        file_ref = FileRef(repo=ref, path=path)

        if self.cache_store.is_valid(ref):
            local_path = self._local_file(ref, path)
            self.logger.debug(f"캐시에서 파일 로드: {file_ref} -> {local_path}")
            return FileHandle(file_ref, ContentSource.LOCAL, local_path=local_path, strategy=strategy)

        try:
            content = await self.client.get_file_contents(ref.owner, ref.project, path)
        except RemoteFetchFailed:
            raise
        except Exception as e:
            self.logger.error(f"원격 파일 조회 오류: {file_ref} - {e}")
            raise RemoteFetchFailed(ref.owner, ref.project, path, str(e)) from e

        self.logger.debug(f"원격에서 파일 로드: {file_ref}")
        return FileHandle(file_ref, ContentSource.REMOTE, content=content, strategy=strategy)

    def _local_file(self, ref: RepoRef, path: str) -> Path:
        clone_path = self.cache_store.cache_path_for(ref).resolve()
        local_path = (clone_path / path).resolve()

        # 복제본 밖을 가리키는 경로도 캐시에 없는 파일로 처리
        if not local_path.is_relative_to(clone_path) or not local_path.is_file():
            raise FileNotFound(ref.owner, ref.project, path)

        return local_path

    async def run_file(
        self,
        ref: RepoRef,
        path: str,
        strategy: Optional[ExecutionStrategy] = None,
        on_result: Optional[Callable[[Any], Any]] = None
    ) -> Any:
        """
        파일 해석 후 즉시 실행

        Args:
            ref: 저장소 참조
            path: 저장소 내 파일 경로
            strategy: 실행 전략
            on_result: 완료 콜백

        Returns:
            실행 결과
        """
        handle = await self.resolve_file(ref, path, strategy)
        return await handle.run(on_result)

    async def file(self, identifier: str, strategy: Optional[ExecutionStrategy] = None) -> FileHandle:
        """
        파일 식별자로 파일 해석

        Args:
            identifier: "owner/project/path" 또는 GitHub URL

        Returns:
            파일 핸들
        """
        owner, project, path = parse_file_identifier(identifier)
        ref = self._admit(owner, project)
        return await self.resolve_file(ref, path, strategy)

    async def run(
        self,
        identifier: str,
        strategy: Optional[ExecutionStrategy] = None,
        on_result: Optional[Callable[[Any], Any]] = None
    ) -> Any:
        """파일 식별자로 해석 후 실행"""
        handle = await self.file(identifier, strategy)
        return await handle.run(on_result)

    async def repo_metadata(self, ref: RepoRef) -> dict[str, Any]:
        """
        원격 저장소 정보 조회

        Args:
            ref: 저장소 참조

        Returns:
            저장소 메타데이터
        """
        self._guard(ref)

        try:
            return await self.client.get_repo(ref.owner, ref.project)
        except RemoteFetchFailed:
            raise
        except Exception as e:
            self.logger.error(f"저장소 정보 조회 오류: {ref.full_name} - {e}")
            raise RemoteFetchFailed(ref.owner, ref.project, None, str(e)) from e

    async def clone(self, ref: RepoRef, token: Optional[str] = None) -> Path:
        """저장소 복제 (캐시 유지)"""
        self._guard(ref)
        return await self.cache_store.clone(ref, token)

    async def with_clone(
        self,
        ref: RepoRef,
        body: Optional[Callable[[Path], Any]] = None,
        token: Optional[str] = None
    ) -> Any:
        """
        일회용 복제 후 작업 실행

        body 실행 중에는 resolve_file이 복제본을 사용하고, 종료 후에는
        복제본이 삭제됩니다.
        """
        self._guard(ref)
        return await self.cache_store.with_clone(ref, body, token)

    def destroy_clone(self, ref: RepoRef) -> None:
        """복제본 삭제"""
        self._guard(ref)
        self.cache_store.destroy(ref)

    def is_cloned(self, ref: RepoRef) -> bool:
        """유효한 복제본 존재 여부"""
        self._guard(ref)
        return self.cache_store.is_valid(ref)

    async def close(self) -> None:
        """리소스 정리"""
        await self.client.close()

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        await self.close()


# 편의 함수들
async def resolve_file(
    identifier: str,
    strategy: Optional[ExecutionStrategy] = None,
    settings: Optional[Settings] = None
) -> FileHandle:
    """
    편의 함수: 파일 식별자 해석

    Args:
        identifier: "owner/project/path" 또는 GitHub URL
        strategy: 실행 전략
        settings: 시스템 설정

    Returns:
        파일 핸들
    """
    async with RepoResolver(settings) as resolver:
        return await resolver.file(identifier, strategy)


async def run_file(
    identifier: str,
    strategy: ExecutionStrategy,
    on_result: Optional[Callable[[Any], Any]] = None,
    settings: Optional[Settings] = None
) -> Any:
    """
    편의 함수: 파일 식별자 해석 후 실행

    Args:
        identifier: "owner/project/path" 또는 GitHub URL
        strategy: 실행 전략
        on_result: 완료 콜백
        settings: 시스템 설정

    Returns:
        실행 결과
    """
    async with RepoResolver(settings) as resolver:
        return await resolver.run(identifier, strategy, on_result)
