"""
저장소 해석 모듈

원격 저장소 파일을 로컬 복제본 또는 원격 API에서 가져오는 시스템을 제공합니다.
"""

from .cache_store import CacheStore
from .fetcher import GitFetcher, RepositoryFetcher, build_clone_url
from .file_handle import ExecutionStrategy, FileHandle
from .github_client import GitHubClient, RemoteApiClient
from .locator import parse_file_identifier, parse_repo_identifier
from .resolver import RepoResolver, resolve_file, run_file
from .security import SecurityGate

__all__ = [
    "CacheStore",
    "RepoResolver",
    "SecurityGate",
    "FileHandle",
    "ExecutionStrategy",
    "GitFetcher",
    "RepositoryFetcher",
    "GitHubClient",
    "RemoteApiClient",
    "build_clone_url",
    "parse_repo_identifier",
    "parse_file_identifier",
    "resolve_file",
    "run_file",
]
