"""
원격 저장소 파일 리졸버

"owner/project/path" 식별자를 로컬 복제본 또는 GitHub API에서 가져온
파일 핸들로 해석합니다.
"""

from .exceptions import (
    CloneFailed,
    FileNotFound,
    InvalidIdentifier,
    OwnerNotWhitelisted,
    RemoteFetchFailed,
    RepoResolverException,
)
from .models import FileRef, RepoRef
from .repos import ExecutionStrategy, FileHandle, RepoResolver

__version__ = "0.1.0"

__all__ = [
    "RepoResolver",
    "RepoRef",
    "FileRef",
    "FileHandle",
    "ExecutionStrategy",
    "RepoResolverException",
    "InvalidIdentifier",
    "OwnerNotWhitelisted",
    "CloneFailed",
    "RemoteFetchFailed",
    "FileNotFound",
]
