"""
데이터 모델 패키지

저장소 리졸버의 핵심 데이터 모델들을 정의합니다.
"""

from .base import CacheEntryInfo, FileRef, RepoRef
from .enums import ContentSource

__all__ = [
    "RepoRef",
    "FileRef",
    "CacheEntryInfo",
    "ContentSource",
]
