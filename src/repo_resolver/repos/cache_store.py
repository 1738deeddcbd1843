"""
저장소 캐시 관리 모듈

저장소별 로컬 복제본의 생성, 유효성 판단, 삭제를 담당합니다.
캐시 구조: {cache_dir}/{owner}/{project}/ + 유효성 표시 파일(.cached_at)
"""

import shutil
import time
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Optional

from ..exceptions import CloneFailed
from ..models.base import CacheEntryInfo, RepoRef
from ..utils.helpers import call_maybe_async, directory_size, ensure_directory, format_file_size
from ..utils.logging import get_logger
from .fetcher import GitFetcher, RepositoryFetcher, build_clone_url

logger = get_logger(__name__)


class CacheStore:
    """저장소 복제본 캐시 관리자"""

    MARKER_FILE = ".cached_at"
    VCS_METADATA_DIR = ".git"

    def __init__(self, settings, fetcher: Optional[RepositoryFetcher] = None):
        """
        캐시 저장소 초기화

        Args:
            settings: 시스템 설정
            fetcher: 저장소 가져오기 구현 (None이면 GitFetcher 사용)
        """
        self.settings = settings
        self.fetcher = fetcher if fetcher is not None else GitFetcher()
        self.logger = logger
        self.cache_dir = ensure_directory(settings.cache_dir)
        self.max_age_hours: Optional[int] = getattr(settings, 'cache_max_age_hours', None)

    def cache_path_for(self, ref: RepoRef) -> Path:
        """저장소 캐시 경로 생성"""
        return self.cache_dir / ref.owner / ref.project

    def _marker_path(self, ref: RepoRef) -> Path:
        """유효성 표시 파일 경로 생성"""
        return self.cache_path_for(ref) / self.MARKER_FILE

    def _read_marker(self, path: Path) -> Optional[str]:
        try:
            return (path / self.MARKER_FILE).read_text(encoding='utf-8').strip()
        except (OSError, UnicodeDecodeError):
            return None

    @staticmethod
    def _parse_timestamp(raw: Optional[str]) -> Optional[datetime]:
        if raw is None:
            return None
        try:
            return datetime.fromtimestamp(int(raw))
        except (ValueError, OverflowError, OSError):
            return None

    def is_valid(self, ref: RepoRef) -> bool:
        """
        캐시 유효성 검사

        표시 파일을 읽을 수 있으면 유효합니다. 읽기 오류는 예외 없이
        무효로 처리합니다. cache_max_age_hours가 설정된 경우에만
        복제 시각도 검사합니다.

        Args:
            ref: 저장소 참조

        Returns:
            유효 여부
        """
        raw = self._read_marker(self.cache_path_for(ref))
        if raw is None:
            return False

        if self.max_age_hours is None:
            return True

        cached_at = self._parse_timestamp(raw)
        if cached_at is None:
            self.logger.debug(f"캐시 표시 파일 형식 오류: {ref.full_name}")
            return False

        if datetime.now() - cached_at > timedelta(hours=self.max_age_hours):
            self.logger.debug(f"캐시 만료: {ref.full_name}")
            return False

        return True

    def cached_at(self, ref: RepoRef) -> Optional[datetime]:
        """
        복제 시각 조회

        Args:
            ref: 저장소 참조

        Returns:
            표시 파일에 기록된 시각 (없거나 읽을 수 없으면 None)
        """
        return self._parse_timestamp(self._read_marker(self.cache_path_for(ref)))

    async def clone(self, ref: RepoRef, token: Optional[str] = None) -> Path:
        """
        저장소 복제

        기존 캐시를 삭제한 뒤 새로 복제하고, 버전 관리 메타데이터를 제거한 후
        현재 시각을 표시 파일에 기록합니다.

        Args:
            ref: 저장소 참조
            token: OAuth 토큰 (None이면 설정값 사용)

        Returns:
            복제된 캐시 경로

        Raises:
            CloneFailed: 복제 실패 시
        """
        if token is None:
            token = self.settings.oauth_token

        clone_path = self.cache_path_for(ref)
        self.logger.info(f"저장소 복제: {ref.full_name} -> {clone_path}")

        self.destroy(ref)

        try:
            self.fetcher.fetch(build_clone_url(ref.owner, ref.project, token), clone_path)
        except Exception as e:
            detail = str(e)
            if token:
                detail = detail.replace(token, "***")
            self.logger.error(f"저장소 복제 오류: {ref.full_name} - {detail}")
            self.destroy(ref)
            raise CloneFailed(ref.owner, ref.project, detail) from e

        if not clone_path.is_dir():
            raise CloneFailed(ref.owner, ref.project, f"복제 결과 디렉토리가 없습니다: {clone_path}")

        try:
            # 캐시에는 이력 없이 파일 내용만 보관
            vcs_dir = clone_path / self.VCS_METADATA_DIR
            if vcs_dir.exists():
                shutil.rmtree(vcs_dir)

            (clone_path / self.MARKER_FILE).write_text(str(int(time.time())), encoding='utf-8')
        except OSError as e:
            self.logger.error(f"캐시 마무리 오류: {ref.full_name} - {e}")
            self.destroy(ref)
            raise CloneFailed(ref.owner, ref.project, f"캐시 기록 실패: {e}") from e

        return clone_path

    @asynccontextmanager
    async def cloned(self, ref: RepoRef, token: Optional[str] = None) -> AsyncIterator[Path]:
        """
        일회용 복제 컨텍스트

        블록이 정상 종료하든 예외로 종료하든 캐시를 삭제합니다.

        Args:
            ref: 저장소 참조
            token: OAuth 토큰

        Yields:
            복제된 캐시 경로
        """
        clone_path = await self.clone(ref, token)
        try:
            yield clone_path
        finally:
            self.destroy(ref)

    async def with_clone(
        self,
        ref: RepoRef,
        body: Optional[Callable[[Path], Any]] = None,
        token: Optional[str] = None
    ) -> Any:
        """
        복제 후 작업 실행

        Args:
            ref: 저장소 참조
            body: 복제 경로를 받는 작업 (동기/비동기). None이면 복제본을 유지
            token: OAuth 토큰

        Returns:
            body의 반환값 (body가 없으면 복제 경로)
        """
        if body is None:
            return await self.clone(ref, token)

        async with self.cloned(ref, token) as clone_path:
            return await call_maybe_async(body, clone_path)

    def destroy(self, ref: RepoRef) -> None:
        """
        캐시 삭제 (존재하지 않으면 아무 작업도 하지 않음)

        Args:
            ref: 저장소 참조
        """
        clone_path = self.cache_path_for(ref)
        if clone_path.exists():
            shutil.rmtree(clone_path)
            self.logger.debug(f"캐시 삭제: {ref.full_name}")

    def _iter_entry_dirs(self):
        for owner_dir in self.cache_dir.iterdir():
            if not owner_dir.is_dir():
                continue
            for project_dir in owner_dir.iterdir():
                if project_dir.is_dir():
                    yield owner_dir.name, project_dir.name, project_dir

    def list_entries(self) -> list[CacheEntryInfo]:
        """
        캐시된 저장소 목록 조회

        Returns:
            표시 파일이 있는 캐시 항목 목록 (최신 순)
        """
        entries = []

        for owner, project, project_dir in self._iter_entry_dirs():
            cached_at = self._parse_timestamp(self._read_marker(project_dir))
            if cached_at is None:
                continue

            entries.append(CacheEntryInfo(
                owner=owner,
                project=project,
                path=str(project_dir),
                cached_at=cached_at,
                size_bytes=directory_size(project_dir)
            ))

        entries.sort(key=lambda entry: entry.cached_at, reverse=True)
        return entries

    def cleanup_stale(self, max_age_hours: int) -> int:
        """
        오래된 캐시 정리

        표시 파일이 없거나 읽을 수 없는 디렉토리도 함께 정리합니다.

        Args:
            max_age_hours: 최대 보관 시간 (시간 단위)

        Returns:
            삭제된 항목 수
        """
        cutoff_time = datetime.now() - timedelta(hours=max_age_hours)
        cleaned_count = 0

        for owner, project, project_dir in list(self._iter_entry_dirs()):
            cached_at = self._parse_timestamp(self._read_marker(project_dir))
            if cached_at is not None and cached_at >= cutoff_time:
                continue

            shutil.rmtree(project_dir)
            cleaned_count += 1
            self.logger.info(f"오래된 캐시 정리: {owner}/{project}")

        if cleaned_count > 0:
            self.logger.info(f"캐시 정리 완료: {cleaned_count}개 항목 삭제")

        return cleaned_count

    def stats(self) -> dict:
        """
        캐시 통계 정보 조회

        Returns:
            캐시 통계 딕셔너리
        """
        entry_count = 0
        total_size = 0

        for _, _, project_dir in self._iter_entry_dirs():
            entry_count += 1
            total_size += directory_size(project_dir)

        return {
            'total_size_bytes': total_size,
            'total_size': format_file_size(total_size),
            'entry_count': entry_count,
            'cache_directory': str(self.cache_dir)
        }
