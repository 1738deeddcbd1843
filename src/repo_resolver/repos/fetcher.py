"""
저장소 가져오기 모듈

버전 관리 시스템에서 저장소 내용을 로컬 디렉토리로 가져오는 기능을 제공합니다.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import git

from ..utils.logging import get_logger

logger = get_logger(__name__)

GITHUB_HOST = "github.com"


def build_clone_url(owner: str, project: str, token: Optional[str] = None) -> str:
    """
    복제 URL 생성

    Args:
        owner: 저장소 소유자
        project: 저장소 이름
        token: OAuth 토큰 (없으면 익명 URL)

    Returns:
        HTTPS 복제 URL
    """
    # TODO: 기본 인증(username/password) 복제 지원
    auth = f"{token}:x-oauth-basic@" if token else ""
    return f"https://{auth}{GITHUB_HOST}/{owner}/{project}.git"


class RepositoryFetcher(ABC):
    """저장소 가져오기 추상 클래스"""

    @abstractmethod
    def fetch(self, clone_url: str, destination: Path) -> None:
        """
        저장소를 대상 디렉토리로 가져오기 (추상 메서드)

        Args:
            clone_url: 인증 정보가 포함될 수 있는 복제 URL
            destination: 대상 디렉토리 (존재하지 않아야 함)
        """
        pass


class GitFetcher(RepositoryFetcher):
    """GitPython 기반 저장소 가져오기"""

    def __init__(self, depth: Optional[int] = 1):
        """
        Git 가져오기 초기화

        Args:
            depth: 얕은 복제 깊이 (None이면 전체 이력)
        """
        self.depth = depth
        self.logger = logger

    def fetch(self, clone_url: str, destination: Path) -> None:
        """Git 저장소 복제"""
        destination.parent.mkdir(parents=True, exist_ok=True)

        options = {}
        if self.depth:
            options["depth"] = self.depth

        try:
            repo = git.Repo.clone_from(clone_url, str(destination), **options)
            repo.close()
        except git.GitCommandError as e:
            # 복제 URL에는 토큰이 포함될 수 있으므로 상태 코드만 기록
            self.logger.error(f"git clone 실패 (종료코드: {e.status}): {destination}")
            raise
