"""
파일 핸들 모듈

해석된 파일과, 그 파일을 실행하는 전략의 인터페이스를 정의합니다.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Optional

from ..exceptions import RepoResolverException
from ..models.base import FileRef
from ..models.enums import ContentSource
from ..utils.helpers import call_maybe_async
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ExecutionStrategy(ABC):
    """파일 실행 전략 추상 클래스"""

    @abstractmethod
    def execute(self, handle: "FileHandle") -> Any:
        """
        파일 실행 (추상 메서드, 코루틴으로 구현 가능)

        Args:
            handle: 실행할 파일 핸들

        Returns:
            실행 결과
        """
        pass


class FileHandle:
    """해석된 파일 핸들"""

    def __init__(
        self,
        file_ref: FileRef,
        source: ContentSource,
        local_path: Optional[Path] = None,
        content: Optional[str] = None,
        strategy: Optional[ExecutionStrategy] = None
    ):
        """
        파일 핸들 초기화

        Args:
            file_ref: 파일 참조
            source: 내용 출처 (로컬 캐시 / 원격 API)
            local_path: 로컬 파일 경로 (LOCAL일 때)
            content: 원격에서 받은 내용 (REMOTE일 때)
            strategy: 실행 전략 (검증 없이 그대로 보관)
        """
        if source == ContentSource.LOCAL and local_path is None:
            raise ValueError("로컬 파일 핸들에는 local_path가 필요합니다")
        if source == ContentSource.REMOTE and content is None:
            raise ValueError("원격 파일 핸들에는 content가 필요합니다")

        self.file_ref = file_ref
        self.source = source
        self.local_path = local_path
        self._content = content
        self.strategy = strategy
        self.basename = file_ref.repo.full_name

    @property
    def path(self) -> str:
        """저장소 내 파일 경로"""
        return self.file_ref.path

    @property
    def is_local(self) -> bool:
        return self.source == ContentSource.LOCAL

    def read(self) -> str:
        """
        파일 내용 읽기

        로컬 파일은 호출 시점에 디스크에서 읽습니다.

        Returns:
            파일 내용
        """
        if self.is_local:
            return self.local_path.read_text(encoding='utf-8')
        return self._content

    async def run(self, on_result: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        실행 전략으로 파일 실행

        Args:
            on_result: 실행 결과를 받는 완료 콜백 (동기/비동기)

        Returns:
            실행 결과
        """
        if self.strategy is None:
            raise RepoResolverException(
                f"실행 전략이 지정되지 않았습니다: {self.file_ref}", "STRATEGY_MISSING"
            )

        logger.debug(f"파일 실행: {self.file_ref} ({type(self.strategy).__name__})")
        result = await call_maybe_async(self.strategy.execute, self)

        if on_result is not None:
            await call_maybe_async(on_result, result)

        return result

    def __repr__(self) -> str:
        return f"FileHandle({self.file_ref}, source={self.source.value})"
