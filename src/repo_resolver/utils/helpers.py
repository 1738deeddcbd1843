"""
공통 유틸리티 함수 모듈

저장소 리졸버에서 공통으로 사용되는 헬퍼 함수들을 제공합니다.
"""

import inspect
from pathlib import Path
from typing import Any, Callable, Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    디렉토리 존재 확인 및 생성

    Args:
        path: 디렉토리 경로

    Returns:
        Path: 디렉토리 경로 객체
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def directory_size(path: Union[str, Path]) -> int:
    """
    디렉토리 내 전체 파일 크기 계산

    Args:
        path: 디렉토리 경로

    Returns:
        int: 바이트 단위 크기 (디렉토리가 없으면 0)
    """
    path = Path(path)
    if not path.is_dir():
        return 0

    return sum(
        f.stat().st_size
        for f in path.rglob('*')
        if f.is_file()
    )


def format_file_size(size_bytes: int) -> str:
    """
    파일 크기를 사람이 읽기 쉬운 형태로 변환

    Args:
        size_bytes: 바이트 단위 크기

    Returns:
        str: 형식화된 크기 문자열
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    size_value = float(size_bytes)

    while size_value >= 1024 and i < len(size_names) - 1:
        size_value = size_value / 1024
        i += 1

    return f"{size_value:.1f} {size_names[i]}"


async def call_maybe_async(func: Callable, *args, **kwargs) -> Any:
    """
    동기/비동기 호출 가능 객체를 동일하게 실행

    Args:
        func: 실행할 함수 (코루틴 함수 가능)
        *args: 위치 인자
        **kwargs: 키워드 인자

    Returns:
        Any: 함수 실행 결과
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result
