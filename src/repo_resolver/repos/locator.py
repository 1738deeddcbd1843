"""
저장소 식별자 파싱 모듈

"owner/project" 또는 "owner/project/path" 형식의 식별자(GitHub 웹 URL 포함)를
구조화된 필드로 변환합니다. 부수 효과가 없습니다.
"""

import re
from typing import Tuple

from ..exceptions import InvalidIdentifier

_PREFIX = r"(?:(?:https?://)?github\.com/)?"
_NAME = r"[a-z0-9_.\-]+"

REPO_IDENTIFIER_REGEX = re.compile(
    rf"{_PREFIX}(?P<owner>{_NAME})/(?P<project>{_NAME})/?",
    re.IGNORECASE
)
FILE_IDENTIFIER_REGEX = re.compile(
    rf"{_PREFIX}(?P<owner>{_NAME})/(?P<project>{_NAME})/(?P<path>[a-z0-9_.\-/]+)",
    re.IGNORECASE
)


def _is_dot_segment(name: str) -> bool:
    return set(name) == {"."}


def parse_repo_identifier(identifier: str) -> Tuple[str, str]:
    """
    저장소 식별자 파싱

    Args:
        identifier: "owner/project" 또는 "https://github.com/owner/project/"

    Returns:
        (owner, project) 튜플

    Raises:
        InvalidIdentifier: 전체 문자열이 형식과 일치하지 않을 때
    """
    matched = REPO_IDENTIFIER_REGEX.fullmatch(identifier)
    if matched is None:
        raise InvalidIdentifier(identifier, "repo")

    owner, project = matched.group("owner"), matched.group("project")
    if _is_dot_segment(owner) or _is_dot_segment(project):
        raise InvalidIdentifier(identifier, "repo")

    return owner, project


def parse_file_identifier(identifier: str) -> Tuple[str, str, str]:
    """
    파일 식별자 파싱

    경로 부분은 정규화 없이 그대로 반환합니다 ("."/".." 포함).

    Args:
        identifier: "owner/project/path/to/file" (GitHub URL 접두사 허용)

    Returns:
        (owner, project, path) 튜플

    Raises:
        InvalidIdentifier: 전체 문자열이 형식과 일치하지 않을 때
    """
    matched = FILE_IDENTIFIER_REGEX.fullmatch(identifier)
    if matched is None:
        raise InvalidIdentifier(identifier, "file")

    owner, project = matched.group("owner"), matched.group("project")
    if _is_dot_segment(owner) or _is_dot_segment(project):
        raise InvalidIdentifier(identifier, "file")

    return owner, project, matched.group("path")
