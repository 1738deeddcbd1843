"""
열거형 정의 모듈

저장소 리졸버에서 사용되는 상수 값들을 열거형으로 정의합니다.
"""

from enum import Enum


class ContentSource(Enum):
    """파일 내용 출처 열거형"""
    LOCAL = "local"
    REMOTE = "remote"
