"""
기본 데이터 모델 모듈

저장소 참조와 캐시 항목의 데이터 구조를 정의합니다.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

IDENTIFIER_PATTERN = r"^[A-Za-z0-9_.\-]+$"


class RepoRef(BaseModel):
    """저장소 참조 데이터 모델 (owner/project)"""

    owner: str = Field(
        ...,
        description="저장소 소유자",
        min_length=1,
        pattern=IDENTIFIER_PATTERN
    )
    project: str = Field(
        ...,
        description="저장소 이름",
        min_length=1,
        pattern=IDENTIFIER_PATTERN
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("owner", "project")
    @classmethod
    def _reject_dot_segments(cls, value: str) -> str:
        # "." 또는 ".."만으로 된 이름은 캐시 루트 밖을 가리킴
        if set(value) == {"."}:
            raise ValueError(f"점으로만 이루어진 이름은 사용할 수 없습니다: {value}")
        return value

    @property
    def full_name(self) -> str:
        """owner/project 형식의 이름"""
        return f"{self.owner}/{self.project}"

    def __str__(self) -> str:
        return self.full_name


class FileRef(BaseModel):
    """저장소 내 파일 참조 데이터 모델"""

    repo: RepoRef = Field(
        ...,
        description="파일이 속한 저장소"
    )
    path: str = Field(
        ...,
        description="저장소 루트 기준 상대 경로 (슬래시 구분)",
        min_length=1
    )

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.repo.full_name}/{self.path}"


class CacheEntryInfo(BaseModel):
    """캐시 항목 정보 데이터 모델"""

    owner: str = Field(
        ...,
        description="저장소 소유자"
    )
    project: str = Field(
        ...,
        description="저장소 이름"
    )
    path: str = Field(
        ...,
        description="캐시 디렉토리 경로"
    )
    cached_at: datetime = Field(
        ...,
        description="복제 시간"
    )
    size_bytes: int = Field(
        default=0,
        description="캐시 크기 (바이트)",
        ge=0
    )
