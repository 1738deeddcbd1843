"""
예외 클래스 정의 모듈

저장소 리졸버에서 사용되는 커스텀 예외들을 정의합니다.
"""

from typing import Optional


class RepoResolverException(Exception):
    """저장소 리졸버 기본 예외 클래스"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        예외 초기화

        Args:
            message: 오류 메시지
            error_code: 오류 코드 (선택사항)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidIdentifier(RepoResolverException):
    """저장소/파일 식별자 형식이 잘못되었을 때 발생하는 예외"""

    def __init__(self, identifier: str, kind: str = "repo"):
        """
        식별자 오류 예외 초기화

        Args:
            identifier: 입력된 식별자 문자열
            kind: 기대한 식별자 종류 ("repo" 또는 "file")
        """
        expected = "owner/project/path" if kind == "file" else "owner/project"
        message = f"잘못된 식별자입니다: '{identifier}' ({expected} 형식이 필요합니다)"
        super().__init__(message, "INVALID_IDENTIFIER")
        self.identifier = identifier
        self.kind = kind


class OwnerNotWhitelisted(RepoResolverException):
    """화이트리스트에 없는 소유자의 저장소에 접근할 때 발생하는 예외"""

    def __init__(self, owner: str):
        """
        화이트리스트 거부 예외 초기화

        Args:
            owner: 거부된 소유자 이름
        """
        message = (
            f"'{owner}' 소유의 저장소는 실행이 허용되지 않았습니다. "
            f"'whitelisted_owners' 설정에 추가하세요 (add them to the whitelist)."
        )
        super().__init__(message, "OWNER_NOT_WHITELISTED")
        self.owner = owner


class CloneFailed(RepoResolverException):
    """저장소 복제 실패 시 발생하는 예외"""

    def __init__(self, owner: str, project: str, error_detail: str):
        """
        저장소 복제 예외 초기화

        Args:
            owner: 저장소 소유자
            project: 저장소 이름
            error_detail: 오류 상세 정보
        """
        message = f"저장소 복제 실패: {owner}/{project} - {error_detail}"
        super().__init__(message, "CLONE_FAILED")
        self.owner = owner
        self.project = project
        self.error_detail = error_detail


class RemoteFetchFailed(RepoResolverException):
    """원격 API에서 파일 가져오기 실패 시 발생하는 예외"""

    def __init__(
        self,
        owner: str,
        project: str,
        path: Optional[str],
        error_detail: str,
        status: Optional[int] = None,
    ):
        """
        원격 조회 예외 초기화

        Args:
            owner: 저장소 소유자
            project: 저장소 이름
            path: 요청한 파일 경로 (저장소 조회면 None)
            error_detail: 오류 상세 정보
            status: HTTP 상태 코드 (알 수 있는 경우)
        """
        target = f"{owner}/{project}/{path}" if path else f"{owner}/{project}"
        status_info = f" (HTTP {status})" if status is not None else ""
        message = f"원격 조회 실패: {target}{status_info} - {error_detail}"
        super().__init__(message, "REMOTE_FETCH_FAILED")
        self.owner = owner
        self.project = project
        self.path = path
        self.status = status
        self.error_detail = error_detail


class FileNotFound(RepoResolverException):
    """유효한 로컬 캐시에 요청한 파일이 없을 때 발생하는 예외"""

    def __init__(self, owner: str, project: str, path: str):
        """
        파일 없음 예외 초기화

        Args:
            owner: 저장소 소유자
            project: 저장소 이름
            path: 요청한 파일 경로
        """
        message = f"캐시된 저장소에서 파일을 찾을 수 없습니다: {owner}/{project}/{path}"
        super().__init__(message, "FILE_NOT_FOUND")
        self.owner = owner
        self.project = project
        self.path = path


class ConfigurationException(RepoResolverException):
    """설정 오류 시 발생하는 예외"""

    def __init__(self, config_key: str, error_detail: str):
        """
        설정 예외 초기화

        Args:
            config_key: 설정 키
            error_detail: 오류 상세 정보
        """
        message = f"설정 오류: {config_key} - {error_detail}"
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key
        self.error_detail = error_detail
