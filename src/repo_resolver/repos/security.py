"""
소유자 화이트리스트 검사 모듈
"""

from typing import Iterable

from ..exceptions import OwnerNotWhitelisted
from ..utils.logging import get_logger

logger = get_logger(__name__)


class SecurityGate:
    """저장소 소유자 화이트리스트 검사기"""

    def __init__(self, whitelisted_owners: Iterable[str], case_sensitive: bool = True):
        """
        화이트리스트 검사기 초기화

        Args:
            whitelisted_owners: 허용된 소유자 이름 목록
            case_sensitive: 대소문자 구분 여부
        """
        self.case_sensitive = case_sensitive
        self._owners = frozenset(self._normalize(owner) for owner in whitelisted_owners)

    @classmethod
    def from_settings(cls, settings) -> "SecurityGate":
        """설정으로부터 검사기 생성"""
        return cls(settings.whitelisted_owners, settings.whitelist_case_sensitive)

    def _normalize(self, owner: str) -> str:
        return owner if self.case_sensitive else owner.casefold()

    def is_whitelisted(self, owner: str) -> bool:
        """소유자 허용 여부"""
        return self._normalize(owner) in self._owners

    def ensure_whitelisted(self, owner: str) -> None:
        """
        소유자 허용 여부 확인

        Args:
            owner: 검사할 소유자 이름

        Raises:
            OwnerNotWhitelisted: 화이트리스트에 없는 소유자일 때
        """
        if not self.is_whitelisted(owner):
            logger.warning(f"화이트리스트에 없는 소유자 거부: {owner}")
            raise OwnerNotWhitelisted(owner)
