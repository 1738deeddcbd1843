"""
식별자 파싱 테스트 모듈

저장소/파일 식별자 파싱 규칙을 테스트합니다.
"""

import pytest

from repo_resolver.exceptions import InvalidIdentifier
from repo_resolver.repos.locator import parse_file_identifier, parse_repo_identifier


class TestParseRepoIdentifier:
    """저장소 식별자 파싱 테스트"""

    def test_plain_identifier(self):
        """owner/project 형식 테스트"""
        assert parse_repo_identifier("acme/widgets") == ("acme", "widgets")

    def test_github_prefix_without_scheme(self):
        """스킴 없는 github.com 접두사 테스트"""
        assert parse_repo_identifier("github.com/acme/widgets") == ("acme", "widgets")

    @pytest.mark.parametrize("identifier", [
        "https://github.com/acme/widgets",
        "http://github.com/acme/widgets",
        "https://github.com/acme/widgets/",
        "acme/widgets/",
        "HTTPS://GitHub.com/acme/widgets",
    ])
    def test_prefix_and_trailing_slash(self, identifier):
        """URL 접두사와 끝 슬래시 허용 테스트"""
        assert parse_repo_identifier(identifier) == ("acme", "widgets")

    def test_identifier_characters(self):
        """허용 문자(점, 하이픈, 밑줄) 테스트"""
        assert parse_repo_identifier("Acme-Corp/my_widgets.rb") == ("Acme-Corp", "my_widgets.rb")

    def test_case_preserved(self):
        """대소문자 보존 테스트"""
        assert parse_repo_identifier("ACME/Widgets") == ("ACME", "Widgets")

    @pytest.mark.parametrize("identifier", [
        "acme",
        "acme/",
        "/widgets",
        "acme/widgets/extra",
        "acme/wid gets",
        "acme/widgets!",
        "https://gitlab.com/acme/widgets",
        "ftp://github.com/acme/widgets",
        " acme/widgets",
        "",
    ])
    def test_invalid_identifiers(self, identifier):
        """잘못된 식별자 거부 테스트"""
        with pytest.raises(InvalidIdentifier) as exc_info:
            parse_repo_identifier(identifier)

        assert exc_info.value.identifier == identifier
        assert exc_info.value.kind == "repo"
        assert exc_info.value.error_code == "INVALID_IDENTIFIER"

    def test_dot_only_names_rejected(self):
        """점으로만 된 이름 거부 테스트"""
        with pytest.raises(InvalidIdentifier):
            parse_repo_identifier("../widgets")

        with pytest.raises(InvalidIdentifier):
            parse_repo_identifier("acme/.")


class TestParseFileIdentifier:
    """파일 식별자 파싱 테스트"""

    def test_plain_file_identifier(self):
        """owner/project/path 형식 테스트"""
        owner, project, path = parse_file_identifier("acme/widgets/scripts/run.rb")

        assert (owner, project) == ("acme", "widgets")
        assert path == "scripts/run.rb"

    def test_single_segment_path(self):
        """단일 세그먼트 경로 테스트"""
        assert parse_file_identifier("acme/widgets/run.rb") == ("acme", "widgets", "run.rb")

    def test_full_url(self):
        """전체 URL 테스트"""
        result = parse_file_identifier("https://github.com/acme/widgets/a/b/c")
        assert result == ("acme", "widgets", "a/b/c")

    def test_path_kept_verbatim(self):
        """경로 정규화 없음 테스트"""
        _, _, path = parse_file_identifier("acme/widgets/./lib/../run.rb")
        assert path == "./lib/../run.rb"

    def test_repo_only_identifier_rejected(self):
        """경로 없는 식별자 거부 테스트"""
        with pytest.raises(InvalidIdentifier) as exc_info:
            parse_file_identifier("acme/widgets/")

        assert exc_info.value.kind == "file"
        assert "owner/project/path" in str(exc_info.value)

    def test_invalid_path_characters(self):
        """경로 허용 문자 외 거부 테스트"""
        with pytest.raises(InvalidIdentifier):
            parse_file_identifier("acme/widgets/run me.rb")

        with pytest.raises(InvalidIdentifier):
            parse_file_identifier("acme/widgets/run.rb?raw=1")
