#!/usr/bin/env python3
"""
저장소 파일 리졸버 사용 예제

화이트리스트 설정, 원격 해석, 일회용 복제, 캐시 관리 방법을 보여줍니다.
"""

import asyncio
import tempfile

from repo_resolver import ExecutionStrategy, FileHandle, RepoResolver, RepoResolverException
from repo_resolver.config.settings import Settings
from repo_resolver.repos import resolve_file


class LineCountStrategy(ExecutionStrategy):
    """파일 줄 수를 세는 예제 전략"""

    def execute(self, handle: FileHandle) -> int:
        return len(handle.read().splitlines())


def make_settings() -> Settings:
    return Settings(
        whitelisted_owners=["octocat"],
        cache_dir=tempfile.mkdtemp()
    )


async def basic_usage_example():
    """기본 사용법 예제"""
    print("=== 저장소 파일 리졸버 기본 사용법 ===")

    async with RepoResolver(make_settings()) as resolver:
        # 캐시가 없으므로 GitHub API에서 가져옴
        print("\n1. 원격 해석")
        handle = await resolver.file("octocat/Hello-World/README", LineCountStrategy())
        print(f"핸들: {handle!r}")
        print(f"줄 수: {await handle.run()}")

        # GitHub URL도 사용 가능
        print("\n2. URL 식별자")
        ref = resolver.repo("https://github.com/octocat/Hello-World")
        print(f"저장소: {ref.full_name}")


async def scoped_clone_example():
    """일회용 복제 예제"""
    print("\n=== 일회용 복제 예제 ===")

    async with RepoResolver(make_settings()) as resolver:
        ref = resolver.repo("octocat/Hello-World")

        async def body(path):
            # 복제본이 있는 동안에는 디스크에서 읽음
            handle = await resolver.resolve_file(ref, "README", LineCountStrategy())
            print(f"복제 경로: {path}")
            print(f"출처: {handle.source.value}, 줄 수: {await handle.run()}")

        await resolver.with_clone(ref, body)
        print(f"종료 후 복제본 유지 여부: {resolver.is_cloned(ref)}")


async def cache_management_example():
    """캐시 관리 예제"""
    print("\n=== 캐시 관리 예제 ===")

    async with RepoResolver(make_settings()) as resolver:
        ref = resolver.repo("octocat/Hello-World")
        await resolver.clone(ref)

        for entry in resolver.cache_store.list_entries():
            print(f"- {entry.owner}/{entry.project} ({entry.size_bytes} bytes, {entry.cached_at})")

        stats = resolver.cache_store.stats()
        print(f"캐시 디렉토리: {stats['cache_directory']}")
        print(f"항목 수: {stats['entry_count']}")

        removed = resolver.cache_store.cleanup_stale(24)
        print(f"정리된 항목 수: {removed}")

        resolver.destroy_clone(ref)


async def convenience_function_example():
    """편의 함수 사용 예제"""
    print("\n=== 편의 함수 사용 예제 ===")

    try:
        await resolve_file("someone-else/project/run.rb", settings=make_settings())
    except RepoResolverException as e:
        print(f"거부됨 [{e.error_code}]: {e}")


def main():
    print("저장소 파일 리졸버 예제 시작")

    try:
        asyncio.run(basic_usage_example())
        asyncio.run(scoped_clone_example())
        asyncio.run(cache_management_example())
        asyncio.run(convenience_function_example())
    except Exception as e:
        print(f"예제 실행 중 오류 발생: {e}")
    finally:
        print("\n예제 실행 완료")


if __name__ == "__main__":
    main()
