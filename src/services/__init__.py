from services.contest_cache import ContestCache, contest_cache_key
from services.result_builder import ResultBuilder
from services.title_resolver import TitleResolver
from infrastructure.interfaces import HTTPClientProtocol, KeyValueStoreProtocol


def create_result_builder(
    store: KeyValueStoreProtocol, http_client: HTTPClientProtocol
) -> ResultBuilder:
    """Factory function to create the result builder with all dependencies."""
    from infrastructure.atcoder_client import AtcoderProblemsClient
    from infrastructure.codeforces_client import CodeforcesApiClient

    resolver = TitleResolver(
        cache=ContestCache(store),
        codeforces_client=CodeforcesApiClient(http_client),
        atcoder_client=AtcoderProblemsClient(http_client),
    )
    return ResultBuilder(resolver)


__all__ = [
    "ContestCache",
    "ResultBuilder",
    "TitleResolver",
    "contest_cache_key",
    "create_result_builder",
]
