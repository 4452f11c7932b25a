from typing import Any

from .config import Config


def get_repository(cfg: Config) -> Any:
    impl = cfg.REPOSITORY_IMPL.lower()
    if impl in ('memory', 'inmemory', 'in-memory'):
        from .repositories.memory_repo import InMemoryPokedexRepository
        return InMemoryPokedexRepository()
    # No persistent repository exists.
    raise NotImplementedError(f"Repository implementation '{cfg.REPOSITORY_IMPL}' is not available. Use 'memory' as POKECATCH_REPO or remove the explicit setting.")
