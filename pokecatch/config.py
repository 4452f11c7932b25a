import os
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(',') if o.strip()]


class Config:
    # Choose repository implementation. Only 'memory' exists: caught Pokémon
    # are kept for the lifetime of the process and never persisted.
    REPOSITORY_IMPL = os.getenv('POKECATCH_REPO', 'memory')
    # Public directory holding index.html and the game's scripts/sounds.
    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    STATIC_DIR = os.getenv('POKECATCH_STATIC_DIR') or os.path.join(BASE_DIR, 'public')
    # '*' allows any origin; otherwise a comma-separated list of origins.
    CORS_ORIGINS = os.getenv('POKECATCH_CORS_ORIGINS', '*')
    LOG_LEVEL = os.getenv('POKECATCH_LOG_LEVEL', 'INFO')
    HOST = os.getenv('POKECATCH_HOST', '127.0.0.1')
    PORT = int(os.getenv('POKECATCH_PORT', '5000'))
    DEBUG = os.getenv('POKECATCH_DEBUG', '').lower() in ('1', 'true', 'yes')

    def cors_origins(self):
        if self.CORS_ORIGINS.strip() == '*':
            return '*'
        return _split_origins(self.CORS_ORIGINS)


def get_config() -> Config:
    return Config()
