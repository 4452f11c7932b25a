"""
Composition root: wires Config, the in-memory repository and PokedexService.
Each Flask app gets its own container, so tests never share caught Pokémon.
"""
from typing import Optional

from .config import Config, get_config
from .repo_factory import get_repository
from .services import PokedexService


class Container:
    def __init__(self, cfg: Optional[Config] = None):
        self.cfg = cfg or get_config()
        self.repo = get_repository(self.cfg)
        self.service = PokedexService(self.repo)


def build_container(cfg: Optional[Config] = None) -> Container:
    """Return a Container with a fresh, empty pokedex for `cfg` (env config if omitted)."""
    return Container(cfg)
