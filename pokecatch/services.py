import logging
import threading
from dataclasses import replace
from typing import Any, List, Optional

from .dto import CaughtPokemon
from .errors import InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)


def _require_text(value: Any, label: str) -> str:
    """Return `value` trimmed, or raise InvalidArgumentError if it is not usable text."""
    if not isinstance(value, str):
        if value is None:
            raise InvalidArgumentError(f'{label} cannot be empty')
        raise InvalidArgumentError(f'{label} must be a string')
    if not value.strip():
        raise InvalidArgumentError(f'{label} cannot be empty')
    return value.strip()


def _optional_text(value: Any, label: str) -> str:
    if value is None:
        return ''
    if not isinstance(value, str):
        raise InvalidArgumentError(f'{label} must be a string')
    return value.strip()


def _newest_first(entries: List[CaughtPokemon]) -> List[CaughtPokemon]:
    # id breaks ties between catches stamped in the same instant
    return sorted(entries, key=lambda e: (e.caught_at, e.id), reverse=True)


class PokedexService:
    """Service layer owning the caught-Pokémon collection.

    Keeps validation and the small domain rules here so the Flask handlers
    remain thin. All operations hold one lock for their whole duration:
    rename/favorite/remove are find-then-mutate sequences and the WSGI
    server may dispatch requests on several threads. Callers only ever get
    copies taken under the lock, never the stored records.
    """

    def __init__(self, repo: Any):
        self.repo = repo
        self._lock = threading.RLock()

    def _find(self, pokemon_id: int) -> CaughtPokemon:
        entry = self.repo.find(pokemon_id)
        if entry is None:
            raise NotFoundError(pokemon_id)
        return entry

    def list_all(self) -> List[CaughtPokemon]:
        with self._lock:
            return [replace(e) for e in _newest_first(self.repo.all())]

    def list_favorites(self) -> List[CaughtPokemon]:
        with self._lock:
            return [replace(e) for e in _newest_first(self.repo.all()) if e.is_favorite]

    def get_by_id(self, pokemon_id: int) -> CaughtPokemon:
        with self._lock:
            return replace(self._find(pokemon_id))

    def catch(self, name: Any, type: Any, image_url: Optional[str] = None) -> CaughtPokemon:
        name = _require_text(name, 'Pokémon name')
        type = _require_text(type, 'Pokémon type')
        image_url = _optional_text(image_url, 'Pokémon image URL')

        with self._lock:
            entry = CaughtPokemon(
                id=self.repo.next_id(),
                name=name,
                original_name=name,
                type=type,
                image_url=image_url,
            )
            self.repo.add(entry)
            snapshot = replace(entry)
        logger.info("Caught %s (%s) as #%d", snapshot.name, snapshot.type, snapshot.id)
        return snapshot

    def rename(self, pokemon_id: int, new_name: Any) -> CaughtPokemon:
        new_name = _require_text(new_name, 'New name')
        with self._lock:
            entry = self._find(pokemon_id)
            old_name = entry.name
            entry.name = new_name
            snapshot = replace(entry)
        logger.info("Renamed #%d from %s to %s", pokemon_id, old_name, new_name)
        return snapshot

    def toggle_favorite(self, pokemon_id: int) -> CaughtPokemon:
        with self._lock:
            entry = self._find(pokemon_id)
            entry.is_favorite = not entry.is_favorite
            snapshot = replace(entry)
        logger.info("#%d favorite=%s", pokemon_id, snapshot.is_favorite)
        return snapshot

    def remove(self, pokemon_id: int) -> None:
        with self._lock:
            entry = self._find(pokemon_id)
            self.repo.delete(entry)
        logger.info("Released #%d (%s)", pokemon_id, entry.name)

    def count(self) -> int:
        with self._lock:
            return len(self.repo)
