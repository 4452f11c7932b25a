from typing import List, Optional

from ..dto import CaughtPokemon


class InMemoryPokedexRepository:
    """Repository keeping caught Pokémon in a plain Python list.

    Nothing is persisted: the list lives as long as the repository object.
    The repository does no locking of its own; `PokedexService` serialises
    every read-modify-write sequence around it.
    """

    def __init__(self):
        self._entries: List[CaughtPokemon] = []
        self._next_id = 1

    def next_id(self) -> int:
        """Reserve and return the next id. Ids are never handed out twice."""
        nid = self._next_id
        self._next_id += 1
        return nid

    def add(self, entry: CaughtPokemon) -> CaughtPokemon:
        self._entries.append(entry)
        return entry

    def find(self, pokemon_id: int) -> Optional[CaughtPokemon]:
        for e in self._entries:
            if e.id == pokemon_id:
                return e
        return None

    def delete(self, entry: CaughtPokemon) -> None:
        self._entries.remove(entry)

    def all(self) -> List[CaughtPokemon]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
