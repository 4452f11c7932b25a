"""Domain errors raised by the pokedex service.

They subclass the builtin exceptions the Flask handlers already know how to
map (`ValueError` -> 400, `LookupError` -> 404), so callers can catch either
the specific error or the builtin.
"""


class PokecatchError(Exception):
    """Base class for pokecatch domain errors."""


class InvalidArgumentError(PokecatchError, ValueError):
    """A required field was missing or blank after trimming."""


class NotFoundError(PokecatchError, LookupError):
    """No caught Pokémon exists with the requested id."""

    def __init__(self, pokemon_id: int):
        self.pokemon_id = pokemon_id
        super().__init__(f"Pokémon with ID {pokemon_id} not found")
