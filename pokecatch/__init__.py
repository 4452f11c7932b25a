"""REST backend that records Pokémon caught in the browser game.

Build the WSGI app with `pokecatch.PokeApp.create_app()`.
"""

__all__ = ["PokeApp"]
