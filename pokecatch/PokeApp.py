import logging
from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify, redirect, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Config, get_config
from .di import build_container
from .dto import CatchRequest, RenameRequest
from .errors import InvalidArgumentError, NotFoundError
from .services import PokedexService

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'pokecatch'

api = Blueprint('pokemon_api', __name__, url_prefix='/api/pokemon')


def _service() -> PokedexService:
    return current_app.extensions[EXTENSION_KEY].service


def _json_body():
    """Return the request body if it is a JSON object, else None."""
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        return None
    return payload


@api.route('', methods=['GET'])
def list_pokemon():
    return jsonify([p.to_dict() for p in _service().list_all()])


@api.route('/favorites', methods=['GET'])
def list_favorites():
    return jsonify([p.to_dict() for p in _service().list_favorites()])


@api.route('/<int:pokemon_id>', methods=['GET'])
def get_pokemon(pokemon_id):
    try:
        return jsonify(_service().get_by_id(pokemon_id).to_dict())
    except NotFoundError as nf:
        return jsonify(error=str(nf)), 404


@api.route('/catch', methods=['POST'])
def catch_pokemon():
    payload = _json_body()
    if payload is None:
        return jsonify(error='Invalid JSON body'), 400
    req = CatchRequest.from_dict(payload)
    try:
        pokemon = _service().catch(req.name, req.type, req.image_url)
        return jsonify(pokemon.to_dict())
    except InvalidArgumentError as ve:
        logger.warning("Rejected catch: %s", ve)
        return jsonify(error=str(ve)), 400


@api.route('/<int:pokemon_id>/name', methods=['PUT'])
def rename_pokemon(pokemon_id):
    payload = _json_body()
    if payload is None:
        return jsonify(error='Invalid JSON body'), 400
    req = RenameRequest.from_dict(payload)
    try:
        pokemon = _service().rename(pokemon_id, req.new_name)
        return jsonify(pokemon.to_dict())
    except InvalidArgumentError as ve:
        logger.warning("Rejected rename of #%d: %s", pokemon_id, ve)
        return jsonify(error=str(ve)), 400
    except NotFoundError as nf:
        return jsonify(error=str(nf)), 404


@api.route('/<int:pokemon_id>/favorite', methods=['PUT'])
def toggle_favorite(pokemon_id):
    try:
        return jsonify(_service().toggle_favorite(pokemon_id).to_dict())
    except NotFoundError as nf:
        return jsonify(error=str(nf)), 404


@api.route('/<int:pokemon_id>', methods=['DELETE'])
def remove_pokemon(pokemon_id):
    try:
        _service().remove(pokemon_id)
        return jsonify(message='Pokémon removed successfully')
    except NotFoundError as nf:
        return jsonify(error=str(nf)), 404


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify(error=e.description), e.code

    @app.errorhandler(Exception)
    def unhandled_error(e):
        logger.exception("Unhandled exception on %s", request.path)
        return jsonify(error='Internal server error'), 500


def _configure_logging(cfg: Config) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(format='%(asctime)s %(levelname)s [%(name)s] %(message)s')
    level = logging.getLevelName(cfg.LOG_LEVEL.upper())
    if not isinstance(level, int):
        logger.warning("Unknown log level %r, using INFO", cfg.LOG_LEVEL)
        level = logging.INFO
    logging.getLogger('pokecatch').setLevel(level)


def create_app(config: Optional[Config] = None) -> Flask:
    """Build the Flask app with its own pokedex. For tests or WSGI servers call this.

    The public directory is mounted at the URL root so `/` can redirect to
    `/index.html` next to the game's scripts.
    """
    cfg = config or get_config()
    _configure_logging(cfg)

    app = Flask(__name__, static_folder=cfg.STATIC_DIR, static_url_path='')
    CORS(app, origins=cfg.cors_origins())
    app.extensions[EXTENSION_KEY] = build_container(cfg)

    @app.route('/')
    def index():
        return redirect('/index.html')

    @app.route('/ping')
    def ping():
        return jsonify(message="pong")

    app.register_blueprint(api)
    _register_error_handlers(app)
    logger.debug("pokecatch app created (static dir %s)", cfg.STATIC_DIR)
    return app


def main() -> None:
    cfg = get_config()
    app = create_app(cfg)
    app.run(host=cfg.HOST, port=cfg.PORT, debug=cfg.DEBUG)


if __name__ == '__main__':
    main()
