import logging

from flask import Flask, jsonify

from trackside.api.params import InvalidArgument
from trackside.config import config
from trackside.db import Database
from trackside.errors import InvalidOrderByError, TracksideError
from trackside.racing import RacesRepository, RacingService
from trackside.sports import EventsRepository, SportsService

logger = logging.getLogger(__name__)


def create_app(database: Database = None, seed: bool = None) -> Flask:
    """
    Application factory.

    Run with: flask --app trackside.app:create_app run
    """
    app = Flask(__name__)

    if database is None:
        database = Database(config.database_url, default_timeout=config.query_timeout)
    if seed is None:
        seed = config.seed_on_startup

    races_repo = RacesRepository(database)
    events_repo = EventsRepository(database)
    if seed:
        races_repo.init()
        events_repo.init()

    app.racing_service = RacingService(races_repo)
    app.sports_service = SportsService(events_repo)

    # Register blueprints
    from trackside.api.events import bp as events_bp
    from trackside.api.races import bp as races_bp

    app.register_blueprint(races_bp, url_prefix="/api/races")
    app.register_blueprint(events_bp, url_prefix="/api/events")

    @app.errorhandler(InvalidArgument)
    @app.errorhandler(InvalidOrderByError)
    def bad_request(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(TracksideError)
    def request_failed(e):
        logger.error("Request failed: %s", e)
        return jsonify({"error": "could not complete request"}), 500

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    return app
