from flask import Blueprint, current_app, jsonify

from trackside.api import params
from trackside.racing import RaceFilter

bp = Blueprint("races", __name__)


@bp.route("", methods=["GET"])
def list_races():
    """List races, optionally filtered and ordered."""
    race_filter = RaceFilter(
        meeting_ids=params.int_list("meeting_id"),
        visible_only=params.flag("visible_only"),
    )
    races = current_app.racing_service.list_races(race_filter, params.order_by())
    return jsonify({"races": [race.to_dict() for race in races]})


@bp.route("/<int:race_id>", methods=["GET"])
def get_race(race_id: int):
    """Get race by ID."""
    race = current_app.racing_service.get_race(race_id)
    if not race:
        return jsonify({"error": "Race not found"}), 404
    return jsonify(race.to_dict())
