from flask import Blueprint, current_app, jsonify

from trackside.api import params
from trackside.sports import EventFilter

bp = Blueprint("events", __name__)


@bp.route("", methods=["GET"])
def list_events():
    """List sporting events, optionally filtered and ordered."""
    event_filter = EventFilter(visible_only=params.flag("visible_only"))
    events = current_app.sports_service.list_events(event_filter, params.order_by())
    return jsonify({"events": [event.to_dict() for event in events]})
