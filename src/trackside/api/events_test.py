"""Tests for the events HTTP endpoints."""

from datetime import timedelta


class TestListEvents:
    def test_list(self, client, mock_database, now):
        mock_database.fetch_all.return_value = [
            {
                "id": 3,
                "name": "Broncos vs Storm",
                "address": "Suncorp Stadium",
                "visible": 0,
                "advertised_start_time": now - timedelta(days=10),
            }
        ]

        response = client.get("/api/events")

        assert response.status_code == 200
        event = response.get_json()["events"][0]
        assert event["id"] == 3
        assert event["visible"] is False
        assert event["status"] == "CLOSED"

    def test_visible_only_and_order(self, client, mock_database):
        response = client.get("/api/events?visible_only=1&order_by=advertised_start_time")

        assert response.status_code == 200
        query, _ = mock_database.fetch_all.call_args.args
        assert query.endswith(" WHERE visible = 1 ORDER BY advertised_start_time ASC")

    def test_meeting_is_not_sortable_for_events(self, client):
        response = client.get("/api/events?order_by=meeting_id")

        assert response.status_code == 400


class TestHealth:
    def test_health(self, client):
        assert client.get("/api/health").get_json() == {"status": "ok"}
