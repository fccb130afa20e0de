"""Tests for the races HTTP endpoints."""

from datetime import timedelta

import pytest

from trackside.errors import StoreError


def make_row(now, race_id=1, days=10):
    return {
        "id": race_id,
        "meeting_id": 5,
        "name": "Flemington Race 1",
        "number": 1,
        "visible": 1,
        "advertised_start_time": now + timedelta(days=days),
    }


class TestListRaces:
    def test_list(self, client, mock_database, now):
        mock_database.fetch_all.return_value = [make_row(now)]

        response = client.get("/api/races")

        assert response.status_code == 200
        races = response.get_json()["races"]
        assert len(races) == 1
        assert races[0]["id"] == 1
        assert races[0]["status"] in ("OPEN", "CLOSED")

    def test_filter_and_order_args(self, client, mock_database):
        response = client.get(
            "/api/races?meeting_id=5&meeting_id=8&visible_only=true&order_by=number&asc=false"
        )

        assert response.status_code == 200
        query, params = mock_database.fetch_all.call_args.args
        assert query.endswith(" WHERE meeting_id IN (%s,%s) AND visible = 1 ORDER BY number DESC")
        assert params == (5, 8)

    def test_comma_separated_meeting_ids(self, client, mock_database):
        client.get("/api/races?meeting_id=3,4")

        _, params = mock_database.fetch_all.call_args.args
        assert params == (3, 4)

    def test_empty(self, client):
        response = client.get("/api/races")

        assert response.status_code == 200
        assert response.get_json() == {"races": []}

    def test_unknown_order_property(self, client, mock_database):
        response = client.get("/api/races", query_string={"order_by": "name;DROP TABLE races"})

        assert response.status_code == 400
        assert "cannot order by" in response.get_json()["error"]
        mock_database.fetch_all.assert_not_called()

    @pytest.mark.parametrize("raw", ["abc", "5.7"])
    def test_bad_meeting_id(self, client, mock_database, raw):
        response = client.get("/api/races", query_string={"meeting_id": raw})

        assert response.status_code == 400
        assert response.get_json() == {"error": f"meeting_id must be an integer, got {raw!r}"}
        mock_database.fetch_all.assert_not_called()

    def test_store_failure_is_generic(self, client, mock_database):
        mock_database.fetch_all.side_effect = StoreError("password authentication failed")

        response = client.get("/api/races")

        assert response.status_code == 500
        assert response.get_json() == {"error": "could not complete request"}


class TestGetRace:
    def test_found(self, client, mock_database, now):
        mock_database.fetch_one.return_value = make_row(now, race_id=42)

        response = client.get("/api/races/42")

        assert response.status_code == 200
        assert response.get_json()["id"] == 42
        assert mock_database.fetch_one.call_args.args[1] == (42,)

    def test_not_found(self, client):
        response = client.get("/api/races/99999")

        assert response.status_code == 404
        assert response.get_json() == {"error": "Race not found"}
