"""Tests for API endpoints."""

import pytest


class TestRootEndpoints:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["endpoints"]["diet"] == "/diet/evaluate"

    def test_health(self, client):
        response = client.get("/health")
        assert response.json() == {"status": "healthy"}


class TestFeedEndpoints:
    """Tests for feed catalog endpoints."""

    def test_list_feeds(self, client):
        """Test listing the seeded catalog, ordered by name."""
        response = client.get("/feed")
        assert response.status_code == 200
        data = response.json()
        assert [f["feed_id"] for f in data] == ["alfalfa", "beetPulp", "timothy"]
        assert data[0]["name"] == "Alfalfa Hay"

    def test_get_feed(self, client):
        response = client.get("/feed/timothy")
        assert response.status_code == 200
        data = response.json()
        assert data["digestible_energy"] == 0.9
        assert data["crude_protein"] == 8

    def test_get_feed_not_found(self, client):
        """Test getting non-existent feed returns 404."""
        response = client.get("/feed/oats")
        assert response.status_code == 404


class TestDietEvaluation:
    """Tests for the diet evaluation endpoint."""

    def test_timothy_only(self, client):
        """1000 lb horse on 20 lb/day timothy lacks every nutrient."""
        response = client.post("/diet/evaluate", json={
            "weight": 1000,
            "entries": [{"feed_id": "timothy", "amount": 20}],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["has_valid_feed"] is True
        assert data["message"] is None
        assert data["totals"] == {
            "energy": 18.0, "protein": 1600.0, "calcium": 6.0,
            "phosphorus": 4.0, "vitamin_e": 300.0,
        }
        assert data["requirements"] == {
            "energy": 30.0, "protein": 36000.0, "calcium": 40.0,
            "phosphorus": 28.0, "vitamin_e": 1000.0,
        }
        assert [n["status"] for n in data["nutrients"]] == ["lacking"] * 5

        energy = data["nutrients"][0]
        assert energy == {
            "nutrient": "energy",
            "label": "Digestible Energy (Mcal)",
            "required": 30.0,
            "intake": 18.0,
            "percent_met": 60.0,
            "status": "lacking",
        }

    def test_no_valid_feed(self, client):
        """All feeds blank: message, no table."""
        response = client.post("/diet/evaluate", json={
            "weight": 1000,
            "entries": [{"feed_id": "", "amount": 10}, {"feed_id": "", "amount": 5}],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["has_valid_feed"] is False
        assert data["message"] == "Please enter at least one valid feed and amount."
        assert data["totals"] is None
        assert data["nutrients"] == []
        assert data["skipped_entries"] == 2

    def test_no_entries(self, client):
        response = client.post("/diet/evaluate", json={"weight": 1000})
        assert response.status_code == 200
        assert response.json()["has_valid_feed"] is False

    def test_bad_rows_skipped(self, client):
        """Unknown feeds and bad amounts are skipped, not rejected."""
        response = client.post("/diet/evaluate", json={
            "weight": 1000,
            "entries": [
                {"feed_id": "timothy", "amount": 20},
                {"feed_id": "oats", "amount": 5},
                {"feed_id": "alfalfa", "amount": "abc"},
                {"feed_id": "alfalfa", "amount": -2},
                {"feed_id": "alfalfa", "amount": None},
                {"feed_id": None, "amount": 3},
            ],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["valid_entries"] == 1
        assert data["skipped_entries"] == 5
        assert data["totals"]["energy"] == 18.0

    def test_string_amount(self, client):
        response = client.post("/diet/evaluate", json={
            "weight": 1000,
            "entries": [{"feed_id": "timothy", "amount": "20"}],
        })
        assert response.json()["totals"]["energy"] == 18.0

    def test_mixed_diet(self, client):
        response = client.post("/diet/evaluate", json={
            "weight": 1000,
            "entries": [
                {"feed_id": "timothy", "amount": 15},
                {"feed_id": "alfalfa", "amount": 10},
                {"feed_id": "beetPulp", "amount": 2},
            ],
        })
        data = response.json()
        statuses = {n["nutrient"]: n["status"] for n in data["nutrients"]}
        # 15*0.9 + 10*1.0 + 2*1.2 = 25.9 Mcal of 30
        assert data["totals"]["energy"] == 25.9
        assert statuses["energy"] == "lacking"
        # 15*0.3 + 10*5.4 + 2*3.9 = 66.3 g of 40
        assert statuses["calcium"] == "overfed"

    def test_weight_in_kg(self, client):
        response = client.post("/diet/evaluate", json={
            "weight": 500,
            "weight_unit": "kg",
            "entries": [{"feed_id": "timothy", "amount": 20}],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["weight_lbs"] == pytest.approx(1102.31)
        assert data["requirements"]["energy"] == pytest.approx(33.07)

    def test_heavy_horse(self, client):
        """No upper weight limit: a draft horse over 5000 lbs is evaluated."""
        response = client.post("/diet/evaluate", json={
            "weight": 6000,
            "entries": [{"feed_id": "timothy", "amount": 20}],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["requirements"]["energy"] == 180.0
        assert data["nutrients"][0]["status"] == "lacking"

    @pytest.mark.parametrize("weight", [0, -100, "heavy", None])
    def test_invalid_weight(self, client, weight):
        """Test invalid weight is rejected before evaluation."""
        response = client.post("/diet/evaluate", json={
            "weight": weight,
            "entries": [{"feed_id": "timothy", "amount": 20}],
        })
        assert response.status_code == 422

    def test_small_kg_weight_accepted(self, client):
        """A tiny kg weight is converted without rounding to zero."""
        response = client.post("/diet/evaluate", json={
            "weight": 0.001,
            "weight_unit": "kg",
            "entries": [{"feed_id": "timothy", "amount": 20}],
        })
        assert response.status_code == 200
        assert response.json()["weight_lbs"] == pytest.approx(0.00220462)

    def test_kg_weight_overflow(self, client):
        """A kg weight that overflows to infinity in lbs is rejected."""
        response = client.post("/diet/evaluate", json={
            "weight": 1e308,
            "weight_unit": "kg",
            "entries": [{"feed_id": "timothy", "amount": 20}],
        })
        assert response.status_code == 422

    @pytest.mark.parametrize("entry", [
        {"feed_id": "alfalfa", "amount": True},
        {"feed_id": "alfalfa", "amount": [1]},
        {"feed_id": "alfalfa", "amount": {"a": 1}},
        {"feed_id": 7, "amount": 5},
        {"feed_id": ["alfalfa"], "amount": 5},
        {"feed_id": True, "amount": 5},
    ])
    def test_malformed_row_skipped(self, client, entry):
        """A malformed row is skipped without losing the valid rows."""
        response = client.post("/diet/evaluate", json={
            "weight": 1000,
            "entries": [{"feed_id": "timothy", "amount": 20}, entry],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["valid_entries"] == 1
        assert data["skipped_entries"] == 1
        assert data["totals"]["energy"] == 18.0

    def test_boolean_amount_alone(self, client):
        """true is not an amount, so the diet has no valid feed."""
        response = client.post("/diet/evaluate", json={
            "weight": 1000,
            "entries": [{"feed_id": "timothy", "amount": True}],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["valid_entries"] == 0
        assert data["has_valid_feed"] is False
