"""Tests for the REST API: cells, caches, transfers, inventory, events."""

import pytest
from fastapi.testclient import TestClient

from geocoin.api.app import create_app
from geocoin.config import GameConfig


pytestmark = pytest.mark.usefixtures("restore_logging")


@pytest.fixture
def client():
    # p=1.0 puts a cache in every cell, radius 1 -> 9 caches around the start
    config = GameConfig(neighborhood_size=1, cache_spawn_probability=1.0, log_level="WARNING")
    with TestClient(create_app(config)) as c:
        yield c


def _first_cache(client):
    return client.get("/api/v1/caches").json()["caches"][0]


class TestBoardRoutes:
    def test_config(self, client):
        body = client.get("/api/v1/config").json()
        assert body["tile_degrees"] == 1e-4
        assert body["neighborhood_size"] == 1
        assert body["start"]["lat"] == pytest.approx(36.98949379578401)

    def test_cells_default_radius(self, client):
        body = client.get("/api/v1/cells").json()
        assert body["radius"] == 1
        assert len(body["cells"]) == 9
        assert body["cells"][4]["i"] == body["origin"]["i"]
        assert body["cells"][4]["j"] == body["origin"]["j"]

    def test_cells_explicit_radius_and_point(self, client):
        body = client.get("/api/v1/cells", params={"lat": 0.00005, "lng": 0.00005, "radius": 2}).json()
        assert len(body["cells"]) == 25
        assert body["origin"]["i"] == 900000
        assert body["origin"]["j"] == 1800000

    def test_cell_center_inside_bounds(self, client):
        origin = client.get("/api/v1/cells", params={"lat": 0.00005, "lng": 0.00005, "radius": 0}).json()["origin"]
        assert origin["center"]["lat"] == pytest.approx(0.00005)
        assert origin["center"]["lng"] == pytest.approx(0.00005)

    def test_cells_negative_radius_rejected(self, client):
        assert client.get("/api/v1/cells", params={"radius": -1}).status_code == 422


class TestCacheRoutes:
    def test_caches_around_player(self, client):
        body = client.get("/api/v1/caches").json()
        assert body["count"] == 9
        assert all(c["coin_count"] == 3 and c["state"] == "has_coins" for c in body["caches"])

    def test_cache_center_is_bounds_midpoint(self, client):
        for c in client.get("/api/v1/caches").json()["caches"]:
            sw, ne = c["bounds"]["south_west"], c["bounds"]["north_east"]
            assert c["center"]["lat"] == pytest.approx((sw["lat"] + ne["lat"]) / 2)
            assert c["center"]["lng"] == pytest.approx((sw["lng"] + ne["lng"]) / 2)

    def test_get_cache(self, client):
        first = _first_cache(client)
        body = client.get(f"/api/v1/caches/{first['i']}/{first['j']}").json()
        assert body == first

    def test_missing_cache_404(self, client):
        assert client.get("/api/v1/caches/0/0").status_code == 404
        assert client.post("/api/v1/caches/0/0/collect").status_code == 404
        assert client.post("/api/v1/caches/0/0/deposit").status_code == 404

    def test_collect_and_deposit(self, client):
        first = _first_cache(client)
        base = f"/api/v1/caches/{first['i']}/{first['j']}"

        collected = client.post(f"{base}/collect").json()
        assert collected["status"] == "ok"
        assert collected["cache_coins"] == 2
        assert collected["inventory_coins"] == 1
        assert collected["coin"]["serial"] == first["coins"][-1]["serial"]

        deposited = client.post(f"{base}/deposit").json()
        assert deposited["status"] == "ok"
        assert deposited["coin"] == collected["coin"]
        assert deposited["cache_coins"] == 3
        assert deposited["inventory_coins"] == 0

    def test_deposit_with_empty_inventory_is_noop(self, client):
        first = _first_cache(client)
        body = client.post(f"/api/v1/caches/{first['i']}/{first['j']}/deposit").json()
        assert body["status"] == "noop"
        assert body["coin"] is None
        assert body["cache_coins"] == 3

    def test_collect_from_drained_cache_is_noop(self, client):
        first = _first_cache(client)
        base = f"/api/v1/caches/{first['i']}/{first['j']}"
        for _ in range(3):
            assert client.post(f"{base}/collect").json()["status"] == "ok"
        body = client.post(f"{base}/collect").json()
        assert body["status"] == "noop"
        assert body["inventory_coins"] == 3
        assert client.get(base).json()["state"] == "empty"


class TestPlayerRoutes:
    def test_inventory_and_conservation(self, client):
        first = _first_cache(client)
        client.post(f"/api/v1/caches/{first['i']}/{first['j']}/collect")
        body = client.get("/api/v1/inventory").json()
        assert body["count"] == 1
        assert body["total_coins"] == body["minted_coins"] == 27

    def test_events_feed(self, client):
        first = _first_cache(client)
        client.post(f"/api/v1/caches/{first['i']}/{first['j']}/collect")
        events = client.get("/api/v1/events").json()["events"]
        assert [e["category"] for e in events].count("spawn") == 9
        assert events[-1]["category"] == "collect"
        assert (events[-1]["i"], events[-1]["j"]) == (first["i"], first["j"])

        later = client.get("/api/v1/events", params={"since": events[-1]["seq"]}).json()["events"]
        assert len(later) == 1


class TestControlRoutes:
    def test_reset_restores_world(self, client):
        first = _first_cache(client)
        client.post(f"/api/v1/caches/{first['i']}/{first['j']}/collect")
        assert client.post("/api/v1/control/reset").json()["status"] == "ok"
        assert client.get("/api/v1/inventory").json()["count"] == 0
        assert client.get(f"/api/v1/caches/{first['i']}/{first['j']}").json()["coin_count"] == 3
