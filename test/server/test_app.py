import json
import pytest
from flask.testing import FlaskClient

from ethsnap.config import Config
from ethsnap.server.app import create_app
from ethsnap.snapshot.cache import SnapshotCache
from fixtures.general import FakeClock
from fixtures.w3 import LATEST_BLOCK, Web3Mock


@pytest.fixture
def client(snapshot_cache: SnapshotCache) -> FlaskClient:
    app = create_app(snapshot_cache, Config(max_age_ms=30_000))
    app.testing = True
    return app.test_client()


def test_snapshot_populates_cold_cache(client: FlaskClient):
    res = client.get("/api/ethereum/snapshot")
    assert res.status_code == 200
    body = res.get_json()
    assert set(body.keys()) == {
        "block",
        "transactions",
        "networkInfo",
        "blockHistory",
        "gasPriceHistory",
        "mempoolStats",
        "lastUpdate",
    }
    assert body["block"]["number"] == LATEST_BLOCK
    assert len(body["transactions"]) == 15
    assert body["transactions"][0]["to"] == "Contract Creation"
    assert body["networkInfo"] == {
        "blockNumber": LATEST_BLOCK,
        "gasPrice": "23.45",
        "txCount": 20,
    }


def test_snapshot_fresh_cache_skips_rpc(
    client: FlaskClient, snapshot_cache: SnapshotCache, w3_mock: Web3Mock, clock: FakeClock
):
    snapshot_cache.refresh()
    w3_mock.reset_calls()
    clock.advance(29_000)
    res = client.get("/api/ethereum/snapshot")
    assert res.get_json()["lastUpdate"] == snapshot_cache.read().last_update
    assert w3_mock.number_of_calls == 0


def test_snapshot_stale_cache_refreshes_inline(
    client: FlaskClient, snapshot_cache: SnapshotCache, w3_mock: Web3Mock, clock: FakeClock
):
    snapshot_cache.refresh()
    before = snapshot_cache.read().last_update
    clock.advance(45_000)
    w3_mock.advance()
    body = client.get("/api/ethereum/snapshot").get_json()
    assert body["lastUpdate"] > before
    assert body["block"]["number"] == LATEST_BLOCK + 1
    assert [b["number"] for b in body["blockHistory"]] == [LATEST_BLOCK + 1, LATEST_BLOCK]


def test_snapshot_node_down_serves_default(client: FlaskClient, w3_mock: Web3Mock):
    w3_mock.unreachable = True
    res = client.get("/api/ethereum/snapshot")
    assert res.status_code == 200
    body = res.get_json()
    assert body["block"] is None
    assert body["lastUpdate"] == 0
    assert body["networkInfo"] == {"blockNumber": 0, "gasPrice": "0", "txCount": 0}


def test_snapshot_node_down_serves_stale(
    client: FlaskClient, snapshot_cache: SnapshotCache, w3_mock: Web3Mock, clock: FakeClock
):
    snapshot_cache.refresh()
    before = snapshot_cache.read().last_update
    clock.advance(60_000)
    w3_mock.unreachable = True
    body = client.get("/api/ethereum/snapshot").get_json()
    assert body["lastUpdate"] == before
    assert body["block"]["number"] == LATEST_BLOCK


def test_health(client: FlaskClient, snapshot_cache: SnapshotCache, w3_mock: Web3Mock):
    assert client.get("/api/ethereum/health").get_json() == {
        "status": "ok",
        "lastUpdate": 0,
        "blockNumber": 0,
    }
    # health never refreshes
    assert w3_mock.number_of_calls == 0

    snapshot_cache.refresh()
    body = client.get("/api/ethereum/health").get_json()
    assert body["blockNumber"] == LATEST_BLOCK
    assert body["lastUpdate"] == snapshot_cache.read().last_update


def test_mempool(client: FlaskClient, snapshot_cache: SnapshotCache, w3_mock: Web3Mock):
    assert client.get("/api/ethereum/mempool").get_json() == {
        "pendingCount": 0,
        "avgGasPrice": "0",
        "totalValue": "0",
    }
    assert w3_mock.number_of_calls == 0

    snapshot_cache.refresh()
    body = client.get("/api/ethereum/mempool").get_json()
    assert body["avgGasPrice"] == "23.45"
    assert 10_000 <= body["pendingCount"] < 60_000


def test_stream_starts_with_initial_event(
    client: FlaskClient, snapshot_cache: SnapshotCache
):
    snapshot_cache.refresh()
    res = client.get("/api/ethereum/stream", buffered=False)
    try:
        assert res.status_code == 200
        assert res.mimetype == "text/event-stream"
        assert res.headers["Cache-Control"] == "no-cache"
        frame = next(iter(res.response))
        if isinstance(frame, bytes):
            frame = frame.decode()
        event = json.loads(frame[len("data: ") :])
        assert event["type"] == "initial"
        assert event["data"]["block"]["number"] == LATEST_BLOCK
    finally:
        res.close()


def test_unknown_route(client: FlaskClient):
    assert client.get("/api/ethereum/blocks").status_code == 404
