"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from bonai_rewards.api.main import create_app
from bonai_rewards.infrastructure.bill_store import BillCollection
from bonai_rewards.infrastructure.fixtures import seed_bills


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "bonai-rewards"}


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"
    assert client.get("/health").headers["X-Request-ID"]


def test_list_bills_masks_numbers(client: TestClient):
    response = client.get("/v1/bills")
    assert response.status_code == 200

    bills = response.json()
    assert [bill["status"] for bill in bills] == ["Pending", "Paid", "Overdue"]
    assert all(bill["masked_number"] == "**** **** **** 5123" for bill in bills)
    assert all("card_number" not in bill for bill in bills)


def test_reward_frame_at_mount(client: TestClient):
    response = client.post("/v1/screens/reward/frame", json={"at_ms": 0})
    assert response.status_code == 200

    frame = response.json()
    assert [card["entry_phase"] for card in frame["cards"]] == ["running", "delayed", "delayed"]
    assert all(card["opacity"] == 0.0 for card in frame["cards"])
    assert frame["banner"]["visible"] is False


def test_reward_frame_replays_taps(client: TestClient):
    response = client.post(
        "/v1/screens/reward/frame",
        json={"at_ms": 1300, "taps": [{"index": 0, "at_ms": 1000}, {"index": 2, "at_ms": 5000}]},
    )
    assert response.status_code == 200

    cards = response.json()["cards"]
    assert cards[0]["expanded"] is True
    assert cards[0]["expansion_phase"] == "expanded"
    assert cards[0]["chevron_degrees"] == 180.0
    # the tap at 5000ms falls after the render time
    assert cards[2]["expanded"] is False


def test_reward_frame_unknown_card(client: TestClient):
    response = client.post("/v1/screens/reward/frame", json={"at_ms": 100, "taps": [{"index": 9, "at_ms": 50}]})
    assert response.status_code == 404


def test_reward_frame_rejects_negative_time(client: TestClient):
    response = client.post("/v1/screens/reward/frame", json={"at_ms": -1})
    assert response.status_code == 422


@pytest.mark.parametrize(
    "body",
    [
        '{"at_ms": Infinity}',
        '{"at_ms": NaN}',
        '{"at_ms": 100, "taps": [{"index": 0, "at_ms": Infinity}]}',
    ],
)
def test_reward_frame_rejects_non_finite_time(client: TestClient, body: str):
    """Non-finite times fail validation instead of reaching the clock"""
    response = client.post(
        "/v1/screens/reward/frame",
        content=body,
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 422


def test_reward_frame_leaves_collection_unsubscribed():
    collection = BillCollection(seed_bills())
    client = TestClient(create_app(collection))

    client.post("/v1/screens/reward/frame", json={"at_ms": 500})
    assert collection.subscriber_count == 0


def test_brand_grid(client: TestClient):
    response = client.get("/v1/screens/brands")
    assert response.status_code == 200

    frame = response.json()
    assert frame["columns"] == 2
    assert len(frame["rows"]) == 3
    assert frame["rows"][0][0]["name"] == "Amazon"


def test_claim_reward(client: TestClient):
    response = client.post("/v1/brands/0/claim")
    assert response.status_code == 200
    assert response.json()["message"] == "Your reward has been applied to Amazon"
    assert response.json()["open"] is True


def test_claim_unknown_brand(client: TestClient):
    assert client.post("/v1/brands/6/claim").status_code == 404
    assert client.post("/v1/brands/-1/claim").status_code == 404


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/brands/1/claim")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "bonai_reward_claims_total" in response.text


def test_request_metrics_use_route_template(client: TestClient):
    """Per-index claim URLs share one endpoint label"""
    client.post("/v1/brands/2/claim")
    client.post("/v1/brands/3/claim")
    client.get("/no-such-page")

    text = client.get("/metrics").text
    assert 'endpoint="/v1/brands/{index}/claim"' in text
    assert 'endpoint="/v1/brands/2/claim"' not in text
    assert 'endpoint="unmatched"' in text
