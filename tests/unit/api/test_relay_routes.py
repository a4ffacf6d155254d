"""Unit tests for the relay HTTP routes.

Each test installs a freshly built relay container over in-memory stubs
and drives it through the FastAPI TestClient.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry

from connect_relay.api.dependencies.relay import (
    CALLER_HEADER,
    reset_relay_container,
    set_relay_container,
)
from connect_relay.api.main import create_app
from connect_relay.api.middleware.logging_middleware import CORRELATION_HEADER
from connect_relay.bootstrap.relay import RelayContainer, build_relay
from connect_relay.config.relay_config import RelayConfig
from tests.helpers.addresses import ALICE, BOB, CAROL, OWNER, RELAY_ADDRESS
from tests.helpers.fake_time_authority import FakeTimeAuthority

FEE = 1000


@pytest.fixture
def container() -> Iterator[RelayContainer]:
    config = RelayConfig(
        relay_address=RELAY_ADDRESS,
        deployer_address=OWNER,
        default_fee_amount=FEE,
    )
    container = build_relay(
        config, time_authority=FakeTimeAuthority(), registry=CollectorRegistry()
    )
    set_relay_container(container)
    yield container
    reset_relay_container()


@pytest.fixture
def client(container: RelayContainer) -> TestClient:
    return TestClient(create_app(RelayConfig(relay_address=RELAY_ADDRESS)))


def as_caller(address: object) -> dict[str, str]:
    return {CALLER_HEADER: str(address)}


class TestConnectionRoutes:
    @pytest.mark.asyncio
    async def test_request_collects_fee(
        self, client: TestClient, container: RelayContainer
    ) -> None:
        ledger = container.token_gateway.get_ledger(container.relay.get_fee_token())
        ledger.mint(BOB, FEE)
        await ledger.approve(BOB, RELAY_ADDRESS, FEE)

        response = client.post(
            "/v1/connections/requests",
            json={"to": str(ALICE), "public_key": "pk-bob", "payload": "0x0a0b"},
            headers=as_caller(BOB),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["event_type"] == "relay.connection.requested"
        assert body["record"]["payload"] == "0x0a0b"
        assert body["record"]["sender"] == str(BOB)
        assert await ledger.balance_of(RELAY_ADDRESS) == FEE

    def test_request_without_allowance_is_502(self, client: TestClient) -> None:
        response = client.post(
            "/v1/connections/requests",
            json={"to": str(ALICE), "public_key": "pk"},
            headers=as_caller(BOB),
        )

        assert response.status_code == 502
        assert response.json()["detail"]["type"] == "urn:connect-relay:transfer-failed"

    def test_request_with_unresolvable_fee_token_is_502(
        self, client: TestClient
    ) -> None:
        client.put(
            "/v1/relay/fee-token",
            json={"address": str(CAROL)},
            headers=as_caller(OWNER),
        )

        response = client.post(
            "/v1/connections/requests",
            json={"to": str(ALICE), "public_key": "pk"},
            headers=as_caller(BOB),
        )

        assert response.status_code == 502
        assert response.json()["detail"]["type"] == "urn:connect-relay:transfer-failed"

    def test_self_addressed_request_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/v1/connections/requests",
            json={"to": str(BOB), "public_key": "pk"},
            headers=as_caller(BOB),
        )

        assert response.status_code == 400

    def test_malformed_recipient_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/v1/connections/responses",
            json={"to": "0x1234", "response": "0x00"},
            headers=as_caller(ALICE),
        )

        assert response.status_code == 400

    def test_response_is_201(self, client: TestClient) -> None:
        response = client.post(
            "/v1/connections/responses",
            json={"to": str(BOB), "response": "0xbeef"},
            headers=as_caller(ALICE),
        )

        assert response.status_code == 201
        assert response.json()["record"]["response"] == "0xbeef"

    def test_paused_responses_are_503(self, client: TestClient) -> None:
        client.put(
            "/v1/relay/pause/responses",
            json={"paused": True},
            headers=as_caller(OWNER),
        )

        response = client.post(
            "/v1/connections/responses",
            json={"to": str(BOB)},
            headers=as_caller(ALICE),
        )

        assert response.status_code == 503
        assert response.json()["detail"]["paused"] == "responses"

    def test_missing_caller_header_is_422(self, client: TestClient) -> None:
        response = client.post(
            "/v1/connections/responses", json={"to": str(BOB)}
        )

        assert response.status_code == 422

    def test_malformed_caller_header_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/v1/connections/responses",
            json={"to": str(BOB)},
            headers={CALLER_HEADER: "nobody"},
        )

        assert response.status_code == 400


class TestAdminRoutes:
    def test_add_and_remove_admin(
        self, client: TestClient, container: RelayContainer
    ) -> None:
        added = client.post(
            "/v1/relay/admins", json={"address": str(ALICE)}, headers=as_caller(OWNER)
        )
        assert added.status_code == 201
        assert container.relay.is_admin(ALICE)

        removed = client.delete(f"/v1/relay/admins/{ALICE}", headers=as_caller(OWNER))
        assert removed.status_code == 200
        assert not container.relay.is_admin(ALICE)

    def test_duplicate_admin_is_409(self, client: TestClient) -> None:
        response = client.post(
            "/v1/relay/admins", json={"address": str(OWNER)}, headers=as_caller(OWNER)
        )

        assert response.status_code == 409

    def test_remove_unknown_admin_is_404(self, client: TestClient) -> None:
        response = client.delete(f"/v1/relay/admins/{CAROL}", headers=as_caller(OWNER))

        assert response.status_code == 404

    def test_non_owner_is_403_with_role(self, client: TestClient) -> None:
        response = client.put(
            "/v1/relay/fee-token",
            json={"address": str(CAROL)},
            headers=as_caller(BOB),
        )

        assert response.status_code == 403
        assert response.json()["detail"]["required_role"] == "owner"

    def test_resign_and_transfer_ownership(
        self, client: TestClient, container: RelayContainer
    ) -> None:
        transferred = client.post(
            "/v1/relay/ownership", json={"address": str(ALICE)}, headers=as_caller(OWNER)
        )
        resigned = client.post("/v1/relay/admins/resign", headers=as_caller(OWNER))

        assert transferred.status_code == 200
        assert resigned.status_code == 200
        assert container.relay.owner == ALICE
        assert container.relay.admins == frozenset()

    def test_set_fee(self, client: TestClient, container: RelayContainer) -> None:
        response = client.put(
            "/v1/relay/fee", json={"amount": 0}, headers=as_caller(OWNER)
        )

        assert response.status_code == 200
        assert response.json()["record"]["new_fee"] == "0"
        assert container.relay.get_request_fee() == 0

    def test_negative_fee_is_400(self, client: TestClient) -> None:
        response = client.put(
            "/v1/relay/fee", json={"amount": -1}, headers=as_caller(OWNER)
        )

        assert response.status_code == 400

    def test_withdrawal_paused_for_admin(
        self, client: TestClient, container: RelayContainer
    ) -> None:
        token = container.relay.get_fee_token()
        container.token_gateway.get_ledger(token).mint(RELAY_ADDRESS, 10)
        client.post(
            "/v1/relay/admins", json={"address": str(ALICE)}, headers=as_caller(OWNER)
        )
        client.put(
            "/v1/relay/pause/admin-withdrawals",
            json={"paused": True},
            headers=as_caller(OWNER),
        )
        body = {"token": str(token), "amount": 4, "recipient": str(CAROL)}

        blocked = client.post("/v1/relay/withdrawals", json=body, headers=as_caller(ALICE))
        allowed = client.post("/v1/relay/withdrawals", json=body, headers=as_caller(OWNER))

        assert blocked.status_code == 503
        assert allowed.status_code == 201
        assert allowed.json()["record"]["amount"] == "4"

    def test_withdrawal_over_balance_is_409(
        self, client: TestClient, container: RelayContainer
    ) -> None:
        body = {
            "token": str(container.relay.get_fee_token()),
            "amount": 1,
            "recipient": str(CAROL),
        }

        response = client.post("/v1/relay/withdrawals", json=body, headers=as_caller(OWNER))

        assert response.status_code == 409
        assert response.json()["detail"]["available"] == "0"


class TestStateRoutes:
    def test_state_view(self, client: TestClient) -> None:
        response = client.get("/v1/relay/state")

        assert response.status_code == 200
        body = response.json()
        assert body["owner"] == str(OWNER)
        assert body["admins"] == [str(OWNER)]
        assert body["fee_amount"] == str(FEE)
        assert body["relay_address"] == str(RELAY_ADDRESS)
        assert body["requests_paused"] is False

    def test_records_filtered_by_type(self, client: TestClient) -> None:
        client.post(
            "/v1/relay/admins", json={"address": str(ALICE)}, headers=as_caller(OWNER)
        )
        client.put("/v1/relay/fee", json={"amount": 5}, headers=as_caller(OWNER))

        everything = client.get("/v1/relay/records").json()
        fees = client.get(
            "/v1/relay/records", params={"event_type": "relay.fee.amount_changed"}
        ).json()

        assert everything["total"] == 2
        assert fees["total"] == 1
        assert fees["records"][0]["record"]["new_fee"] == "5"

    def test_balance_of_unknown_token_is_400(self, client: TestClient) -> None:
        response = client.get(f"/v1/relay/balances/{CAROL}")

        assert response.status_code == 400

    def test_metrics_exposed(self, client: TestClient) -> None:
        client.post(
            "/v1/relay/admins", json={"address": str(ALICE)}, headers=as_caller(OWNER)
        )

        response = client.get("/v1/metrics")

        assert response.status_code == 200
        assert "relay_records_emitted_total" in response.text

    def test_correlation_id_echoed(self, client: TestClient) -> None:
        response = client.get(
            "/v1/relay/state", headers={CORRELATION_HEADER: "trace-123"}
        )

        assert response.headers[CORRELATION_HEADER] == "trace-123"
