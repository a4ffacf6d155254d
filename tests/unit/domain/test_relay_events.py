"""Unit tests for relay records."""

from datetime import datetime, timezone

import pytest

from connect_relay.domain.events import (
    AdminAddedEvent,
    AdminWithdrawalsPauseChangedEvent,
    ConnectionRequestedEvent,
    ConnectionRespondedEvent,
    FeeTokenChangedEvent,
    OwnershipTransferredEvent,
    RelayRecord,
    RequestFeeChangedEvent,
    RequestsPauseChangedEvent,
    ResponsesPauseChangedEvent,
    TokensWithdrawnEvent,
    pause_changed_event_for,
)
from connect_relay.domain.events.record import (
    RELAY_RECORD_SCHEMA_VERSION,
    decode_bytes,
    encode_bytes,
)
from connect_relay.domain.value_objects import PauseFlag
from tests.helpers.addresses import ALICE, BOB, OTHER_TOKEN, OWNER

EMITTED_AT = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestConnectionRecords:
    """Tests for connection request and response records."""

    def test_request_to_dict(self) -> None:
        event = ConnectionRequestedEvent(
            recipient=ALICE,
            sender=BOB,
            public_key="pk-bob",
            payload=b"\x01\x02",
            emitted_at=EMITTED_AT,
        )

        data = event.to_dict()

        assert data["event_type"] == "relay.connection.requested"
        assert data["recipient"] == str(ALICE)
        assert data["sender"] == str(BOB)
        assert data["payload"] == "0x0102"
        assert data["schema_version"] == RELAY_RECORD_SCHEMA_VERSION

    def test_request_from_dict_restores_record(self) -> None:
        event = ConnectionRequestedEvent(
            recipient=ALICE,
            sender=BOB,
            public_key="pk-bob",
            payload=b"hello",
            emitted_at=EMITTED_AT,
        )

        assert ConnectionRequestedEvent.from_dict(event.to_dict()) == event

    def test_response_from_dict_accepts_mixed_case(self) -> None:
        data = {
            "recipient": str(BOB).upper().replace("0X", "0x"),
            "sender": str(ALICE),
            "response": "0xff",
            "emitted_at": EMITTED_AT.isoformat(),
        }

        event = ConnectionRespondedEvent.from_dict(data)

        assert event.recipient == BOB
        assert event.response == b"\xff"

    def test_records_are_frozen(self) -> None:
        event = AdminAddedEvent(admin=ALICE, emitted_at=EMITTED_AT)

        with pytest.raises(AttributeError):
            event.admin = BOB  # type: ignore[misc]


class TestPauseRecords:
    """Tests for the per-switch pause records."""

    @pytest.mark.parametrize(
        ("flag", "record_type"),
        [
            (PauseFlag.REQUESTS, RequestsPauseChangedEvent),
            (PauseFlag.RESPONSES, ResponsesPauseChangedEvent),
            (PauseFlag.ADMIN_WITHDRAWALS, AdminWithdrawalsPauseChangedEvent),
        ],
    )
    def test_factory_picks_record_type(self, flag: PauseFlag, record_type: type) -> None:
        event = pause_changed_event_for(flag, OWNER, True, EMITTED_AT)

        assert isinstance(event, record_type)
        assert event.flag is flag
        assert event.to_dict()["paused"] is True

    def test_event_types_are_distinct(self) -> None:
        types = {
            RequestsPauseChangedEvent.event_type,
            ResponsesPauseChangedEvent.event_type,
            AdminWithdrawalsPauseChangedEvent.event_type,
        }
        assert len(types) == 3


class TestAmountRecords:
    """Large amounts are rendered as strings."""

    def test_fee_rendered_as_string(self) -> None:
        event = RequestFeeChangedEvent(actor=OWNER, new_fee=2**70, emitted_at=EMITTED_AT)

        assert event.to_dict()["new_fee"] == str(2**70)

    def test_withdrawal_to_dict(self) -> None:
        event = TokensWithdrawnEvent(
            token=OTHER_TOKEN,
            actor=OWNER,
            amount=10,
            recipient=ALICE,
            emitted_at=EMITTED_AT,
        )

        data = event.to_dict()

        assert data["amount"] == "10"
        assert data["recipient"] == str(ALICE)
        assert data["token"] == str(OTHER_TOKEN)


class TestRecordProtocol:
    def test_all_records_satisfy_protocol(self) -> None:
        records = [
            AdminAddedEvent(admin=ALICE, emitted_at=EMITTED_AT),
            OwnershipTransferredEvent(
                previous_owner=OWNER, new_owner=ALICE, emitted_at=EMITTED_AT
            ),
            FeeTokenChangedEvent(
                previous_token=OTHER_TOKEN,
                new_token=ALICE,
                actor=OWNER,
                emitted_at=EMITTED_AT,
            ),
        ]

        for record in records:
            assert isinstance(record, RelayRecord)


class TestByteEncoding:
    def test_encode_empty(self) -> None:
        assert encode_bytes(b"") == "0x"

    def test_decode_without_prefix(self) -> None:
        assert decode_bytes("0a0b") == b"\x0a\x0b"
