"""Unit tests for PauseControllerService."""

import pytest

from connect_relay.application.services.access_control_service import (
    AccessControlService,
)
from connect_relay.application.services.pause_controller_service import (
    PauseControllerService,
)
from connect_relay.domain.errors import OperationPausedError, UnauthorizedError
from connect_relay.domain.events import (
    AdminWithdrawalsPauseChangedEvent,
    RequestsPauseChangedEvent,
    ResponsesPauseChangedEvent,
)
from connect_relay.domain.models.relay_state import RelayState
from connect_relay.domain.value_objects import PauseFlag
from connect_relay.infrastructure.stubs.record_publisher_stub import (
    RecordPublisherStub,
)
from tests.helpers.addresses import ALICE, BOB, OWNER
from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture
def pause(
    publisher: RecordPublisherStub, fake_time: FakeTimeAuthority
) -> PauseControllerService:
    access = AccessControlService(publisher, fake_time)
    return PauseControllerService(access, publisher, fake_time)


@pytest.fixture
def state() -> RelayState:
    state = RelayState.initial(OWNER)
    state.admins.add(ALICE)
    return state


class TestSwitchWrites:
    @pytest.mark.asyncio
    async def test_admin_sets_requests_switch(
        self,
        pause: PauseControllerService,
        state: RelayState,
        fake_time: FakeTimeAuthority,
    ) -> None:
        event = await pause.set_requests_paused(state, ALICE, True)

        assert state.requests_paused is True
        assert isinstance(event, RequestsPauseChangedEvent)
        assert event.actor == ALICE
        assert event.paused is True
        assert event.emitted_at == fake_time.utcnow()

    @pytest.mark.asyncio
    async def test_admin_sets_responses_switch(
        self, pause: PauseControllerService, state: RelayState
    ) -> None:
        event = await pause.set_responses_paused(state, ALICE, True)

        assert state.responses_paused is True
        assert state.requests_paused is False
        assert isinstance(event, ResponsesPauseChangedEvent)

    @pytest.mark.asyncio
    async def test_non_admin_cannot_set_requests_switch(
        self,
        pause: PauseControllerService,
        state: RelayState,
        publisher: RecordPublisherStub,
    ) -> None:
        with pytest.raises(UnauthorizedError):
            await pause.set_requests_paused(state, BOB, True)

        assert state.requests_paused is False
        assert publisher.records == []

    @pytest.mark.asyncio
    async def test_owner_sets_admin_withdrawals_switch(
        self, pause: PauseControllerService, state: RelayState
    ) -> None:
        event = await pause.set_admin_withdrawals_paused(state, OWNER, True)

        assert state.admin_withdrawals_paused is True
        assert isinstance(event, AdminWithdrawalsPauseChangedEvent)

    @pytest.mark.asyncio
    async def test_admin_cannot_set_admin_withdrawals_switch(
        self, pause: PauseControllerService, state: RelayState
    ) -> None:
        with pytest.raises(UnauthorizedError):
            await pause.set_admin_withdrawals_paused(state, ALICE, True)

        assert state.admin_withdrawals_paused is False

    @pytest.mark.asyncio
    async def test_writing_current_value_still_emits(
        self,
        pause: PauseControllerService,
        state: RelayState,
        publisher: RecordPublisherStub,
    ) -> None:
        await pause.set_requests_paused(state, ALICE, False)
        await pause.set_requests_paused(state, ALICE, False)

        assert len(publisher.records) == 2
        assert state.requests_paused is False


class TestEnsureNotPaused:
    def test_passes_when_switch_clear(
        self, pause: PauseControllerService, state: RelayState
    ) -> None:
        pause.ensure_not_paused(state, PauseFlag.REQUESTS, BOB)

    def test_raises_when_switch_set(
        self, pause: PauseControllerService, state: RelayState
    ) -> None:
        state.requests_paused = True

        with pytest.raises(OperationPausedError) as exc_info:
            pause.ensure_not_paused(state, PauseFlag.REQUESTS, BOB)

        assert exc_info.value.flag is PauseFlag.REQUESTS

    def test_owner_not_exempt_by_default(
        self, pause: PauseControllerService, state: RelayState
    ) -> None:
        state.responses_paused = True

        with pytest.raises(OperationPausedError):
            pause.ensure_not_paused(state, PauseFlag.RESPONSES, OWNER)

    def test_owner_exempt_when_requested(
        self, pause: PauseControllerService, state: RelayState
    ) -> None:
        state.admin_withdrawals_paused = True

        pause.ensure_not_paused(
            state, PauseFlag.ADMIN_WITHDRAWALS, OWNER, exempt_if_owner=True
        )

    def test_admin_not_exempt(
        self, pause: PauseControllerService, state: RelayState
    ) -> None:
        state.admin_withdrawals_paused = True

        with pytest.raises(OperationPausedError):
            pause.ensure_not_paused(
                state, PauseFlag.ADMIN_WITHDRAWALS, ALICE, exempt_if_owner=True
            )
