"""Unit tests for RelayState."""

from connect_relay.domain.models.relay_state import (
    DEFAULT_FEE_AMOUNT,
    DEFAULT_FEE_TOKEN,
    RelayState,
)
from connect_relay.domain.value_objects import PauseFlag
from tests.helpers.addresses import ALICE, BOB, OTHER_TOKEN, OWNER


class TestRelayStateInitial:
    """Tests for the freshly deployed state."""

    def test_deployer_is_owner_and_only_admin(self) -> None:
        state = RelayState.initial(OWNER)

        assert state.owner == OWNER
        assert state.admins == {OWNER}
        assert state.is_owner(OWNER)
        assert state.is_admin(OWNER)

    def test_all_switches_off(self) -> None:
        state = RelayState.initial(OWNER)

        for flag in PauseFlag:
            assert state.is_paused(flag) is False

    def test_default_fee_parameters(self) -> None:
        state = RelayState.initial(OWNER)

        assert state.fee_amount == DEFAULT_FEE_AMOUNT == 10**19
        assert state.fee_token == DEFAULT_FEE_TOKEN

    def test_custom_fee_parameters(self) -> None:
        state = RelayState.initial(OWNER, fee_token=OTHER_TOKEN, fee_amount=5)

        assert state.fee_token == OTHER_TOKEN
        assert state.fee_amount == 5


class TestRelayStateSwitches:
    """Tests for switch access by flag."""

    def test_set_paused_touches_only_one_switch(self) -> None:
        state = RelayState.initial(OWNER)

        state.set_paused(PauseFlag.RESPONSES, True)

        assert state.responses_paused is True
        assert state.requests_paused is False
        assert state.admin_withdrawals_paused is False

    def test_is_paused_reads_each_switch(self) -> None:
        state = RelayState.initial(OWNER)
        state.admin_withdrawals_paused = True

        assert state.is_paused(PauseFlag.ADMIN_WITHDRAWALS) is True
        assert state.is_paused(PauseFlag.REQUESTS) is False


class TestRelayStateStagedCopy:
    """Tests for staged_copy isolation."""

    def test_admin_changes_do_not_leak(self) -> None:
        state = RelayState.initial(OWNER)
        staged = state.staged_copy()

        staged.admins.add(ALICE)
        staged.owner = BOB
        staged.fee_amount = 0

        assert state.admins == {OWNER}
        assert state.owner == OWNER
        assert state.fee_amount == DEFAULT_FEE_AMOUNT

    def test_copy_starts_equal(self) -> None:
        state = RelayState.initial(OWNER)
        state.admins.add(ALICE)

        assert state.staged_copy() == state


class TestRelayStateToDict:
    def test_to_dict_renders_strings_and_sorted_admins(self) -> None:
        state = RelayState.initial(OWNER)
        state.admins.add(ALICE)

        data = state.to_dict()

        assert data["owner"] == str(OWNER)
        assert data["admins"] == sorted([str(OWNER), str(ALICE)])
        assert data["fee_amount"] == DEFAULT_FEE_AMOUNT
        assert data["fee_token"] == str(DEFAULT_FEE_TOKEN)
        assert data["requests_paused"] is False
