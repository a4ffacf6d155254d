"""Value objects for the relay domain."""

from connect_relay.domain.value_objects.address import NULL_ADDRESS, Address
from connect_relay.domain.value_objects.pause_flag import PauseFlag
from connect_relay.domain.value_objects.role import Role

__all__: list[str] = ["Address", "NULL_ADDRESS", "PauseFlag", "Role"]
