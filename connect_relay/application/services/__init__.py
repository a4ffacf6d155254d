"""Application services for the relay."""

from connect_relay.application.services.access_control_service import (
    AccessControlService,
)
from connect_relay.application.services.connection_relay import ConnectionRelay
from connect_relay.application.services.connection_service import ConnectionService
from connect_relay.application.services.custody_service import CustodyService
from connect_relay.application.services.fee_parameter_service import (
    FeeParameterService,
)
from connect_relay.application.services.pause_controller_service import (
    PauseControllerService,
)

__all__: list[str] = [
    "AccessControlService",
    "ConnectionRelay",
    "ConnectionService",
    "CustodyService",
    "FeeParameterService",
    "PauseControllerService",
]
