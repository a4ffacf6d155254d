"""Domain layer for Connect Relay: state, value objects, records and errors."""
