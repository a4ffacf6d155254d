"""HTTP API for Connect Relay."""
