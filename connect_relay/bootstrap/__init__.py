"""Bootstrap wiring for the relay and its ambient concerns."""
