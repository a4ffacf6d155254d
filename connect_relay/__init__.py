"""
Connect Relay - gated connection request/response relay.

Lets one party announce intent to connect to another by emitting an
observable connection request record, and lets the recipient answer with
a connection response record. Request emission is gated by a fee and a
pause switch; collected fees are held in custody under an owner/admin
privilege model.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
