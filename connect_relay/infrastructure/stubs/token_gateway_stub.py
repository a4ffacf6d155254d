"""Token Gateway Stub: a registry of in-memory tokens by address."""

from __future__ import annotations

from connect_relay.domain.errors import InvalidArgumentError
from connect_relay.domain.value_objects.address import Address
from connect_relay.infrastructure.stubs.token_ledger_stub import TokenLedgerStub


class TokenGatewayStub:
    """In-memory implementation of TokenGatewayProtocol."""

    def __init__(self, *ledgers: TokenLedgerStub) -> None:
        self._ledgers: dict[Address, TokenLedgerStub] = {}
        for ledger in ledgers:
            self.register(ledger)

    def register(self, ledger: TokenLedgerStub) -> TokenLedgerStub:
        """Make a token resolvable by its address."""
        self._ledgers[ledger.address] = ledger
        return ledger

    def create(self, token: Address) -> TokenLedgerStub:
        """Create and register an empty token at an address."""
        return self.register(TokenLedgerStub(token))

    def get_ledger(self, token: Address) -> TokenLedgerStub:
        try:
            return self._ledgers[token]
        except KeyError:
            raise InvalidArgumentError(f"No token known at address {token}") from None

    def known_tokens(self) -> list[Address]:
        return sorted(self._ledgers)
