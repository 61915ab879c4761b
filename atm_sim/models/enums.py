"""Enumeration types for account entities."""

from enum import Enum


class AccountKind(str, Enum):
    BASIC = "BASIC"
    INTEREST = "INTEREST"
    ADMIN = "ADMIN"

    @property
    def label(self) -> str:
        """Human-readable name used in history entries."""
        return _LABELS[self]


_LABELS = {
    AccountKind.BASIC: "Bank",
    AccountKind.INTEREST: "Savings",
    AccountKind.ADMIN: "Admin",
}

BANKING_KINDS = frozenset({AccountKind.BASIC, AccountKind.INTEREST})
