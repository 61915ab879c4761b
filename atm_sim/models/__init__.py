"""Domain models for accounts and their history."""

from atm_sim.models.account import Account, AccountSummary
from atm_sim.models.base import HistoryEntry
from atm_sim.models.enums import BANKING_KINDS, AccountKind

__all__ = ["Account", "AccountKind", "AccountSummary", "BANKING_KINDS", "HistoryEntry"]
