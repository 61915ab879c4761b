"""atm-sim: in-memory ATM and banking core."""

from atm_sim.bank import Bank
from atm_sim.config import BankConfig
from atm_sim.models import Account, AccountKind, AccountSummary
from atm_sim.services import AccountService, AdminService, TransactionEngine
from atm_sim.store import AccountDirectory

__all__ = [
    "Account",
    "AccountDirectory",
    "AccountKind",
    "AccountService",
    "AccountSummary",
    "AdminService",
    "Bank",
    "BankConfig",
    "TransactionEngine",
]

__version__ = "0.1.0"
