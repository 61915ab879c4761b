"""Services exposed to presentation clients."""

from atm_sim.services.accounts import AccountService
from atm_sim.services.admin import AdminService
from atm_sim.services.transactions import TransactionEngine

__all__ = ["AccountService", "AdminService", "TransactionEngine"]
