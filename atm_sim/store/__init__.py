"""In-memory account storage."""

from atm_sim.store.directory import AccountDirectory

__all__ = ["AccountDirectory"]
