"""Generators for account numbers and demo data."""

from atm_sim.generators.account_number import AccountNumberGenerator
from atm_sim.generators.demo import DemoAccount, DemoAccountGenerator

__all__ = ["AccountNumberGenerator", "DemoAccount", "DemoAccountGenerator"]
