"""Demo account generator for populating a directory with sample holders."""

from __future__ import annotations

import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from faker import Faker

from atm_sim.generators.base import BaseGenerator
from atm_sim.models.enums import AccountKind


@dataclass
class DemoAccount:
    """Parameters for opening one demo account."""

    kind: AccountKind
    name: str
    pin: str
    initial_balance: Decimal
    interest_rate: Decimal | None = None


class DemoAccountGenerator(BaseGenerator):
    """Generate synthetic account holders.

    Account kinds:
    - BASIC: checking account (~75%)
    - INTEREST: savings account with a 0.5% - 5% rate (~25%)
    """

    ACCOUNT_KINDS = [AccountKind.BASIC, AccountKind.INTEREST]
    ACCOUNT_KIND_WEIGHTS = [0.75, 0.25]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(seed, rng)
        self.fake = Faker(locale)
        if self.seed is not None:
            self.fake.seed_instance(self.seed)

    def generate(self) -> DemoAccount:
        """Generate a single demo account."""
        kind = self.random.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]
        cents = self.random.randint(1_000, 2_500_000)
        balance = Decimal(cents) / 100

        interest_rate = None
        if kind == AccountKind.INTEREST:
            interest_rate = Decimal(self.random.randint(50, 500)) / 100

        return DemoAccount(
            kind=kind,
            name=self.fake.name(),
            pin=f"{self.random.randint(0, 9999):04d}",
            initial_balance=balance,
            interest_rate=interest_rate,
        )

    def generate_batch(self, count: int) -> Iterator[DemoAccount]:
        """Generate ``count`` demo accounts."""
        for _ in range(count):
            yield self.generate()
