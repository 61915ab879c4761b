"""Pytest configuration and fixtures."""

import logging
from decimal import Decimal
from typing import Iterator

import pytest

from atm_sim.generators import AccountNumberGenerator
from atm_sim.models import Account, AccountKind
from atm_sim.services import AccountService, AdminService, TransactionEngine
from atm_sim.store import AccountDirectory


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_pin() -> str:
    """Valid PIN used by sample accounts."""
    return "1234"


@pytest.fixture
def directory(seed: int) -> AccountDirectory:
    """Fresh directory with a seeded number generator."""
    return AccountDirectory(number_generator=AccountNumberGenerator(seed=seed))


@pytest.fixture
def accounts(directory: AccountDirectory) -> AccountService:
    return AccountService(directory)


@pytest.fixture
def engine(directory: AccountDirectory) -> TransactionEngine:
    return TransactionEngine(directory)


@pytest.fixture
def admin_service(directory: AccountDirectory) -> AdminService:
    return AdminService(directory)


@pytest.fixture
def basic_account(directory: AccountDirectory, sample_pin: str) -> Account:
    """Checking account holding $100.00."""
    return directory.create(AccountKind.BASIC, "Ada Lovelace", sample_pin, balance=Decimal("100.00"))


@pytest.fixture
def other_account(directory: AccountDirectory) -> Account:
    """Checking account holding $50.00."""
    return directory.create(AccountKind.BASIC, "Charles Babbage", "4321", balance=Decimal("50.00"))


@pytest.fixture
def savings_account(directory: AccountDirectory) -> Account:
    """Savings account holding $1000.00 at 2.5%."""
    return directory.create(
        AccountKind.INTEREST,
        "Grace Hopper",
        "2468",
        balance=Decimal("1000.00"),
        interest_rate=Decimal("2.5"),
    )


@pytest.fixture
def admin_account(directory: AccountDirectory) -> Account:
    """Administrator account."""
    return directory.create(AccountKind.ADMIN, "Root Admin", "9999")


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo ``setup_logging`` calls made by a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
