"""Account model: one tagged variant covering every account kind."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from threading import RLock

from atm_sim.exceptions import InsufficientFundsError, InvalidAmountError, WrongAccountTypeError
from atm_sim.models.base import HistoryEntry
from atm_sim.models.enums import BANKING_KINDS, AccountKind
from atm_sim.money import MAX_AMOUNT

ZERO = Decimal("0")


@dataclass(eq=False)
class Account:
    """Bank account entity.

    Account kinds:
    - BASIC: checking account holding a balance
    - INTEREST: savings account, a BASIC account with an interest rate
    - ADMIN: administrator, no balance, manages the whole directory

    ``balance`` is ``None`` for ADMIN accounts and ``interest_rate`` is
    ``None`` for everything except INTEREST accounts. History is append-only
    and starts with an "Account Opened." entry.
    """

    account_number: int
    kind: AccountKind
    name: str
    pin: str = field(repr=False)
    balance: Decimal | None = None
    interest_rate: Decimal | None = None
    created_at: datetime = field(default_factory=datetime.now)
    history: list[HistoryEntry] = field(default_factory=list)
    _lock: RLock = field(default_factory=RLock, init=False, repr=False)

    def __post_init__(self) -> None:
        self.kind = AccountKind(self.kind)
        if self.kind in BANKING_KINDS:
            if self.balance is None:
                self.balance = ZERO
            self._check_balance(self.balance)
        elif self.balance is not None:
            raise WrongAccountTypeError("Admin accounts do not hold a balance")

        if self.kind == AccountKind.INTEREST:
            if self.interest_rate is None:
                self.interest_rate = ZERO
        elif self.interest_rate is not None:
            raise WrongAccountTypeError(f"{self.kind.label} accounts do not have an interest rate")

        if not self.history:
            self.record("Account Opened.", at=self.created_at)

    @property
    def lock(self) -> RLock:
        """Per-account lock serializing balance and PIN changes."""
        return self._lock

    @property
    def is_banking(self) -> bool:
        """Whether the account holds a balance."""
        return self.kind in BANKING_KINDS

    @property
    def is_admin(self) -> bool:
        return self.kind == AccountKind.ADMIN

    def record(self, description: str, at: datetime | None = None) -> HistoryEntry:
        """Append an entry to the account history."""
        entry = HistoryEntry(timestamp=at or datetime.now(), description=description)
        self.history.append(entry)
        return entry

    def rendered_history(self, fmt: str | None = None) -> list[str]:
        """Return history entries as display strings."""
        if fmt is None:
            return [entry.render() for entry in self.history]
        return [entry.render(fmt) for entry in self.history]

    # Mutators. PIN rules and amount parsing live in the services.
    def rename(self, name: str) -> None:
        self.name = name

    def replace_pin(self, pin: str) -> None:
        self.pin = pin

    def check_credit(self, amount: Decimal) -> None:
        """Raise if ``amount`` cannot be added to the balance."""
        self._require_banking()
        if amount < 0:
            raise InvalidAmountError("A credit cannot be negative.")
        self._check_balance(self.balance + amount)

    def credit(self, amount: Decimal) -> None:
        """Add ``amount`` to the balance."""
        self.check_credit(amount)
        self.balance += amount

    def debit(self, amount: Decimal) -> None:
        """Subtract ``amount`` from the balance, never going below zero."""
        self._require_banking()
        if amount < 0:
            raise InvalidAmountError("A debit cannot be negative.")
        if amount > self.balance:
            raise InsufficientFundsError(
                "You have an insufficient balance to complete this transaction."
            )
        self.balance -= amount

    def set_balance(self, balance: Decimal) -> None:
        self._require_banking()
        self._check_balance(balance)
        self.balance = balance

    def set_interest_rate(self, rate: Decimal) -> None:
        if self.kind != AccountKind.INTEREST:
            raise WrongAccountTypeError("This account is not a savings account.")
        self.interest_rate = rate

    def summary(self) -> "AccountSummary":
        """Read-only snapshot without credentials."""
        return AccountSummary(
            account_number=self.account_number,
            kind=self.kind,
            name=self.name,
            balance=self.balance,
            interest_rate=self.interest_rate,
            created_at=self.created_at,
            history_entries=len(self.history),
        )

    def _require_banking(self) -> None:
        if not self.is_banking:
            raise WrongAccountTypeError("This account is not a bank account.")

    @staticmethod
    def _check_balance(balance: Decimal) -> None:
        if balance < 0:
            raise InvalidAmountError("A balance cannot be negative.")
        if balance > MAX_AMOUNT:
            raise InvalidAmountError("The balance would exceed the maximum allowed.")


@dataclass(frozen=True)
class AccountSummary:
    """Snapshot of an account for directory listings."""

    account_number: int
    kind: AccountKind
    name: str
    balance: Decimal | None
    interest_rate: Decimal | None
    created_at: datetime
    history_entries: int
