"""In-memory account directory."""

from dataclasses import dataclass, field
from decimal import Decimal
from threading import RLock

from atm_sim.exceptions import AccountNotFoundError, DuplicateAccountError
from atm_sim.generators.account_number import AccountNumberGenerator
from atm_sim.logging import get_logger
from atm_sim.models import Account, AccountKind
from atm_sim.pin import PinPolicy

logger = get_logger(__name__)


@dataclass
class AccountDirectory:
    """Registry of open accounts keyed by account number.

    The directory is an ordinary object; create one per bank (or per test)
    and pass it to the services that need it.
    """

    number_generator: AccountNumberGenerator = field(default_factory=AccountNumberGenerator)
    _accounts: dict[int, Account] = field(default_factory=dict)
    _lock: RLock = field(default_factory=RLock, repr=False)

    def generate_account_number(self) -> int:
        """Return an unused account number in [100000, 999999]."""
        with self._lock:
            return self.number_generator.generate(self._accounts.keys())

    def register(self, account: Account) -> None:
        """Add an account under its assigned number."""
        if not AccountNumberGenerator.in_range(account.account_number):
            raise ValueError(f"Account number {account.account_number} is not 6 digits")
        with self._lock:
            if account.account_number in self._accounts:
                raise DuplicateAccountError(
                    f"Account #{account.account_number} is already registered"
                )
            self._accounts[account.account_number] = account
        logger.info(
            "Registered %s account #%d",
            account.kind.value,
            account.account_number,
            extra={"account_number": account.account_number},
        )

    def create(
        self,
        kind: AccountKind,
        name: str,
        pin: str,
        balance: Decimal | None = None,
        interest_rate: Decimal | None = None,
    ) -> Account:
        """Assign a number, build the account and register it in one step."""
        with self._lock:
            account = Account(
                account_number=self.generate_account_number(),
                kind=kind,
                name=name,
                pin=pin,
                balance=balance,
                interest_rate=interest_rate,
            )
            self.register(account)
        return account

    def exists(self, account_number: int) -> bool:
        """Return True if registered, otherwise raise ``AccountNotFoundError``."""
        if account_number not in self._accounts:
            raise AccountNotFoundError(
                f"Account #{account_number} does not exist. Please check the account number."
            )
        return True

    def get(self, account_number: int) -> Account:
        """Return a registered account without authentication."""
        self.exists(account_number)
        return self._accounts[account_number]

    def lookup(self, account_number: int, pin: str) -> Account:
        """Return the account after checking existence and PIN."""
        self.exists(account_number)
        return PinPolicy(self).verify(account_number, pin)

    def remove(self, account_number: int) -> Account:
        """Delete an account from the directory and return it."""
        with self._lock:
            self.exists(account_number)
            account = self._accounts.pop(account_number)
        logger.info("Removed account #%d", account_number, extra={"account_number": account_number})
        return account

    def accounts(self) -> list[Account]:
        """Snapshot of all registered accounts."""
        with self._lock:
            return list(self._accounts.values())

    def summary(self) -> dict[str, int]:
        """Return counts of registered accounts per kind."""
        counts = {kind.value: 0 for kind in AccountKind}
        for account in self.accounts():
            counts[account.kind.value] += 1
        return counts

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_number: object) -> bool:
        return account_number in self._accounts
