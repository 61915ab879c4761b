"""Self-service account operations: open, login, PIN change, history, close."""

from typing import Any

from atm_sim.exceptions import WrongAccountTypeError
from atm_sim.logging import get_logger
from atm_sim.models import Account, AccountKind
from atm_sim.services.base import BaseService

logger = get_logger(__name__)


class AccountService(BaseService):
    """Operations an account holder performs on their own account."""

    def open_account(
        self,
        kind: AccountKind,
        name: str,
        pin: str,
        pin_confirm: str,
        initial_balance: Any = None,
        interest_rate: Any = None,
    ) -> int:
        """Open a BASIC or INTEREST account and return its number.

        Raises
        ------
        WrongAccountTypeError
            If ``kind`` is ADMIN; only administrators create admin accounts.
        InvalidPinError, PinMismatchError
            If the PIN is malformed or not confirmed.
        NonPositiveAmountError
            If a supplied starting balance or interest rate is not positive.
        """
        if AccountKind(kind) == AccountKind.ADMIN:
            raise WrongAccountTypeError("Admin accounts can only be created by an administrator.")
        account = self.open_new_account(
            kind, name, pin, pin_confirm,
            initial_balance=initial_balance,
            interest_rate=interest_rate,
        )
        return account.account_number

    def login(self, account_number: int, pin: str) -> Account:
        """Return the account for valid credentials."""
        account = self.directory.lookup(account_number, pin)
        logger.info("Login to account #%d", account_number)
        return account

    def change_pin(self, account: Account, current_pin: str, new_pin: str, confirm_pin: str) -> None:
        self.require_open(account)
        self.pins.change(account.account_number, current_pin, new_pin, confirm_pin)

    def view_history(self, account: Account) -> list[str]:
        """Return the rendered history, oldest entry first."""
        self.require_open(account)
        return account.rendered_history(self.display.timestamp_format)

    def close_account(self, account: Account, pin: str) -> None:
        """Remove the account from the directory after checking its PIN."""
        with account.lock:
            self.require_open(account)
            self.pins.verify(account.account_number, pin)
            self.directory.remove(account.account_number)
        logger.info("Closed account #%d", account.account_number)
