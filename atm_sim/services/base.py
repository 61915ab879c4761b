"""Base class for services operating on an account directory."""

from decimal import Decimal
from typing import Any

from atm_sim.config import DisplayConfig
from atm_sim.exceptions import AccountNotFoundError, WrongAccountTypeError
from atm_sim.models import BANKING_KINDS, Account, AccountKind
from atm_sim.money import format_currency, is_positive_amount, is_positive_rate
from atm_sim.pin import PinPolicy
from atm_sim.store.directory import AccountDirectory


class BaseService:
    """Shared wiring for services.

    Parameters
    ----------
    directory : AccountDirectory
        Directory the service reads and mutates.
    display : DisplayConfig | None
        Formatting used in history entries.
    """

    def __init__(
        self,
        directory: AccountDirectory,
        display: DisplayConfig | None = None,
    ) -> None:
        self.directory = directory
        self.display = display or DisplayConfig()
        self.pins = PinPolicy(directory)

    def money(self, amount: Decimal) -> str:
        return format_currency(amount, self.display.currency_symbol)

    def require_open(self, account: Account) -> None:
        """Raise ``AccountNotFoundError`` if the handle refers to a closed account."""
        if self.directory.get(account.account_number) is not account:
            raise AccountNotFoundError(
                f"Account #{account.account_number} does not exist. Please check the account number."
            )

    def open_new_account(
        self,
        kind: AccountKind,
        name: str,
        pin: str,
        pin_confirm: str,
        initial_balance: Any = None,
        interest_rate: Any = None,
    ) -> Account:
        """Validate creation parameters and register a new account.

        ``initial_balance`` and ``interest_rate`` are optional and default
        to zero; when supplied they must be positive. Admin accounts take
        neither and only INTEREST accounts take a rate.
        """
        kind = AccountKind(kind)
        PinPolicy.validate_new(pin, pin_confirm)

        balance = None
        if initial_balance is not None:
            if kind not in BANKING_KINDS:
                raise WrongAccountTypeError("Admin accounts do not hold a balance.")
            balance = is_positive_amount(initial_balance)

        rate = None
        if interest_rate is not None:
            if kind != AccountKind.INTEREST:
                raise WrongAccountTypeError("Only savings accounts have an interest rate.")
            rate = is_positive_rate(interest_rate)

        return self.directory.create(kind, name.strip(), pin, balance=balance, interest_rate=rate)
