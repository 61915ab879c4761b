"""Balance-affecting operations on BASIC and INTEREST accounts."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from atm_sim.exceptions import (
    InsufficientFundsError,
    InvalidTransferTargetError,
    WrongAccountTypeError,
)
from atm_sim.logging import get_logger
from atm_sim.models import Account, AccountKind
from atm_sim.money import is_positive_amount, round_cents, to_amount
from atm_sim.services.base import BaseService

logger = get_logger(__name__)


class TransactionEngine(BaseService):
    """Deposit, withdraw, transfer and interest operations.

    Every operation validates first and mutates last, so a rejected
    request leaves balances and history untouched. Mutations hold the
    per-account lock; transfers hold both locks, taken in account-number
    order.
    """

    is_positive_amount = staticmethod(is_positive_amount)

    def has_sufficient_balance(self, account: Account, amount: Any) -> None:
        """Raise ``InsufficientFundsError`` if ``amount`` exceeds the balance."""
        self._require_banking(account)
        if to_amount(amount) > account.balance:
            raise InsufficientFundsError(
                "You have an insufficient balance to complete this transaction."
            )

    def deposit(self, account: Account, amount: Any) -> Decimal:
        """Add a positive amount to the balance and return the new balance."""
        value = self.is_positive_amount(amount)
        self._require_banking(account)
        description = f"Deposited {self.money(value)}."
        with account.lock:
            self.require_open(account)
            account.credit(value)
            account.record(description)
            balance = account.balance
        logger.debug("Deposit on account #%d", account.account_number)
        return balance

    def withdraw(self, account: Account, amount: Any) -> Decimal:
        """Subtract a positive amount covered by the balance; return the new balance."""
        value = self.is_positive_amount(amount)
        self._require_banking(account)
        description = f"Withdrew {self.money(value)}."
        with account.lock:
            self.require_open(account)
            self.has_sufficient_balance(account, value)
            account.debit(value)
            account.record(description)
            balance = account.balance
        logger.debug("Withdrawal on account #%d", account.account_number)
        return balance

    def transfer(self, from_account: Account, to_account_number: int, amount: Any) -> Account:
        """Move funds to another banking account.

        Returns
        -------
        Account
            The receiving account.

        Raises
        ------
        NonPositiveAmountError
            If the amount is not above zero.
        AccountNotFoundError
            If either account is not registered.
        InvalidTransferTargetError
            If the target is the sender or holds no balance.
        InsufficientFundsError
            If the sender cannot cover the amount.
        InvalidAmountError
            If the amount is not a usable number or the target balance would
            exceed the maximum.
        """
        value = self.is_positive_amount(amount)
        self._require_banking(from_account)
        target = self.directory.get(to_account_number)
        if target is from_account:
            raise InvalidTransferTargetError("You cannot transfer money to your own account.")
        if not target.is_banking:
            raise InvalidTransferTargetError(
                f"Account #{to_account_number} cannot receive transfers."
            )

        sent = f"Transferred {self.money(value)} to Account #{target.account_number}."
        received = f"Received {self.money(value)} from Account #{from_account.account_number}."

        first, second = sorted((from_account, target), key=lambda a: a.account_number)
        with first.lock, second.lock:
            self.require_open(from_account)
            self.require_open(target)
            self.has_sufficient_balance(from_account, value)
            target.check_credit(value)
            from_account.debit(value)
            target.credit(value)
            now = datetime.now()
            from_account.record(sent, at=now)
            target.record(received, at=now)
        logger.info(
            "Transfer from account #%d to account #%d",
            from_account.account_number,
            target.account_number,
        )
        return target

    def check_balance(self, account: Account) -> Decimal:
        self._require_banking(account)
        self.require_open(account)
        return account.balance

    def interest_rate(self, account: Account) -> Decimal:
        """Return the interest rate of a savings account, as a percentage."""
        self._require_interest(account)
        self.require_open(account)
        return account.interest_rate

    def apply_interest(self, account: Account) -> Decimal:
        """Credit one period of interest and return the amount credited.

        Interest is ``balance * rate / 100`` rounded half-up to cents.
        Nothing accrues on its own; callers decide when to apply it.
        """
        self._require_interest(account)
        with account.lock:
            self.require_open(account)
            interest = round_cents(account.balance * account.interest_rate / 100)
            description = f"Interest Applied {self.money(interest)}."
            account.credit(interest)
            account.record(description)
        logger.info("Applied interest on account #%d", account.account_number)
        return interest

    @staticmethod
    def _require_banking(account: Account) -> None:
        if not account.is_banking:
            raise WrongAccountTypeError("This account is not a bank account.")

    @staticmethod
    def _require_interest(account: Account) -> None:
        if account.kind != AccountKind.INTEREST:
            raise WrongAccountTypeError("This account is not a savings account.")
