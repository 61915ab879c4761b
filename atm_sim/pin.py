"""PIN policy: format rules, confirmation, verification and change."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atm_sim.exceptions import InvalidPinError, PinMismatchError, WrongPinError
from atm_sim.logging import get_logger
from atm_sim.models import Account

if TYPE_CHECKING:
    from atm_sim.store.directory import AccountDirectory

logger = get_logger(__name__)

PIN_LENGTH = 4
_DIGITS = frozenset("0123456789")


class PinPolicy:
    """Validate and verify 4-digit PINs against an account directory.

    Parameters
    ----------
    directory : AccountDirectory
        Directory used to resolve account numbers during verification.
    """

    def __init__(self, directory: AccountDirectory) -> None:
        self.directory = directory

    @staticmethod
    def validate_format(pin: str) -> None:
        """Raise ``InvalidPinError`` unless ``pin`` is exactly four digits."""
        if len(pin) != PIN_LENGTH or not set(pin) <= _DIGITS:
            raise InvalidPinError("Your PIN must be a 4 digit number.")

    @staticmethod
    def confirm_match(pin: str, confirm_pin: str) -> None:
        """Raise ``PinMismatchError`` if the two entries differ."""
        if pin != confirm_pin:
            raise PinMismatchError("Your PINs do not match.")

    @classmethod
    def validate_new(cls, pin: str, confirm_pin: str) -> None:
        """Format check followed by confirmation check."""
        cls.validate_format(pin)
        cls.confirm_match(pin, confirm_pin)

    def verify(self, account_number: int, supplied_pin: str) -> Account:
        """Check ``supplied_pin`` against the stored PIN.

        Returns
        -------
        Account
            The verified account.

        Raises
        ------
        AccountNotFoundError
            If the account number is not registered.
        WrongPinError
            If the PIN does not match.
        """
        account = self.directory.get(account_number)
        if account.pin != supplied_pin:
            logger.warning(
                "Rejected PIN for account #%d",
                account_number,
                extra={"account_number": account_number},
            )
            raise WrongPinError("You have entered an incorrect PIN.")
        return account

    def change(
        self,
        account_number: int,
        current_pin: str,
        new_pin: str,
        confirm_pin: str,
    ) -> Account:
        """Replace the stored PIN after verifying the current one.

        Checks run in order: verify current, new PIN format, confirmation.
        The first failure propagates and the stored PIN is left unchanged.
        """
        account = self.directory.get(account_number)
        with account.lock:
            self.verify(account_number, current_pin)
            self.validate_new(new_pin, confirm_pin)
            account.replace_pin(new_pin)
            account.record("PIN Changed.")
        logger.info("PIN changed on account #%d", account_number)
        return account
