"""Administrator operations over the whole directory."""

from typing import Any

from atm_sim.exceptions import WrongAccountTypeError
from atm_sim.logging import get_logger
from atm_sim.models import Account, AccountKind, AccountSummary
from atm_sim.money import format_rate, is_positive_rate, to_cents
from atm_sim.pin import PinPolicy
from atm_sim.services.base import BaseService

logger = get_logger(__name__)


class AdminService(BaseService):
    """Create, edit, delete and list accounts on behalf of an administrator.

    Every method takes the logged-in admin account first. Audit entries go
    to the admin's history and are written only after the change succeeds.
    """

    def create_account(
        self,
        admin: Account,
        kind: AccountKind,
        name: str,
        pin: str,
        pin_confirm: str,
        initial_balance: Any = None,
        interest_rate: Any = None,
    ) -> int:
        """Create an account of any kind and return its number."""
        self._require_admin(admin)
        account = self.open_new_account(
            kind, name, pin, pin_confirm,
            initial_balance=initial_balance,
            interest_rate=interest_rate,
        )
        self._audit(admin, f"Created {account.kind.label} Account #{account.account_number}.")
        return account.account_number

    def edit_name(self, admin: Account, account_number: int, name: str) -> None:
        self._require_admin(admin)
        target = self.directory.get(account_number)
        with target.lock:
            target.rename(name.strip())
            target.record("Name changed by administrator.")
        self._audit(admin, f"Changed Name On Account #{account_number}.")

    def edit_pin(
        self,
        admin: Account,
        account_number: int,
        new_pin: str,
        confirm_pin: str | None = None,
    ) -> None:
        """Replace a PIN without knowing the old one.

        ``confirm_pin`` defaults to ``new_pin``; the format rule always applies.
        """
        self._require_admin(admin)
        target = self.directory.get(account_number)
        PinPolicy.validate_new(new_pin, new_pin if confirm_pin is None else confirm_pin)
        with target.lock:
            target.replace_pin(new_pin)
            target.record("PIN changed by administrator.")
        self._audit(admin, f"Changed Pin On Account #{account_number}.")

    def edit_history(self, admin: Account, account_number: int, note: str) -> None:
        """Annotate an account's history.

        History is append-only, so the edit is recorded as a new entry
        rather than rewriting earlier ones.
        """
        self._require_admin(admin)
        target = self.directory.get(account_number)
        with target.lock:
            target.record(f"Administrator note: {note}")
        self._audit(admin, f"Changed History On Account #{account_number}.")

    def edit_balance(self, admin: Account, account_number: int, balance: Any) -> None:
        """Overwrite a balance. Zero is allowed, negative values are not."""
        self._require_admin(admin)
        target = self.directory.get(account_number)
        if not target.is_banking:
            raise WrongAccountTypeError("This account is not a bank account.")
        value = to_cents(balance)
        description = f"Balance set to {self.money(value)} by administrator."
        with target.lock:
            target.set_balance(value)
            target.record(description)
        self._audit(admin, f"Changed Balance On Account #{account_number}.")

    def edit_interest_rate(self, admin: Account, account_number: int, rate: Any) -> None:
        self._require_admin(admin)
        target = self.directory.get(account_number)
        if target.kind != AccountKind.INTEREST:
            raise WrongAccountTypeError("This account is not a savings account.")
        value = is_positive_rate(rate)
        with target.lock:
            target.set_interest_rate(value)
            target.record(f"Interest rate set to {format_rate(value)} by administrator.")
        self._audit(admin, f"Changed Interest Rate On Account #{account_number}.")

    def delete_account(self, admin: Account, account_number: int) -> None:
        """Remove any account without a PIN check."""
        self._require_admin(admin)
        self.directory.remove(account_number)
        self._audit(admin, f"Deleted Account #{account_number}.")

    def list_accounts(self, admin: Account) -> list[AccountSummary]:
        """Snapshot of every registered account, ordered by number."""
        self._require_admin(admin)
        accounts = sorted(self.directory.accounts(), key=lambda a: a.account_number)
        return [account.summary() for account in accounts]

    def _require_admin(self, admin: Account) -> None:
        if not admin.is_admin:
            raise WrongAccountTypeError("This operation requires an administrator account.")
        self.require_open(admin)

    def _audit(self, admin: Account, description: str) -> None:
        admin.record(description)
        logger.info("Admin #%d: %s", admin.account_number, description)
