"""Bank: one directory wired to the services that operate on it."""

from atm_sim.config import BankConfig
from atm_sim.exceptions import ConfigurationError, PinError
from atm_sim.generators import AccountNumberGenerator, DemoAccountGenerator
from atm_sim.logging import get_logger
from atm_sim.models import Account, AccountKind
from atm_sim.services import AccountService, AdminService, TransactionEngine
from atm_sim.store import AccountDirectory

logger = get_logger(__name__)


class Bank:
    """Entry point for presentation clients.

    Owns a fresh ``AccountDirectory`` and exposes the account, transaction
    and admin services over it. Nothing is shared between two ``Bank``
    instances.
    """

    def __init__(self, config: BankConfig | None = None) -> None:
        """Initialize the bank.

        Parameters
        ----------
        config : BankConfig | None
            Configuration; defaults are used when omitted.
        """
        self.config = config or BankConfig()
        self.directory = AccountDirectory(
            number_generator=AccountNumberGenerator(seed=self.config.seed),
        )
        self.accounts = AccountService(self.directory, self.config.display)
        self.transactions = TransactionEngine(self.directory, self.config.display)
        self.admin = AdminService(self.directory, self.config.display)

    def bootstrap_admin(self) -> Account | None:
        """Create the configured bootstrap administrator, if any.

        Raises
        ------
        ConfigurationError
            If the configured PIN is not a valid 4-digit PIN.
        """
        admin_config = self.config.admin
        if not admin_config.enabled:
            return None
        try:
            account = self.accounts.open_new_account(
                AccountKind.ADMIN, admin_config.name, admin_config.pin, admin_config.pin
            )
        except PinError as e:
            raise ConfigurationError(f"ATM_ADMIN_PIN is invalid: {e}") from e
        logger.info("Bootstrap administrator is account #%d", account.account_number)
        return account

    def populate_demo(self, count: int) -> list[tuple[int, str]]:
        """Open ``count`` demo accounts.

        Returns
        -------
        list[tuple[int, str]]
            ``(account_number, pin)`` pairs for the opened accounts.
        """
        generator = DemoAccountGenerator(seed=self.config.seed)
        opened = []
        for demo in generator.generate_batch(count):
            number = self.accounts.open_account(
                demo.kind,
                demo.name,
                demo.pin,
                demo.pin,
                initial_balance=demo.initial_balance,
                interest_rate=demo.interest_rate,
            )
            opened.append((number, demo.pin))
        logger.info("Opened %d demo accounts (directory: %s)", len(opened), self.directory.summary())
        return opened
