"""Command-line entry point and text-menu client.

The console client is a thin presentation layer: every action goes through
``Bank.accounts``, ``Bank.transactions`` or ``Bank.admin`` and any
``BankError`` is shown to the user before returning to the menu.

Usage::

    atm-sim                   # text menu
    atm-sim --no-gui          # same; the graphical front end is not shipped
    atm-sim --demo 5 --seed 42
"""

import argparse
import sys
from collections.abc import Callable

from atm_sim.bank import Bank
from atm_sim.config import LOG_FORMATS, BankConfig
from atm_sim.exceptions import BankError
from atm_sim.logging import get_logger, setup_logging
from atm_sim.models import Account, AccountKind
from atm_sim.money import format_currency, format_rate, to_amount
from atm_sim.serialization import summaries_to_json

logger = get_logger(__name__)

CONFIG_ERROR_EXIT_CODE = 1
INVALID_ARGS_EXIT_CODE = 2

KIND_CHOICES = {
    "bank": AccountKind.BASIC,
    "savings": AccountKind.INTEREST,
    "admin": AccountKind.ADMIN,
}


class ConsoleClient:
    """Interactive text menus over a ``Bank``.

    Parameters
    ----------
    bank : Bank
        The bank to operate on.
    input_fn : Callable[[str], str]
        Prompt function (``input`` by default).
    output_fn : Callable[[str], None]
        Output function (``print`` by default).
    """

    def __init__(
        self,
        bank: Bank,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.bank = bank
        self.ask = input_fn
        self.say = output_fn

    def run(self) -> None:
        """Run until the user exits or input ends."""
        try:
            self._main_menu()
        except (EOFError, KeyboardInterrupt):
            self.say("")

    def money(self, amount) -> str:
        return format_currency(amount, self.bank.config.display.currency_symbol)

    # Menus
    def _main_menu(self) -> None:
        while True:
            choice = self._choose("ATM Main Menu", ["Login", "Create Account", "Exit"])
            if choice == 1:
                self._login()
            elif choice == 2:
                self._create_account()
            else:
                return

    def _account_menu(self, account: Account) -> None:
        while True:
            choice = self._choose(
                "Account Menu",
                ["Deposit", "Withdraw", "Transfer", "Check Balance", "Account Options", "Logout"],
            )
            if choice == 1:
                self._deposit(account)
            elif choice == 2:
                self._withdraw(account)
            elif choice == 3:
                self._transfer(account)
            elif choice == 4:
                self._check_balance(account)
            elif choice == 5:
                if self._account_options(account):
                    return
            else:
                return

    def _admin_menu(self, admin: Account) -> None:
        while True:
            choice = self._choose(
                "Admin Menu",
                [
                    "Create Account",
                    "Edit Account",
                    "Delete Account",
                    "List Accounts",
                    "Account Options",
                    "Logout",
                ],
            )
            if choice == 1:
                self._create_account(admin)
            elif choice == 2:
                self._edit_account(admin)
            elif choice == 3:
                self._delete_account(admin)
            elif choice == 4:
                self._list_accounts(admin)
            elif choice == 5:
                if self._account_options(admin):
                    return
            else:
                return

    def _account_options(self, account: Account) -> bool:
        """Return True when the account was closed."""
        while True:
            choice = self._choose(
                "Account Options", ["Change PIN", "View Account History", "Close Account", "Back"]
            )
            if choice == 1:
                current = self.ask("Enter your current PIN: ")
                new = self.ask("Enter your new PIN: ")
                confirm = self.ask("Confirm your new PIN: ")
                self._attempt(
                    lambda: self.bank.accounts.change_pin(account, current, new, confirm),
                    "Your PIN has been changed.",
                )
            elif choice == 2:
                self.say("Account History")
                for line in self.bank.accounts.view_history(account):
                    self.say(line)
            elif choice == 3:
                if self.ask("Are you sure you want to close your account? (yes/no): ").strip().lower() != "yes":
                    continue
                pin = self.ask("Enter your PIN: ")
                if self._attempt(
                    lambda: self.bank.accounts.close_account(account, pin),
                    "Your account has been closed.",
                ):
                    return True
            else:
                return False

    # Actions
    def _login(self) -> None:
        number = self._ask_account_number("Enter your account number: #")
        if number is None:
            return
        pin = self.ask("Enter your account PIN: ")
        try:
            account = self.bank.accounts.login(number, pin)
        except BankError as e:
            self.say(str(e))
            return
        if account.is_admin:
            self._admin_menu(account)
        else:
            self._account_menu(account)

    def _create_account(self, admin: Account | None = None) -> None:
        kinds = ["bank", "savings"] + (["admin"] if admin is not None else [])
        answer = self.ask(f"Which type of account ({', '.join(kinds)})?: ").strip().lower()
        if answer not in kinds:
            self.say("Please specify the type of account you would like to create.")
            return
        kind = KIND_CHOICES[answer]
        name = self.ask("Enter the account holder's name: ")
        pin = self.ask("Create an account PIN: ")
        confirm = self.ask("Confirm the account PIN: ")
        balance = rate = None
        if kind != AccountKind.ADMIN:
            balance = self.ask("Enter the starting balance (blank for none): $").strip() or None
        if kind == AccountKind.INTEREST:
            rate = self.ask("Enter the interest rate (blank for none): %").strip() or None

        def create() -> str:
            if admin is not None:
                number = self.bank.admin.create_account(admin, kind, name, pin, confirm, balance, rate)
            else:
                number = self.bank.accounts.open_account(kind, name, pin, confirm, balance, rate)
            return f"Account created. The account number is #{number}."

        self._attempt(create)

    def _deposit(self, account: Account) -> None:
        amount = self.ask("Enter the amount you want to deposit: $")

        def deposit() -> str:
            self.bank.transactions.deposit(account, amount)
            return f"Deposited {self.money(to_amount(amount))} to your account."

        self._attempt(deposit)

    def _withdraw(self, account: Account) -> None:
        amount = self.ask("Enter the amount you want to withdraw: $")

        def withdraw() -> str:
            self.bank.transactions.withdraw(account, amount)
            return f"Withdrew {self.money(to_amount(amount))} from your account."

        self._attempt(withdraw)

    def _transfer(self, account: Account) -> None:
        number = self._ask_account_number("Enter the account number that you want to transfer to: #")
        if number is None:
            return
        amount = self.ask("Enter the amount that you want to transfer: $")

        def transfer() -> str:
            self.bank.transactions.transfer(account, number, amount)
            return (
                f"Transferred {self.money(to_amount(amount))} from your account "
                f"to account #{number}."
            )

        self._attempt(transfer)

    def _check_balance(self, account: Account) -> None:
        def balance() -> str:
            message = f"Your account balance is {self.money(self.bank.transactions.check_balance(account))}."
            if account.kind == AccountKind.INTEREST:
                rate = self.bank.transactions.interest_rate(account)
                message += f" Your interest rate is {format_rate(rate)}."
            return message

        self._attempt(balance)

    def _edit_account(self, admin: Account) -> None:
        number = self._ask_account_number("Enter the account number to edit: #")
        if number is None:
            return
        admin_service = self.bank.admin
        choice = self._choose(
            f"Edit Account #{number}",
            ["Name", "PIN", "History", "Balance", "Interest Rate", "Apply Interest", "Back"],
        )
        if choice == 1:
            name = self.ask("Enter the new name: ")
            self._attempt(lambda: admin_service.edit_name(admin, number, name), "Name changed.")
        elif choice == 2:
            pin = self.ask("Enter the new PIN: ")
            confirm = self.ask("Confirm the new PIN: ")
            self._attempt(lambda: admin_service.edit_pin(admin, number, pin, confirm), "PIN changed.")
        elif choice == 3:
            note = self.ask("Enter the history note: ")
            self._attempt(lambda: admin_service.edit_history(admin, number, note), "History updated.")
        elif choice == 4:
            balance = self.ask("Enter the new balance: $")
            self._attempt(
                lambda: admin_service.edit_balance(admin, number, balance), "Balance changed."
            )
        elif choice == 5:
            rate = self.ask("Enter the new interest rate: %")
            self._attempt(
                lambda: admin_service.edit_interest_rate(admin, number, rate), "Interest rate changed."
            )
        elif choice == 6:
            def apply() -> str:
                target = self.bank.directory.get(number)
                interest = self.bank.transactions.apply_interest(target)
                return f"Applied {self.money(interest)} of interest to account #{number}."

            self._attempt(apply)

    def _delete_account(self, admin: Account) -> None:
        number = self._ask_account_number("Enter the account number to delete: #")
        if number is None:
            return
        self._attempt(
            lambda: self.bank.admin.delete_account(admin, number), f"Deleted account #{number}."
        )

    def _list_accounts(self, admin: Account) -> None:
        summaries = self.bank.admin.list_accounts(admin)
        self.say(f"{len(summaries)} accounts in the system.")
        self.say(summaries_to_json(summaries, pretty=True))

    # Helpers
    def _choose(self, title: str, options: list[str]) -> int:
        menu = "\n".join(f" ({i}) {option}" for i, option in enumerate(options, 1))
        while True:
            answer = self.ask(f"\n{title}\n{menu}\nEnter an option: ").strip()
            if answer.isdecimal() and 1 <= int(answer) <= len(options):
                return int(answer)
            self.say("Please enter one of the given options.")

    def _ask_account_number(self, prompt: str) -> int | None:
        answer = self.ask(prompt).strip()
        if not answer.isdecimal():
            self.say("Please enter a valid account number.")
            return None
        return int(answer)

    def _attempt(self, action: Callable[[], str | None], success: str | None = None) -> bool:
        """Run an action, printing its message or the error it raised."""
        try:
            message = action()
        except BankError as e:
            self.say(str(e))
            return False
        if message or success:
            self.say(message or success)
        return True


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atm-sim",
        description="Simulated ATM: accounts, PINs, deposits, withdrawals and transfers.",
    )
    parser.add_argument(
        "--no-gui",
        action="store_true",
        help="Run the text menu (the default; no graphical front end is shipped)",
    )
    parser.add_argument(
        "--demo",
        type=_non_negative_int,
        default=0,
        metavar="N",
        help="Open N demo accounts at startup (default: 0)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO or ATM_LOG_LEVEL)")
    parser.add_argument("--log-format", choices=LOG_FORMATS, default=None, help="Log format")
    return parser


def main(
    argv: list[str] | None = None,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    """Parse arguments, build a bank and run the console client.

    Returns
    -------
    int
        0 on normal exit, 2 for unrecognized arguments, 1 for invalid
        configuration.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return INVALID_ARGS_EXIT_CODE if e.code else 0

    try:
        config = BankConfig.from_env()
        if args.seed is not None:
            config.seed = args.seed
        if args.log_level:
            config.log_level = args.log_level
        if args.log_format:
            config.log_format = args.log_format

        setup_logging(config.log_level, config.log_format)
        bank = Bank(config)
        admin = bank.bootstrap_admin()
    except BankError as e:
        output_fn(f"Invalid configuration: {e}")
        return CONFIG_ERROR_EXIT_CODE

    if args.no_gui:
        output_fn("Launching in no GUI mode.")
    if admin is not None:
        output_fn(f"Administrator account #{admin.account_number} is ready.")
    for number, pin in bank.populate_demo(args.demo):
        output_fn(f"Demo account #{number} (PIN {pin})")

    ConsoleClient(bank, input_fn, output_fn).run()
    logger.info("Session ended with %d open accounts", len(bank.directory))
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())
