"""Tests for the Bank wiring and the console client."""

import logging
import re
from collections.abc import Callable
from decimal import Decimal

import pytest

from atm_sim.bank import Bank
from atm_sim.cli import CONFIG_ERROR_EXIT_CODE, INVALID_ARGS_EXIT_CODE, ConsoleClient, main
from atm_sim.config import BankConfig, BootstrapAdminConfig
from atm_sim.exceptions import ConfigurationError
from atm_sim.models import AccountKind


class ScriptedConsole:
    """Feeds scripted answers to prompts and collects output.

    An answer may be a callable taking the console, for values only known
    at run time such as generated account numbers. Running out of answers
    ends the session like end-of-input does.
    """

    def __init__(self, answers: list[str | Callable[["ScriptedConsole"], str]]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        return answer(self) if callable(answer) else answer

    def say(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)

    def last_account_number(self) -> str:
        return re.findall(r"#(\d{6})", self.text)[-1]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("ATM_SEED", "ATM_LOG_LEVEL", "ATM_LOG_FORMAT", "ATM_ADMIN_PIN", "ATM_ADMIN_NAME"):
        monkeypatch.delenv(var, raising=False)


class TestBank:
    """Tests for Bank wiring."""

    def test_services_share_directory(self) -> None:
        bank = Bank()

        assert bank.accounts.directory is bank.directory
        assert bank.transactions.directory is bank.directory
        assert bank.admin.directory is bank.directory

    def test_banks_are_independent(self) -> None:
        first, second = Bank(), Bank()
        number = first.accounts.open_account(AccountKind.BASIC, "Ada", "1234", "1234")
        assert number not in second.directory

    def test_bootstrap_admin(self) -> None:
        bank = Bank(BankConfig(admin=BootstrapAdminConfig(name="Ops", pin="0042")))
        admin = bank.bootstrap_admin()

        assert admin.is_admin
        assert admin.name == "Ops"
        assert bank.accounts.login(admin.account_number, "0042") is admin

    def test_no_bootstrap_admin_by_default(self) -> None:
        assert Bank().bootstrap_admin() is None

    def test_bootstrap_admin_invalid_pin(self) -> None:
        bank = Bank(BankConfig(admin=BootstrapAdminConfig(pin="12a4")))
        with pytest.raises(ConfigurationError):
            bank.bootstrap_admin()

    def test_populate_demo(self) -> None:
        bank = Bank(BankConfig(seed=42))
        opened = bank.populate_demo(5)

        assert len(opened) == 5
        for number, pin in opened:
            assert bank.accounts.login(number, pin).is_banking

    def test_populate_demo_logs_directory_counts(self, caplog: pytest.LogCaptureFixture) -> None:
        bank = Bank(BankConfig(seed=42))
        with caplog.at_level(logging.INFO, logger="atm_sim"):
            bank.populate_demo(3)

        assert any("'ADMIN': 0" in record.getMessage() for record in caplog.records)


class TestMain:
    """Tests for the command-line entry point."""

    def test_unrecognized_argument(self) -> None:
        assert main(["--bogus"]) == INVALID_ARGS_EXIT_CODE

    def test_negative_demo_count(self) -> None:
        assert main(["--demo", "-1"]) == INVALID_ARGS_EXIT_CODE

    def test_help_exits_zero(self) -> None:
        assert main(["--help"]) == 0

    def test_exit_from_main_menu(self) -> None:
        console = ScriptedConsole(["3"])
        assert main([], console.ask, console.say) == 0

    def test_no_gui_flag(self) -> None:
        console = ScriptedConsole(["3"])

        assert main(["--no-gui"], console.ask, console.say) == 0
        assert "Launching in no GUI mode." in console.output

    def test_end_of_input_exits_zero(self) -> None:
        console = ScriptedConsole([])
        assert main([], console.ask, console.say) == 0

    def test_demo_accounts_listed(self) -> None:
        console = ScriptedConsole(["3"])

        assert main(["--demo", "2", "--seed", "1"], console.ask, console.say) == 0
        assert len([line for line in console.output if line.startswith("Demo account #")]) == 2

    def test_invalid_bootstrap_pin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATM_ADMIN_PIN", "12a4")
        console = ScriptedConsole(["3"])

        assert main([], console.ask, console.say) == CONFIG_ERROR_EXIT_CODE


class TestConsoleClient:
    """Tests for menu flows."""

    def test_create_login_deposit_and_balance(self) -> None:
        bank = Bank(BankConfig(seed=42))
        console = ScriptedConsole([
            "2", "bank", "Ada", "1234", "1234", "100",
            "1", lambda c: c.last_account_number(), "1234",
            "1", "25.5",
            "4",
            "6",
            "3",
        ])
        ConsoleClient(bank, console.ask, console.say).run()

        assert "Deposited $25.50 to your account." in console.output
        assert "Your account balance is $125.50." in console.output

    def test_invalid_menu_option(self) -> None:
        console = ScriptedConsole(["9", "3"])
        ConsoleClient(Bank(), console.ask, console.say).run()
        assert "Please enter one of the given options." in console.output

    def test_non_ascii_digits_rejected(self) -> None:
        console = ScriptedConsole(["\u00b2", "1", "\u00b2", "3"])
        ConsoleClient(Bank(), console.ask, console.say).run()

        assert "Please enter one of the given options." in console.output
        assert "Please enter a valid account number." in console.output
        assert console.prompts[-1].endswith("Enter an option: ")

    def test_oversized_deposit_reported(self) -> None:
        bank = Bank()
        number = bank.accounts.open_account(AccountKind.BASIC, "Ada", "1234", "1234", 10)
        console = ScriptedConsole(["1", str(number), "1234", "1", "1e26", "6", "3"])
        ConsoleClient(bank, console.ask, console.say).run()

        assert "The amount cannot exceed $1,000,000,000,000,000.00." in console.output
        assert bank.directory.get(number).balance == Decimal("10")
        assert len(bank.directory.get(number).history) == 1

    def test_errors_are_shown(self) -> None:
        bank = Bank()
        number = bank.accounts.open_account(AccountKind.BASIC, "Ada", "1234", "1234", 10)
        console = ScriptedConsole(["1", str(number), "1234", "2", "50", "1", "-5", "6", "3"])
        ConsoleClient(bank, console.ask, console.say).run()

        assert "You have an insufficient balance to complete this transaction." in console.output
        assert "The amount must be greater than zero." in console.output
        assert bank.directory.get(number).balance == Decimal("10")

    def test_wrong_pin_login(self) -> None:
        bank = Bank()
        number = bank.accounts.open_account(AccountKind.BASIC, "Ada", "1234", "1234")
        console = ScriptedConsole(["1", str(number), "0000", "3"])
        ConsoleClient(bank, console.ask, console.say).run()

        assert "You have entered an incorrect PIN." in console.output

    def test_transfer(self) -> None:
        bank = Bank()
        source = bank.accounts.open_account(AccountKind.BASIC, "Ada", "1234", "1234", 100)
        target = bank.accounts.open_account(AccountKind.BASIC, "Bob", "4321", "4321", 50)
        console = ScriptedConsole(["1", str(source), "1234", "3", str(target), "30", "6", "3"])
        ConsoleClient(bank, console.ask, console.say).run()

        assert bank.directory.get(source).balance == Decimal("70")
        assert bank.directory.get(target).balance == Decimal("80")
        assert f"Transferred $30.00 from your account to account #{target}." in console.output

    def test_close_account(self) -> None:
        bank = Bank()
        number = bank.accounts.open_account(AccountKind.BASIC, "Ada", "1234", "1234")
        console = ScriptedConsole(["1", str(number), "1234", "5", "3", "yes", "1234", "3"])
        ConsoleClient(bank, console.ask, console.say).run()

        assert number not in bank.directory
        assert "Your account has been closed." in console.output

    def test_admin_session(self) -> None:
        bank = Bank(BankConfig(admin=BootstrapAdminConfig(pin="9999")))
        admin = bank.bootstrap_admin()
        victim = bank.accounts.open_account(AccountKind.INTEREST, "Ada", "1234", "1234", 200, 5)
        console = ScriptedConsole([
            "1", str(admin.account_number), "9999",
            "2", str(victim), "6",
            "4",
            "3", str(victim),
            "6",
            "3",
        ])
        ConsoleClient(bank, console.ask, console.say).run()

        assert f"Applied $10.00 of interest to account #{victim}." in console.output
        assert "2 accounts in the system." in console.output
        assert f"Deleted account #{victim}." in console.output
        assert victim not in bank.directory
