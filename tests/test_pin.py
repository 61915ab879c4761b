"""Tests for PinPolicy."""

import pytest

from atm_sim.exceptions import AccountNotFoundError, InvalidPinError, PinMismatchError, WrongPinError
from atm_sim.models import Account
from atm_sim.pin import PinPolicy
from atm_sim.store import AccountDirectory


@pytest.fixture
def policy(directory: AccountDirectory) -> PinPolicy:
    return PinPolicy(directory)


class TestValidateFormat:
    """Tests for PIN format rules."""

    def test_valid(self) -> None:
        PinPolicy.validate_format("1234")
        PinPolicy.validate_format("0000")

    @pytest.mark.parametrize("pin", ["12a4", "123", "12345", "", "12 4", "١٢٣٤"])
    def test_invalid(self, pin: str) -> None:
        with pytest.raises(InvalidPinError):
            PinPolicy.validate_format(pin)


class TestConfirmMatch:
    """Tests for PIN confirmation."""

    def test_match(self) -> None:
        PinPolicy.confirm_match("1234", "1234")

    def test_mismatch(self) -> None:
        with pytest.raises(PinMismatchError):
            PinPolicy.confirm_match("1234", "1235")

    def test_validate_new_checks_format_first(self) -> None:
        with pytest.raises(InvalidPinError):
            PinPolicy.validate_new("12a4", "9999")


class TestVerify:
    """Tests for PIN verification."""

    def test_correct_pin(self, policy: PinPolicy, basic_account: Account, sample_pin: str) -> None:
        assert policy.verify(basic_account.account_number, sample_pin) is basic_account

    def test_wrong_pin(self, policy: PinPolicy, basic_account: Account) -> None:
        with pytest.raises(WrongPinError):
            policy.verify(basic_account.account_number, "0000")

    def test_unknown_account(self, policy: PinPolicy) -> None:
        with pytest.raises(AccountNotFoundError):
            policy.verify(555555, "1234")


class TestChange:
    """Tests for the PIN change protocol."""

    def test_successful_change(self, policy: PinPolicy, basic_account: Account, sample_pin: str) -> None:
        policy.change(basic_account.account_number, sample_pin, "5678", "5678")

        assert basic_account.pin == "5678"
        assert basic_account.history[-1].description == "PIN Changed."

    def test_wrong_current_pin_leaves_pin_unchanged(
        self, policy: PinPolicy, basic_account: Account, sample_pin: str
    ) -> None:
        with pytest.raises(WrongPinError):
            policy.change(basic_account.account_number, "0000", "5678", "5678")

        assert basic_account.pin == sample_pin
        assert len(basic_account.history) == 1

    def test_wrong_pin_reported_before_format(self, policy: PinPolicy, basic_account: Account) -> None:
        with pytest.raises(WrongPinError):
            policy.change(basic_account.account_number, "0000", "bad", "worse")

    def test_invalid_new_pin(self, policy: PinPolicy, basic_account: Account, sample_pin: str) -> None:
        with pytest.raises(InvalidPinError):
            policy.change(basic_account.account_number, sample_pin, "56a8", "56a8")
        assert basic_account.pin == sample_pin

    def test_mismatched_confirmation(
        self, policy: PinPolicy, basic_account: Account, sample_pin: str
    ) -> None:
        with pytest.raises(PinMismatchError):
            policy.change(basic_account.account_number, sample_pin, "5678", "5679")
        assert basic_account.pin == sample_pin
