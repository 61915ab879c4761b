"""Custom exception hierarchy for atm-sim."""


class BankError(Exception):
    """Base exception for all atm-sim errors."""


class PinError(BankError):
    """Base exception for PIN validation and authentication failures."""


class InvalidPinError(PinError):
    """Raised when a PIN is not exactly four digits."""


class PinMismatchError(PinError):
    """Raised when a PIN and its confirmation differ."""


class WrongPinError(PinError):
    """Raised when a supplied PIN does not match the stored one."""


class AccountNotFoundError(BankError):
    """Raised when an account number is not registered."""


class TransactionError(BankError):
    """Base exception for rejected monetary operations."""


class NonPositiveAmountError(TransactionError):
    """Raised when an amount that must be positive is zero or negative."""


class InvalidAmountError(TransactionError):
    """Raised when a monetary input is not a finite number or is out of range."""


class InsufficientFundsError(TransactionError):
    """Raised when a withdrawal or transfer exceeds the balance."""


class InvalidTransferTargetError(TransactionError):
    """Raised when a transfer target cannot receive funds from the sender."""


class WrongAccountTypeError(BankError):
    """Raised when an operation targets an account of the wrong kind."""


class NamespaceExhaustedError(BankError):
    """Raised when every account number is already in use."""


class DuplicateAccountError(BankError):
    """Raised when registering an account number that is already present."""


class ConfigurationError(BankError):
    """Raised when configuration is invalid or missing."""
