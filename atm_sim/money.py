"""Monetary amounts: parsing, validation and currency formatting."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from atm_sim.exceptions import InvalidAmountError, NonPositiveAmountError

CENTS = Decimal("0.01")

# Largest amount, balance or rate accepted anywhere. Balances and their sums
# stay well inside the default 28-digit decimal context.
MAX_AMOUNT = Decimal("1000000000000000")


def to_amount(value: Any) -> Decimal:
    """Convert user or caller input to a Decimal amount.

    Floats go through ``str()`` first so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number or its magnitude exceeds
        ``MAX_AMOUNT``.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise InvalidAmountError(f"Not a monetary amount: {value!r}") from e
    if not amount.is_finite():
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    if abs(amount) > MAX_AMOUNT:
        raise InvalidAmountError(
            f"The amount cannot exceed {format_currency(MAX_AMOUNT)}."
        )
    return amount


def to_cents(value: Any) -> Decimal:
    """Convert input to an amount rounded half-up to whole cents."""
    return round_cents(to_amount(value))


def is_positive_amount(amount: Any) -> Decimal:
    """Return ``amount`` in whole cents, raising if it is not above zero.

    Amounts are rounded to cents first, so ``"0.004"`` counts as zero.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number or is too large.
    NonPositiveAmountError
        If the rounded value is zero or negative.
    """
    value = to_cents(amount)
    if value <= 0:
        raise NonPositiveAmountError("The amount must be greater than zero.")
    return value


def is_positive_rate(rate: Any) -> Decimal:
    """Return an interest rate as a Decimal, raising if it is not above zero.

    Rates keep their full precision.
    """
    value = to_amount(rate)
    if value <= 0:
        raise NonPositiveAmountError("The interest rate must be greater than zero.")
    return value


def round_cents(amount: Decimal) -> Decimal:
    """Round half-up to cents.

    Raises
    ------
    InvalidAmountError
        If the amount has too many digits to be held to the cent.
    """
    try:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise InvalidAmountError(f"Amount out of range: {amount}") from e


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Render an amount with two decimals and thousands separators.

    >>> format_currency(Decimal("1234.5"))
    '$1,234.50'
    >>> format_currency(Decimal("-3"))
    '-$3.00'
    """
    rounded = round_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def format_rate(rate: Decimal) -> str:
    """Render an interest rate as a percentage."""
    return f"{rate.normalize():f}%"
