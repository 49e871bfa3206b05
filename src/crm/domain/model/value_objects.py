"""Value Objects and normalisation rules shared across the domain.

Value Objects are immutable and compared by value, not identity.
The normalisation rules turn raw form or wire input into safe values
instead of rejecting it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

from crm.domain.exceptions import ValidationError

_CENT = Decimal("0.01")

# Largest amount accepted from input; totals of bounded lines stay far below
# what Decimal can format.
MAX_AMOUNT = Decimal("1000000000000")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors; prices coming
    from the API may be strings or numbers and are always parsed via
    ``Money.of``.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __bool__(self) -> bool:
        return self.amount != 0

    # --- Display --------------------------------------------------------------

    def rounded(self) -> Decimal:
        # Enough precision for every integer digit plus the cents.
        context = Context(prec=max(28, self.amount.adjusted() + 4))
        return self.amount.quantize(_CENT, rounding=ROUND_HALF_UP, context=context)

    def __str__(self) -> str:
        return f"{self.rounded():.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            money = Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if money.amount > MAX_AMOUNT:
            raise ValidationError(f"Money amount too large: {amount!r} (max {MAX_AMOUNT})")
        return money


# ---------------------------------------------------------------------------
# Normalisation rules
# ---------------------------------------------------------------------------

DEFAULT_QUANTITY = 1
MAX_QUANTITY = 1_000_000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def coerce_quantity(raw: object) -> int:
    """Quantity rule: an integer in ``1..MAX_QUANTITY``, or ``DEFAULT_QUANTITY``.

    Text is read up to the first non-digit (``"3 boxes"`` is 3). Anything
    unparsable, zero, negative or above ``MAX_QUANTITY`` falls back to the
    default.
    """
    if isinstance(raw, bool) or raw is None:
        return DEFAULT_QUANTITY
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if match is None or len(match.group(1).lstrip("+-")) > len(str(MAX_QUANTITY)):
            return DEFAULT_QUANTITY
        value = int(match.group(1))
    return value if 0 < value <= MAX_QUANTITY else DEFAULT_QUANTITY


def price_or_zero(raw: object) -> Money:
    """Price rule: a price that cannot be used counts as zero.

    That covers missing, blank and unparsable prices, prices above
    ``MAX_AMOUNT`` and negative prices (see ``is_negative_price``).
    """
    if isinstance(raw, Money):
        return raw
    if raw is None or raw == "" or is_negative_price(raw):
        return Money.zero()
    try:
        return Money.of(raw)  # type: ignore[arg-type]
    except ValidationError:
        return Money.zero()


def is_negative_price(raw: object) -> bool:
    """Negative-price rule: True when ``raw`` parses to a negative amount.

    Money is never negative, so such a price is read as zero by
    ``price_or_zero`` rather than subtracted from a total.
    """
    if isinstance(raw, bool) or raw is None:
        return False
    try:
        return Decimal(str(raw).strip()) < 0
    except (InvalidOperation, ValueError):
        return False
