"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from minitemu.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")
_HUNDRED = Decimal("100")

_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so that sale prices and cart totals add up exactly.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def discounted(self, discount: Discount) -> Money:
        """Return ``amount * (1 - percent/100)`` rounded half-up to cents."""
        factor = (_HUNDRED - discount.percent) / _HUNDRED
        amount = (self.amount * factor).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return Money(amount, self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    @property
    def is_whole_cents(self) -> bool:
        exponent = self.amount.normalize().as_tuple().exponent
        return isinstance(exponent, int) and exponent >= -2

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        symbol = _SYMBOLS.get(self.currency)
        if symbol is None:
            return f"{self.amount:.2f} {self.currency}"
        return f"{symbol}{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(value, currency)

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0.00"), currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot buy, reserve or restock zero
    or negative units.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Rating:
    """A star rating between 1 and 5 inclusive."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Rating must be an integer, got {type(self.value).__name__}"
            )
        if not MIN_RATING <= self.value <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, "
                f"got {self.value}"
            )

    def __str__(self) -> str:
        return f"{self.value}/{MAX_RATING}"


@dataclass(frozen=True)
class Discount:
    """A sale discount as a percentage: ``0 < percent <= 100``."""

    percent: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.percent, Decimal):
            raise ValidationError(
                f"Discount must be a Decimal, got {type(self.percent).__name__}"
            )
        if not (Decimal("0") < self.percent <= _HUNDRED):
            raise ValidationError(
                f"Discount percentage must be greater than 0 and at most 100, "
                f"got {self.percent}"
            )

    def __str__(self) -> str:
        return f"{self.percent.normalize():f}%"

    @staticmethod
    def of(percent: str | float | int | Decimal) -> Discount:
        try:
            value = Decimal(str(percent))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid discount percentage: {percent!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid discount percentage: {percent!r}")
        return Discount(value)


@dataclass(frozen=True)
class ShippingInfo:
    """Delivery details collected at checkout."""

    address: str
    city: str
    postal_code: str

    def __post_init__(self) -> None:
        for label, value in (
            ("Delivery address", self.address),
            ("City", self.city),
            ("Postal code", self.postal_code),
        ):
            if not value or not value.strip():
                raise ValidationError(f"{label} is required")

    def __str__(self) -> str:
        return f"{self.address.strip()}, {self.city.strip()}, {self.postal_code.strip()}"
