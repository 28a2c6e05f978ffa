"""Money in Thai Baht value object."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional


@dataclass(frozen=True)
class MoneyTHB:
    """Money value object in Thai Baht."""

    amount: Decimal

    def __post_init__(self) -> None:
        """Validate money amount."""
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def parse(cls, raw: str) -> Optional["MoneyTHB"]:
        """
        Parse a form value such as "350000" or "350,000".

        Args:
            raw: Raw budget text

        Returns:
            MoneyTHB, or None when the text is not a plain non-negative number
        """
        cleaned = raw.replace(",", "").replace("฿", "").strip()
        if not cleaned:
            return None
        try:
            amount = Decimal(cleaned)
        except InvalidOperation:
            return None
        if not amount.is_finite() or amount < 0:
            return None
        return cls(amount)

    def format(self) -> str:
        """Format with thousands separators, e.g. "1,250,000 บาท"."""
        if self.amount == self.amount.to_integral_value():
            return f"{self.amount:,.0f} บาท"
        return f"{self.amount:,.2f} บาท"


def format_currency(raw: Optional[str]) -> str:
    """
    Format a budget field for display.

    Args:
        raw: Raw budget text from the record

    Returns:
        Formatted amount, the raw text when it is not numeric, or "" when empty
    """
    if not raw:
        return ""
    money = MoneyTHB.parse(raw)
    if money is None:
        return raw
    return money.format()
