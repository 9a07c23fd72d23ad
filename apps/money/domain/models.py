"""
Pure domain entities (POPOs).
No dependency on configuration or I/O.
"""

from dataclasses import dataclass
from enum import Enum


class Currency(str, Enum):
    """
    Closed set of supported currencies.
    To add a new currency, add an entry here and register its rate
    against the pivot currency of the bank that should convert it.
    """

    EUR = "EUR"
    USD = "USD"
    KRW = "KRW"

    def __str__(self):
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        """Look up a currency by its code, ignoring case and whitespace."""
        normalized = code.strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown currency code '{code}'") from None


@dataclass(frozen=True)
class Money:

    amount: float
    currency: Currency

    def __str__(self):
        return f"{self.amount} {self.currency.value}"

    @classmethod
    def euros(cls, amount: float) -> "Money":
        return cls(amount, Currency.EUR)

    @classmethod
    def dollars(cls, amount: float) -> "Money":
        return cls(amount, Currency.USD)

    @classmethod
    def korean_wons(cls, amount: float) -> "Money":
        return cls(amount, Currency.KRW)
