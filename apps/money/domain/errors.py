"""
Domain error taxonomy.

These are returned inside Failure values. They subclass Exception only so
that Result.unwrap() can raise them on request.
"""

from typing import Iterable

from apps.money.domain.models import Currency


class MoneyError(Exception):
    """Base class for all money domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __eq__(self, other):
        return type(self) is type(other) and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.message))


class InvalidRateError(MoneyError):

    def __init__(self, rate: float):
        super().__init__("Exchange rate should be greater than 0")
        self.rate = rate


class PivotCurrencyError(MoneyError):

    def __init__(self, message: str = "Can not add an exchange rate for the pivot currency"):
        super().__init__(message)


class MissingExchangeRateError(MoneyError):

    def __init__(self, from_currency: Currency, to_currency: Currency):
        super().__init__(f"{from_currency.value}->{to_currency.value}")
        self.from_currency = from_currency
        self.to_currency = to_currency


class AggregateMissingRatesError(MoneyError):
    """All the missing rates hit while evaluating a portfolio, in entry order."""

    def __init__(self, errors: Iterable[MissingExchangeRateError]):
        self.errors = tuple(errors)
        missing = ",".join(f"[{error.message}]" for error in self.errors)
        super().__init__(f"Missing exchange rate(s): {missing}")


class UnknownCurrencyError(MoneyError):

    def __init__(self, code: str):
        super().__init__(f"Unknown currency: {code}")
        self.code = code


class DivisionByZeroError(MoneyError):

    def __init__(self):
        super().__init__("Division by zero is not allowed")
