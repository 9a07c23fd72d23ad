"""
Bank - converts money between currencies.

Conversion strategy:
1. Same currency: return the money unchanged
2. Direct rate from the source to the target currency
3. Through the pivot currency, when both currencies are registered against it
4. Otherwise fail with the missing "FROM->TO" pair
"""

import logging
import math
import sys
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from apps.money.domain.errors import InvalidRateError, MissingExchangeRateError, MoneyError, PivotCurrencyError
from apps.money.domain.interfaces import BaseBank
from apps.money.domain.models import Currency, Money
from apps.money.domain.result import Failure, Result, Success

logger = logging.getLogger(__name__)

RateKey = Tuple[Currency, Currency]

_MIN_INVERTIBLE_RATE = 1 / sys.float_info.max


@dataclass(frozen=True)
class Bank(BaseBank):

    pivot_currency: Optional[Currency] = None
    exchange_rates: Mapping[RateKey, float] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Every bank owns a read-only copy of its rate table
        object.__setattr__(self, "exchange_rates", MappingProxyType(dict(self.exchange_rates)))

    @classmethod
    def with_pivot_currency(cls, pivot_currency: Currency) -> "Bank":
        return cls(pivot_currency=pivot_currency)

    @classmethod
    def with_exchange_rate(
        cls,
        from_currency: Currency,
        to_currency: Currency,
        rate: float
    ) -> Result["Bank", InvalidRateError]:
        """Create a bank without pivot holding a single directed rate."""
        return cls().add_direct_exchange_rate(from_currency, to_currency, rate)

    def add_exchange_rate(self, currency: Currency, rate: float) -> Result["Bank", MoneyError]:
        """
        Register the rate pivot->currency together with its inverse.

        Args:
            currency: Currency quoted against the pivot (e.g. USD)
            rate: Amount of `currency` for one unit of pivot currency

        Returns:
            Success with a new Bank, or Failure with PivotCurrencyError / InvalidRateError

        Example:
            >>> bank = Bank.with_pivot_currency(Currency.EUR)
            >>> bank.add_exchange_rate(Currency.USD, 1.2).unwrap().convert(Money.euros(10), Currency.USD)
            Success(value=Money(amount=12.0, currency=<Currency.USD: 'USD'>))
        """
        if self.pivot_currency is None:
            return Failure(PivotCurrencyError("Bank has no pivot currency"))
        if currency == self.pivot_currency:
            return Failure(PivotCurrencyError())
        if not _is_invertible(rate):
            return Failure(InvalidRateError(rate))

        return Success(self._with_rates({
            (self.pivot_currency, currency): rate,
            (currency, self.pivot_currency): 1 / rate,
        }))

    def add_direct_exchange_rate(
        self,
        from_currency: Currency,
        to_currency: Currency,
        rate: float
    ) -> Result["Bank", InvalidRateError]:
        if not _is_positive(rate):
            return Failure(InvalidRateError(rate))
        return Success(self._with_rates({(from_currency, to_currency): rate}))

    def convert(self, money: Money, to_currency: Currency) -> Result[Money, MissingExchangeRateError]:
        if money.currency == to_currency:
            return Success(money)

        if self._can_convert_directly(money.currency, to_currency):
            return Success(self._convert_directly(money, to_currency))

        if self._can_convert_through_pivot(money.currency, to_currency):
            logger.debug("Converting %s to %s through %s", money, to_currency, self.pivot_currency)
            return Success(
                self._convert_directly(self._convert_directly(money, self.pivot_currency), to_currency)
            )

        logger.debug("No exchange rate from %s to %s", money.currency, to_currency)
        return Failure(MissingExchangeRateError(money.currency, to_currency))

    def _with_rates(self, rates: Mapping[RateKey, float]) -> "Bank":
        return replace(self, exchange_rates={**self.exchange_rates, **rates})

    def _can_convert_directly(self, from_currency: Currency, to_currency: Currency) -> bool:
        return (from_currency, to_currency) in self.exchange_rates

    def _can_convert_through_pivot(self, from_currency: Currency, to_currency: Currency) -> bool:
        if self.pivot_currency is None:
            return False
        return (
            (self.pivot_currency, from_currency) in self.exchange_rates
            and (from_currency, self.pivot_currency) in self.exchange_rates
            and (self.pivot_currency, to_currency) in self.exchange_rates
        )

    def _convert_directly(self, money: Money, to_currency: Currency) -> Money:
        rate = self.exchange_rates[(money.currency, to_currency)]
        return Money(money.amount * rate, to_currency)


def _is_positive(rate: float) -> bool:
    return math.isfinite(rate) and rate > 0


def _is_invertible(rate: float) -> bool:
    # 1 / rate must itself be a finite positive rate
    return _is_positive(rate) and rate > _MIN_INVERTIBLE_RATE
