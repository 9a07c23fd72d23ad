"""
Portfolio - money held in mixed currencies, evaluated in a single one.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from apps.money.domain.errors import AggregateMissingRatesError, MissingExchangeRateError
from apps.money.domain.interfaces import BaseBank
from apps.money.domain.models import Currency, Money
from apps.money.domain.result import Failure, Result, Success

logger = logging.getLogger(__name__)

ConversionOutcome = Result[Money, MissingExchangeRateError]


@dataclass(frozen=True)
class Portfolio:

    moneys: Tuple[Money, ...] = ()

    def __post_init__(self):
        # Never alias a caller's list
        object.__setattr__(self, "moneys", tuple(self.moneys))

    @classmethod
    def empty(cls) -> "Portfolio":
        return cls()

    @classmethod
    def of(cls, *moneys: Money) -> "Portfolio":
        portfolio = cls.empty()
        for money in moneys:
            portfolio = portfolio.add(money)
        return portfolio

    def add(self, money: Money) -> "Portfolio":
        return Portfolio(self.moneys + (money,))

    def evaluate(self, bank: BaseBank, to_currency: Currency) -> Result[Money, AggregateMissingRatesError]:
        """
        Evaluate the total value of the portfolio in `to_currency`.

        Every entry is converted, even after a failure, so that the error
        lists all the missing rates in entry order.

        Args:
            bank: Bank used to convert each entry
            to_currency: Currency of the total

        Returns:
            Success with the summed Money, or Failure with AggregateMissingRatesError
        """
        outcomes = self._convert_all(bank, to_currency)
        failures = [outcome.error for outcome in outcomes if outcome.is_failure]

        if failures:
            error = AggregateMissingRatesError(failures)
            logger.debug("Portfolio evaluation in %s failed: %s", to_currency, error)
            return Failure(error)

        total = 0.0
        for outcome in outcomes:
            total += outcome.value.amount
        return Success(Money(total, to_currency))

    def _convert_all(self, bank: BaseBank, to_currency: Currency) -> List[ConversionOutcome]:
        return [bank.convert(money, to_currency) for money in self.moneys]
