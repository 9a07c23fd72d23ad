"""
Application services - entry points working on plain codes and DTOs.
Translates between DTOs and the domain Bank / Portfolio.
"""

import logging
from typing import List

from core import settings
from apps.money.application.dto import (
    ConversionRequestDTO,
    ConversionResultDTO,
    ExchangeRateDTO,
    MoneyDTO,
)
from apps.money.domain.bank import Bank
from apps.money.domain.errors import MoneyError, UnknownCurrencyError
from apps.money.domain.models import Currency, Money
from apps.money.domain.portfolio import Portfolio
from apps.money.domain.result import Failure, Result, Success

logger = logging.getLogger(__name__)


def _parse_currency(code: str) -> Result[Currency, UnknownCurrencyError]:
    try:
        return Success(Currency.from_code(code))
    except ValueError:
        logger.warning("Rejected unknown currency code %r", code)
        return Failure(UnknownCurrencyError(code))


class MoneyService:
    """
    Application service around the money domain.

    Workflow:
    1. Build a Bank from pivot currency + rates (usually from settings)
    2. Convert single amounts or evaluate a list of holdings
    3. Return Success / Failure, never raise for domain errors
    """

    @staticmethod
    def parse_exchange_rates(raw: str) -> List[ExchangeRateDTO]:
        """
        Parse "USD=1.2,KRW=1344" into ExchangeRateDTOs.

        Raises:
            ValueError: if an entry is not CODE=NUMBER
        """
        rates = []
        for entry in raw.split(","):
            entry = entry.strip()
            if not entry:
                continue

            code, separator, value = entry.partition("=")
            if not separator or not code.strip():
                raise ValueError(f"Invalid exchange rate entry '{entry}', expected CODE=RATE")
            try:
                rate = float(value)
            except ValueError:
                raise ValueError(f"Invalid rate in exchange rate entry '{entry}'") from None

            rates.append(ExchangeRateDTO(currency_code=code.strip(), rate=rate))
        return rates

    @staticmethod
    def build_bank(pivot_code: str, rates: List[ExchangeRateDTO]) -> Result[Bank, MoneyError]:
        """Build a pivot bank, stopping at the first rejected rate."""
        result = _parse_currency(pivot_code).map(Bank.with_pivot_currency)

        for rate in rates:
            result = result.flat_map(
                lambda bank, rate=rate: _parse_currency(rate.currency_code).flat_map(
                    lambda currency: bank.add_exchange_rate(currency, rate.rate)
                )
            )

        if result.is_failure:
            logger.warning("Could not build bank pivoted at %s: %s", pivot_code, result.error)
        return result

    @staticmethod
    def default_bank() -> Result[Bank, MoneyError]:
        """Build the bank described by settings.PIVOT_CURRENCY and settings.EXCHANGE_RATES."""
        return MoneyService.build_bank(
            settings.PIVOT_CURRENCY,
            MoneyService.parse_exchange_rates(settings.EXCHANGE_RATES),
        )

    @staticmethod
    def convert_amount(bank: Bank, request: ConversionRequestDTO) -> Result[ConversionResultDTO, MoneyError]:
        """
        Convert an amount from one currency to another.

        Example:
            >>> request = ConversionRequestDTO("EUR", "USD", 10)
            >>> MoneyService.convert_amount(bank, request).unwrap()
            ConversionResultDTO(source_currency='EUR', exchanged_currency='USD',
                                amount=10, rate=1.2, converted_amount=12.0)
        """
        source = _parse_currency(request.source_currency)
        if source.is_failure:
            return source
        target = _parse_currency(request.exchanged_currency)
        if target.is_failure:
            return target

        # The effective rate is the conversion of one unit
        unit = bank.convert(Money(1.0, source.value), target.value)
        converted = bank.convert(Money(request.amount, source.value), target.value)

        return converted.map(lambda money: ConversionResultDTO(
            source_currency=source.value.value,
            exchanged_currency=target.value.value,
            amount=request.amount,
            rate=unit.value.amount,
            converted_amount=money.amount,
        ))

    @staticmethod
    def evaluate_holdings(bank: Bank, holdings: List[MoneyDTO], target_code: str) -> Result[MoneyDTO, MoneyError]:
        """Evaluate the total of `holdings` in `target_code`."""
        target = _parse_currency(target_code)
        if target.is_failure:
            return target

        portfolio = Portfolio.empty()
        for holding in holdings:
            currency = _parse_currency(holding.currency_code)
            if currency.is_failure:
                return currency
            portfolio = portfolio.add(Money(holding.amount, currency.value))

        return portfolio.evaluate(bank, target.value).map(
            lambda total: MoneyDTO(amount=total.amount, currency_code=total.currency.value)
        )
