import logging

import pytest
from unittest.mock import patch

from apps.money.application.dto import ConversionRequestDTO, ExchangeRateDTO, MoneyDTO
from apps.money.application.services import MoneyService
from apps.money.domain.errors import (
    AggregateMissingRatesError,
    InvalidRateError,
    MissingExchangeRateError,
    PivotCurrencyError,
    UnknownCurrencyError,
)
from apps.money.domain.models import Currency, Money


class TestParseExchangeRates:
    """Tests for MoneyService.parse_exchange_rates."""

    def test_parse(self):
        """
        Test parsing of CODE=RATE pairs.
        """
        rates = MoneyService.parse_exchange_rates("USD=1.2, KRW=1344")

        assert rates == [
            ExchangeRateDTO(currency_code="USD", rate=1.2),
            ExchangeRateDTO(currency_code="KRW", rate=1344.0),
        ]

    @pytest.mark.parametrize("raw", ["", "  ", ",,"])
    def test_parse_blank(self, raw):
        """
        Test that blank input gives no rates.
        """
        assert MoneyService.parse_exchange_rates(raw) == []

    @pytest.mark.parametrize("raw", ["USD", "=1.2", "USD=abc", "USD=1.2,KRW"])
    def test_parse_malformed(self, raw):
        """
        Test that malformed configuration raises ValueError.
        """
        with pytest.raises(ValueError):
            MoneyService.parse_exchange_rates(raw)


class TestBuildBank:
    """Tests for MoneyService.build_bank."""

    def test_build_bank(self):
        """
        Test that every rate is registered against the pivot.
        """
        result = MoneyService.build_bank("eur", [
            ExchangeRateDTO("USD", 1.2),
            ExchangeRateDTO("KRW", 1344),
        ])

        bank = result.unwrap()
        assert bank.pivot_currency == Currency.EUR
        assert bank.convert(Money.dollars(10), Currency.KRW).unwrap().amount == pytest.approx(11200)

    def test_build_bank_unknown_pivot(self):
        """
        Test that an unknown pivot code is a failure.
        """
        result = MoneyService.build_bank("XXX", [])

        assert result.error == UnknownCurrencyError("XXX")
        assert str(result.error) == "Unknown currency: XXX"

    def test_build_bank_unknown_rate_currency(self):
        """
        Test that an unknown rate currency is a failure.
        """
        result = MoneyService.build_bank("EUR", [ExchangeRateDTO("GBP", 0.8)])

        assert isinstance(result.error, UnknownCurrencyError)

    def test_build_bank_stops_at_first_invalid_rate(self):
        """
        Test that the first rejected rate is the reported failure.
        """
        result = MoneyService.build_bank("EUR", [
            ExchangeRateDTO("USD", 0),
            ExchangeRateDTO("EUR", 2),
        ])

        assert isinstance(result.error, InvalidRateError)

    def test_build_bank_pivot_rate(self):
        """
        Test that a rate for the pivot itself is rejected.
        """
        result = MoneyService.build_bank("EUR", [ExchangeRateDTO("EUR", 2)])

        assert isinstance(result.error, PivotCurrencyError)

    def test_build_bank_logs_failure(self, caplog):
        """
        Test that a rejected bank configuration is logged as a warning.
        """
        with caplog.at_level(logging.WARNING, logger="apps.money.application.services"):
            MoneyService.build_bank("EUR", [ExchangeRateDTO("USD", -1)])

        assert "Could not build bank pivoted at EUR" in caplog.text

    @patch("apps.money.application.services.settings")
    def test_default_bank(self, mock_settings):
        """
        Test that default_bank reads pivot and rates from settings.
        """
        mock_settings.PIVOT_CURRENCY = "USD"
        mock_settings.EXCHANGE_RATES = "EUR=0.5"

        bank = MoneyService.default_bank().unwrap()

        assert bank.pivot_currency == Currency.USD
        assert bank.convert(Money.euros(1), Currency.USD).unwrap() == Money.dollars(2)


class TestConvertAmount:
    """Tests for MoneyService.convert_amount."""

    @pytest.fixture
    def service_bank(self):
        return MoneyService.build_bank("EUR", [ExchangeRateDTO("USD", 1.2)]).unwrap()

    def test_convert_amount_success(self, service_bank):
        """
        Test conversion result details.
        """
        request = ConversionRequestDTO(source_currency="EUR", exchanged_currency="usd", amount=10)

        result = MoneyService.convert_amount(service_bank, request).unwrap()

        assert result.source_currency == "EUR"
        assert result.exchanged_currency == "USD"
        assert result.amount == 10
        assert result.rate == 1.2
        assert result.converted_amount == 12

    def test_convert_amount_missing_rate(self, service_bank):
        """
        Test that a missing rate is returned as failure.
        """
        request = ConversionRequestDTO(source_currency="KRW", exchanged_currency="USD", amount=10)

        result = MoneyService.convert_amount(service_bank, request)

        assert result.error == MissingExchangeRateError(Currency.KRW, Currency.USD)

    @pytest.mark.parametrize("source, target", [("XXX", "USD"), ("EUR", "YYY")])
    def test_convert_amount_unknown_currency(self, service_bank, source, target):
        """
        Test that unknown codes are returned as failure.
        """
        request = ConversionRequestDTO(source_currency=source, exchanged_currency=target, amount=10)

        result = MoneyService.convert_amount(service_bank, request)

        assert isinstance(result.error, UnknownCurrencyError)


class TestEvaluateHoldings:
    """Tests for MoneyService.evaluate_holdings."""

    def test_evaluate_holdings(self, pivot_bank):
        """
        Test 5 USD + 10 EUR = 17 USD.
        """
        holdings = [MoneyDTO(5, "USD"), MoneyDTO(10, "EUR")]

        result = MoneyService.evaluate_holdings(pivot_bank, holdings, "USD")

        assert result.unwrap() == MoneyDTO(amount=17.0, currency_code="USD")

    def test_evaluate_holdings_missing_rates(self, direct_bank):
        """
        Test that missing rates are aggregated.
        """
        holdings = [MoneyDTO(1, "EUR"), MoneyDTO(1, "USD"), MoneyDTO(1, "KRW")]

        result = MoneyService.evaluate_holdings(direct_bank, holdings, "EUR")

        assert isinstance(result.error, AggregateMissingRatesError)
        assert str(result.error) == "Missing exchange rate(s): [USD->EUR],[KRW->EUR]"

    def test_evaluate_holdings_unknown_currency(self, pivot_bank):
        """
        Test that an unknown holding currency is a failure.
        """
        result = MoneyService.evaluate_holdings(pivot_bank, [MoneyDTO(1, "GBP")], "EUR")

        assert result.error == UnknownCurrencyError("GBP")

    def test_evaluate_holdings_unknown_target(self, pivot_bank):
        """
        Test that an unknown target currency is a failure.
        """
        result = MoneyService.evaluate_holdings(pivot_bank, [], "GBP")

        assert result.error == UnknownCurrencyError("GBP")
