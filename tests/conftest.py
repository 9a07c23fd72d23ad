import pytest

from apps.money.domain.bank import Bank
from apps.money.domain.models import Currency

PIVOT_CURRENCY = Currency.EUR


@pytest.fixture
def bank():
    """Empty bank pivoted at EUR."""
    return Bank.with_pivot_currency(PIVOT_CURRENCY)


@pytest.fixture
def pivot_bank(bank):
    """EUR pivot bank with EUR->USD=1.2 and EUR->KRW=1344."""
    return (
        bank.add_exchange_rate(Currency.USD, 1.2)
        .flat_map(lambda b: b.add_exchange_rate(Currency.KRW, 1344))
        .unwrap()
    )


@pytest.fixture
def direct_bank():
    """Bank without pivot holding EUR->USD=1.2 and USD->KRW=1100 only."""
    return (
        Bank.with_exchange_rate(Currency.EUR, Currency.USD, 1.2)
        .flat_map(lambda b: b.add_direct_exchange_rate(Currency.USD, Currency.KRW, 1100))
        .unwrap()
    )
