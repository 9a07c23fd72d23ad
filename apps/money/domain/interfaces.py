from abc import ABC, abstractmethod

from apps.money.domain.errors import MissingExchangeRateError
from apps.money.domain.models import Currency, Money
from apps.money.domain.result import Result


class BaseBank(ABC):
    @abstractmethod
    def convert(self, money: Money, to_currency: Currency) -> Result[Money, MissingExchangeRateError]:
        pass
