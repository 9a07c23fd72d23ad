from apps.money.domain.errors import DivisionByZeroError
from apps.money.domain.models import Money
from apps.money.domain.result import Failure, Result, Success


class MoneyCalculator:
    """Arithmetic on a single Money value; the currency never changes."""

    @staticmethod
    def add(money: Money, amount: float) -> Money:
        return Money(money.amount + amount, money.currency)

    @staticmethod
    def times(money: Money, factor: float) -> Money:
        return Money(money.amount * factor, money.currency)

    @staticmethod
    def divide(money: Money, divisor: float) -> Result[Money, DivisionByZeroError]:
        if divisor == 0:
            return Failure(DivisionByZeroError())
        return Success(Money(money.amount / divisor, money.currency))
