from abc import ABC, abstractmethod


class Beverage(ABC):
    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_cost(self) -> int:
        pass


class CondimentDecorator(Beverage):
    """Wraps one beverage and extends its description and cost.

    Subclasses only declare ``suffix`` and ``increment``. The wrapped
    beverage is never modified, so the same base can be decorated
    any number of times in any order.
    """

    suffix: str = ""
    increment: int = 0

    def __init__(self, beverage: Beverage) -> None:
        self._beverage = beverage

    def get_description(self) -> str:
        return self._beverage.get_description() + self.suffix

    def get_cost(self) -> int:
        return self._beverage.get_cost() + self.increment


# Beverage Implementations
class Espresso(Beverage):
    def __init__(self) -> None:
        self.description = "Espresso"
        self.cost = 800

    def get_description(self) -> str:
        return self.description

    def get_cost(self) -> int:
        return self.cost


class Tea(Beverage):
    def __init__(self) -> None:
        self.description = "Tea"
        self.cost = 500

    def get_description(self) -> str:
        return self.description

    def get_cost(self) -> int:
        return self.cost


class Latte(Beverage):
    def __init__(self) -> None:
        self.description = "Latte"
        self.cost = 1000

    def get_description(self) -> str:
        return self.description

    def get_cost(self) -> int:
        return self.cost


class Mocha(Beverage):
    def __init__(self) -> None:
        self.description = "Mocha"
        self.cost = 1200

    def get_description(self) -> str:
        return self.description

    def get_cost(self) -> int:
        return self.cost


# Condiments
class Milk(CondimentDecorator):
    suffix = ", Milk"
    increment = 200


class Sugar(CondimentDecorator):
    suffix = ", Sugar"
    increment = 100


class WhippedCream(CondimentDecorator):
    suffix = ", Whipped Cream"
    increment = 300


class Caramel(CondimentDecorator):
    suffix = ", Caramel"
    increment = 250
