"""ISO 4217 numeric currency codes."""

from enum import IntEnum


class Currency(IntEnum):
    EUR = 978
    RUB = 643
    UAH = 980
    USD = 840
