"""
Currency Normalization Service

All money is stored in USD. Amounts are converted to the display currency
only when rendered, using the static rates in constants.currency.

Money tags an amount with its currency so form input typed in a display
currency cannot be mistaken for a stored canonical value.
"""

import logging
from dataclasses import dataclass

from babel.core import UnknownLocaleError
from babel.numbers import format_currency as babel_format_currency

from constants import (
    CANONICAL_CURRENCY, CURRENCIES, EXCHANGE_RATES, ZERO_DECIMAL_CURRENCIES
)

logger = logging.getLogger(__name__)


class CurrencyMismatchError(ValueError):
    """Raised when combining Money values held in different currencies."""
    pass


def _rate(currency):
    rate = EXCHANGE_RATES.get(currency)
    if rate is None:
        logger.warning('Unknown currency %r, using identity rate', currency)
        return None
    return rate


def convert_currency(amount, from_currency, to_currency):
    """
    Convert amount between two currencies through USD.

    Same-currency conversion returns amount untouched. An unknown code
    on either side makes the conversion an identity.
    """
    if from_currency == to_currency:
        return amount

    from_rate = _rate(from_currency)
    to_rate = _rate(to_currency)
    if from_rate is None or to_rate is None:
        return amount

    usd_amount = amount / from_rate
    return usd_amount * to_rate


@dataclass(frozen=True)
class Money:
    """An amount tagged with the currency it is denominated in."""
    amount: float
    currency: str = CANONICAL_CURRENCY

    def to(self, currency):
        if currency == self.currency:
            return self
        return Money(convert_currency(self.amount, self.currency, currency), currency)

    def canonical(self):
        """Amount in the storage currency."""
        return self.to(CANONICAL_CURRENCY).amount

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        if other.currency != self.currency:
            raise CurrencyMismatchError(
                f"Cannot add {other.currency} to {self.currency}"
            )
        return Money(self.amount + other.amount, self.currency)


def _fraction_digits(currency):
    return 0 if currency in ZERO_DECIMAL_CURRENCIES else 2


def _fallback_format(amount, currency):
    info = CURRENCIES.get(currency, {})
    symbol = info.get('symbol', currency)
    return f"{symbol}{amount:.{_fraction_digits(currency)}f}"


def format_currency_without_conversion(amount, currency=CANONICAL_CURRENCY):
    """
    Render an amount that is already in the target currency.

    Two to four fraction digits (sub-cent per-gram costs stay visible),
    none for JPY. Falls back to symbol + fixed decimals if Babel cannot
    load the locale.
    """
    info = CURRENCIES.get(currency)
    if info is None:
        return _fallback_format(amount, currency)

    try:
        if currency in ZERO_DECIMAL_CURRENCIES:
            return babel_format_currency(
                amount, currency, locale=info['locale'],
                currency_digits=True, decimal_quantization=True,
            )
        return babel_format_currency(
            round(amount, 4), currency, locale=info['locale'],
            currency_digits=True, decimal_quantization=False,
        )
    except (UnknownLocaleError, ValueError) as e:
        logger.warning('Falling back to plain formatting for %s: %s', currency, e)
        return _fallback_format(amount, currency)


def format_currency(amount, currency=CANONICAL_CURRENCY):
    """Convert a stored USD amount to currency and render it."""
    converted = convert_currency(amount, CANONICAL_CURRENCY, currency)
    return format_currency_without_conversion(converted, currency)


def currency_symbol(currency):
    return CURRENCIES[currency]['symbol']


def currency_name(currency):
    return CURRENCIES[currency]['name']


def currency_options():
    """List of (code, label) pairs for a currency selector."""
    return [
        (code, f"{info['name']} ({info['symbol']})")
        for code, info in CURRENCIES.items()
    ]
