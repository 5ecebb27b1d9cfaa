"""
Currency Constants

Display currencies, their symbols and Babel locales, and the static
exchange rates used to convert from the canonical storage currency.
"""

# All money is stored in this currency
CANONICAL_CURRENCY = 'USD'

# code -> symbol, display name, Babel locale
CURRENCIES = {
    'USD': {'symbol': '$', 'name': 'US Dollar', 'locale': 'en_US'},
    'PKR': {'symbol': '₨', 'name': 'Pakistani Rupee', 'locale': 'ur_PK'},
    'EUR': {'symbol': '€', 'name': 'Euro', 'locale': 'de_DE'},
    'GBP': {'symbol': '£', 'name': 'British Pound', 'locale': 'en_GB'},
    'CAD': {'symbol': 'C$', 'name': 'Canadian Dollar', 'locale': 'en_CA'},
    'AUD': {'symbol': 'A$', 'name': 'Australian Dollar', 'locale': 'en_AU'},
    'INR': {'symbol': '₹', 'name': 'Indian Rupee', 'locale': 'hi_IN'},
    'JPY': {'symbol': '¥', 'name': 'Japanese Yen', 'locale': 'ja_JP'},
    'CNY': {'symbol': '¥', 'name': 'Chinese Yuan', 'locale': 'zh_CN'},
}

# Units of currency per 1 USD (static, not fetched)
EXCHANGE_RATES = {
    'USD': 1,
    'PKR': 278.50,
    'EUR': 0.92,
    'GBP': 0.79,
    'CAD': 1.36,
    'AUD': 1.52,
    'INR': 83.25,
    'JPY': 149.50,
    'CNY': 7.24,
}

# Currencies displayed without a fractional part
ZERO_DECIMAL_CURRENCIES = {'JPY'}
