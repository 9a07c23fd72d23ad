"""
Settings for the money project.

Every value can be overridden through an environment variable of the same
name prefixed with MONEY_ (e.g. MONEY_PIVOT_CURRENCY=USD).
A .env file (path overridable with MONEY_ENV_FILE) is loaded first.
"""

import os

from dotenv import load_dotenv

# Values already in the environment win over the .env file
load_dotenv(os.environ.get("MONEY_ENV_FILE", ".env"))


def _env(name: str, default: str) -> str:
    return os.environ.get(f"MONEY_{name}", default)


# Bank bootstrap
PIVOT_CURRENCY = _env("PIVOT_CURRENCY", "EUR")
# Comma separated CURRENCY=RATE pairs, quoted against PIVOT_CURRENCY
EXCHANGE_RATES = _env("EXCHANGE_RATES", "USD=1.2,KRW=1344")

# Relative tolerance accepted when an amount is converted there and back
ROUND_TRIP_TOLERANCE = float(_env("ROUND_TRIP_TOLERANCE", "0.01"))

# Domain bound for generated amounts. Not enforced by conversions.
MAX_AMOUNT = float(_env("MAX_AMOUNT", "1000000000"))

# Logging
LOG_LEVEL = _env("LOG_LEVEL", "WARNING").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "apps.money": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": True,
        },
    },
}
