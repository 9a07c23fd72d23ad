"""
Data Transfer Objects for the application layer.
DTOs carry plain codes and numbers so callers never handle domain enums.
"""

from dataclasses import dataclass


@dataclass
class ExchangeRateDTO:
    """Rate of one currency against the pivot currency."""
    currency_code: str
    rate: float


@dataclass
class MoneyDTO:
    """Money data transfer object."""
    amount: float
    currency_code: str


@dataclass
class ConversionRequestDTO:
    """Request DTO for currency conversion."""
    source_currency: str
    exchanged_currency: str
    amount: float


@dataclass
class ConversionResultDTO:
    """Result DTO for currency conversion."""
    source_currency: str
    exchanged_currency: str
    amount: float
    rate: float
    converted_amount: float
