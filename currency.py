"""Static exchange table and conversion into the reference currency (ILS)."""
from typing import Dict, Optional

from money import round_half_up

REFERENCE_CURRENCY = "ILS"

# Units of foreign currency per one ILS, so foreign -> ILS is a division
EXCHANGE_RATES: Dict[str, float] = {
    "ILS": 1,
    "USD": 0.273,
    "EUR": 0.252,
    "GBP": 0.215,
    "JPY": 41.5,
    "JOD": 0.194,
    "HUF": 100.5,
}


def to_ils(amount: float, currency: Optional[str] = None) -> float:
    """
    Convert an amount into ILS.

    Unknown codes and zero rates pass the amount through unconverted;
    use is_supported_currency() to tell the two cases apart.
    """
    if not currency or currency == REFERENCE_CURRENCY:
        return amount
    rate = EXCHANGE_RATES.get(currency)
    if not rate:
        return amount
    return round_half_up(amount / rate, 4)


def is_supported_currency(currency: Optional[str]) -> bool:
    if not currency:
        return False
    return bool(EXCHANGE_RATES.get(currency))


def supported_currencies() -> Dict[str, float]:
    return dict(EXCHANGE_RATES)
