"""Cent rounding shared by aggregation, transfer planning and conversion."""
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Anything within a cent of zero is treated as settled
EPSILON = 0.01


def round_half_up(value: float, places: int = 2) -> float:
    """Round to `places` decimals, halves away from zero"""
    # Negative halves round away from zero rather than toward +infinity, so debits mirror credits
    exact = Decimal(str(value))
    if not exact.is_finite():
        return value
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def round_cents(value: float) -> float:
    return round_half_up(value, 2)
