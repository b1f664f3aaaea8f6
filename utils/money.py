# utils/money.py
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

import config


def round_money(value, places: int = 2) -> float:
    # Half-up rounding (2.675 -> 2.68). Built-in round() rounds half to even
    # on the binary value, so go through Decimal(str(...)).
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        return float(amount)
    # quantize needs room for every digit up to the requested place
    with localcontext() as ctx:
        ctx.prec = max(28, amount.adjusted() + places + 2)
        quantum = Decimal(1).scaleb(-places)
        return float(amount.quantize(quantum, rounding=ROUND_HALF_UP))


def line_total(quantity: int, unit_price: float) -> float:
    # quantity * unit price in Decimal, so huge quantities cannot overflow a float.
    # 0 * inf gives NaN instead of raising.
    with localcontext() as ctx:
        ctx.prec = max(28, len(str(abs(quantity))) + 20)
        ctx.traps[InvalidOperation] = False
        return round_money(Decimal(quantity) * Decimal(str(unit_price)))


def format_money(value: float) -> str:
    return f"{config.CURRENCY_SYMBOL} {value:.2f}"
