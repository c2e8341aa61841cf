from minitoken.config import MAX_AMOUNT
from minitoken.errors import ParseError

ZERO = 0


def parse_amount(value) -> int:
    """Parse an int or a decimal string into an amount (0..MAX_AMOUNT)."""
    # bool is an int subclass; "true" is not an amount
    if isinstance(value, bool):
        raise ParseError(f"invalid amount {value!r}")

    if isinstance(value, int):
        amount = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        amount = int(value)
    else:
        raise ParseError(f"invalid amount {value!r}")

    if amount < ZERO or amount > MAX_AMOUNT:
        raise ParseError(f"amount out of range: {value}")
    return amount


def checked_add(a: int, b: int) -> int:
    result = a + b
    if result > MAX_AMOUNT:
        raise OverflowError(f"amount overflow: {a} + {b}")
    return result


def checked_sub(a: int, b: int) -> int:
    if b > a:
        raise OverflowError(f"amount underflow: {a} - {b}")
    return a - b
