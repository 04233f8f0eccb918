"""Builtin arithmetic over arbitrary-precision decimals.

Addition, subtraction and multiplication are exact. Division returns the
exact quotient when it terminates, kept at no less than the dividend's
scale; a non-terminating quotient is rounded half-to-even to the dividend's
scale (the operand's scale for a unary reciprocal).
"""
from __future__ import annotations

from decimal import Context, Decimal, MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_EVEN
from fractions import Fraction

from protolisp.errors import ArityMismatch, DivisionByZero, TypeMismatch
from protolisp.types.values import Primitive, RuntimeValue

# Wide enough that sums, differences and products are never rounded
EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_EVEN)

ZERO = Decimal(0)
ONE = Decimal(1)


def numbers(name: str, arguments: list[RuntimeValue]) -> list[Decimal]:
    """Unwrap decimal payloads; errors if any argument is not a number."""
    result = []
    for argument in arguments:
        if isinstance(argument, Primitive) and isinstance(argument.value, Decimal):
            result.append(argument.value)
        else:
            raise TypeMismatch(f"Invalid argument {argument} to {name}, expected a number.")
    return result


def scale(number: Decimal) -> int:
    return -number.as_tuple().exponent


def _terminating_scale(denominator: int) -> int | None:
    """Digits needed to write 1/denominator exactly, or None if it repeats."""
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    return max(twos, fives) if denominator == 1 else None


def quotient(dividend: Decimal, divisor: Decimal, preferred_scale: int) -> Decimal:
    if divisor == 0:
        raise DivisionByZero(f"Division by zero: {dividend} / {divisor}.")
    exact = Fraction(dividend) / Fraction(divisor)
    needed = _terminating_scale(exact.denominator)
    digits = preferred_scale if needed is None else max(preferred_scale, needed)
    # round() on a Fraction rounds half to even
    scaled = round(exact * Fraction(10) ** digits)
    return Decimal(scaled).scaleb(-digits, context=EXACT)


def add(arguments: list[RuntimeValue]) -> RuntimeValue:
    """Return the sum of all arguments; 0 for none."""
    result = ZERO
    for number in numbers("+", arguments):
        result = EXACT.add(result, number)
    return Primitive(result)


def sub(arguments: list[RuntimeValue]) -> RuntimeValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    values = numbers("-", arguments)
    if not values:
        raise ArityMismatch("- requires at least 1 argument.")
    if len(values) == 1:
        return Primitive(EXACT.subtract(ZERO, values[0]))
    result = values[0]
    for number in values[1:]:
        result = EXACT.subtract(result, number)
    return Primitive(result)


def mul(arguments: list[RuntimeValue]) -> RuntimeValue:
    """Return the product of all arguments; 1 for none."""
    result = ONE
    for number in numbers("*", arguments):
        result = EXACT.multiply(result, number)
    return Primitive(result)


def div(arguments: list[RuntimeValue]) -> RuntimeValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    values = numbers("/", arguments)
    if not values:
        raise ArityMismatch("/ requires at least 1 argument.")
    if len(values) == 1:
        return Primitive(quotient(ONE, values[0], scale(values[0])))
    result = values[0]
    for number in values[1:]:
        result = quotient(result, number, scale(result))
    return Primitive(result)
