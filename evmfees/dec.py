import re
from decimal import Decimal, localcontext
from typing import Any
from remerkleable.basic import uint256
from .params import DEC_PRECISION
from .errors import ParamTypeError, ParamRangeError

# Chain decimals are fixed-point numbers with 18 decimal places.
# We represent them as Python Decimals, and only enforce the precision
# when parsing or when converting to the fixed-point integer form.

# enough significant digits for any 256 bit fixed-point value, so arithmetic stays exact
DEC_CONTEXT_PREC = 100

DEC_UNIT = Decimal(1).scaleb(-DEC_PRECISION)

_DEC_STR = re.compile(r'-?[0-9]+(\.[0-9]+)?')


def new_dec_with_prec(i: int, prec: int) -> Decimal:
    # i * 10**-prec, e.g. (50, 2) is 0.50
    if prec < 0 or prec > DEC_PRECISION:
        raise ValueError("invalid precision: %d" % prec)
    with localcontext() as ctx:
        ctx.prec = DEC_CONTEXT_PREC
        return Decimal(i).scaleb(-prec)


def zero_dec() -> Decimal:
    return Decimal(0)


def one_dec() -> Decimal:
    return Decimal(1)


def has_dec_precision(d: Decimal) -> bool:
    # at most 18 decimal places, trailing zeros beyond that are fine
    with localcontext() as ctx:
        ctx.prec = DEC_CONTEXT_PREC
        scaled = d.scaleb(DEC_PRECISION)
        return scaled == scaled.to_integral_value()


def is_dec(v: Any) -> bool:
    return isinstance(v, Decimal) and v.is_finite() and has_dec_precision(v)


def add_dec(a: Decimal, b: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = DEC_CONTEXT_PREC
        return a + b


def parse_dec(s: str) -> Decimal:
    """Parse the canonical string form of a chain decimal.

    Accepts an optional minus sign, integer digits, and up to 18 fractional digits.
    Exponent notation, NaN, infinities and surrounding whitespace are rejected."""
    if not isinstance(s, str):
        raise ParamTypeError("invalid decimal: %r" % (s,))
    if _DEC_STR.fullmatch(s) is None:
        raise ParamTypeError("invalid decimal: %r" % s)
    if '.' in s and len(s.split('.')[1]) > DEC_PRECISION:
        raise ParamTypeError("too much precision, maximum %d decimal places: %r" % (DEC_PRECISION, s))
    return Decimal(s)


def format_dec(d: Decimal) -> str:
    # always 18 decimal places, e.g. "0.500000000000000000"
    if not is_dec(d):
        raise ParamTypeError("not a chain decimal, maximum %d decimal places: %s" % (DEC_PRECISION, d))
    with localcontext() as ctx:
        ctx.prec = DEC_CONTEXT_PREC
        # exact, the precision is checked above
        return format(d.quantize(DEC_UNIT), 'f')


def dec_to_fixed(d: Decimal) -> uint256:
    if not is_dec(d):
        raise ParamTypeError("not a chain decimal, maximum %d decimal places: %s" % (DEC_PRECISION, d))
    with localcontext() as ctx:
        ctx.prec = DEC_CONTEXT_PREC
        scaled = d.scaleb(DEC_PRECISION)
    if scaled < 0:
        raise ParamRangeError("negative decimal has no fixed-point form: %s" % d)
    try:
        return uint256(int(scaled))
    except ValueError as e:
        raise ParamRangeError("decimal too large for fixed-point form: %s" % d) from e


def fixed_to_dec(v: uint256) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = DEC_CONTEXT_PREC
        return Decimal(int(v)).scaleb(-DEC_PRECISION)
