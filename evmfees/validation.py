from decimal import Decimal
from typing import Optional
from .dec import is_dec, one_dec
from .errors import ParamTypeError, NilValueError, ParamRangeError
from .params import DEC_PRECISION, MAX_UINT64


def _type_name(i: object) -> str:
    return type(i).__name__


def _validate_dec(i: Optional[Decimal]) -> None:
    if i is None:
        raise NilValueError("invalid parameter: nil")
    if not isinstance(i, Decimal) or not i.is_finite():
        raise ParamTypeError("invalid parameter type: %s" % _type_name(i))
    if not is_dec(i):
        raise ParamTypeError("not a chain decimal, maximum %d decimal places: %s" % (DEC_PRECISION, i))


def validate_bool(i: bool) -> None:
    if not isinstance(i, bool):
        raise ParamTypeError("invalid parameter type: %s" % _type_name(i))


def validate_uint64(i: int) -> None:
    # bool is an int subclass, but never a valid gas amount
    if isinstance(i, bool) or not isinstance(i, int):
        raise ParamTypeError("invalid parameter type: %s" % _type_name(i))
    if i < 0 or i > MAX_UINT64:
        raise ParamTypeError("invalid parameter type: %d does not fit in uint64" % i)


def validate_shares(i: Optional[Decimal]) -> None:
    _validate_dec(i)
    if i < 0:
        raise ParamRangeError("value cannot be negative: %s" % i)
    if i > one_dec():
        raise ParamRangeError("value cannot be greater than 1: %s" % i)


def validate_min_gas_price(i: Optional[Decimal]) -> None:
    _validate_dec(i)
    if i < 0:
        raise ParamRangeError("value cannot be negative: %s" % i)
