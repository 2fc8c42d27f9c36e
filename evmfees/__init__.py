from .errors import (
    ParamError, ParamTypeError, NilValueError, ParamRangeError, TotalSharesExceededError,
    UnknownKeyError, DuplicateKeyError,
)
from .types import Params, ParamSetPair, new_params, default_params
from .validation import validate_bool, validate_shares, validate_uint64, validate_min_gas_price
from .key_table import KeyTable, param_key_table
