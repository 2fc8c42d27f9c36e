import dataclasses
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, List, NamedTuple, Optional
from .dec import new_dec_with_prec, add_dec, one_dec, format_dec
from .errors import TotalSharesExceededError
from .params import (
    DEFAULT_ENABLE_FEES, DEFAULT_DEVELOPER_SHARES, DEFAULT_VALIDATOR_SHARES,
    DEFAULT_ADDR_DERIVATION_COST_CREATE, DEFAULT_MIN_GAS_PRICE,
    PARAM_STORE_KEY_ENABLE_FEES, PARAM_STORE_KEY_DEVELOPER_SHARES, PARAM_STORE_KEY_VALIDATOR_SHARES,
    PARAM_STORE_KEY_ADDR_DERIVATION_COST_CREATE, PARAM_STORE_KEY_MIN_GAS_PRICE,
)
from .validation import validate_bool, validate_shares, validate_uint64, validate_min_gas_price

Validator = Callable[[Any], None]


class ParamSetPair(NamedTuple):
    key: str  # parameter store key
    field: str  # name of the Params attribute the key refers to
    validator: Validator

    def value(self, params: "Params") -> Any:
        return getattr(params, self.field)


# store key, Params attribute, validator. In registration order.
PARAM_SET_PAIRS = (
    ParamSetPair(PARAM_STORE_KEY_ENABLE_FEES, 'enable_fees', validate_bool),
    ParamSetPair(PARAM_STORE_KEY_DEVELOPER_SHARES, 'developer_shares', validate_shares),
    ParamSetPair(PARAM_STORE_KEY_VALIDATOR_SHARES, 'validator_shares', validate_shares),
    ParamSetPair(PARAM_STORE_KEY_ADDR_DERIVATION_COST_CREATE, 'addr_derivation_cost_create', validate_uint64),
    ParamSetPair(PARAM_STORE_KEY_MIN_GAS_PRICE, 'min_gas_price', validate_min_gas_price),
)


@dataclass(frozen=True)
class Params:
    """Fee distribution parameters, as controlled by governance.

    Construction does not validate: call validate() before relying on the values.
    Decimal fields may be None, which represents a nil decimal and never validates.
    """
    enable_fees: bool
    developer_shares: Optional[Decimal]
    validator_shares: Optional[Decimal]
    # Cost for deriving a contract address (CREATE),
    # intended to cover at least the keccak256(word) operation (36 gas).
    addr_derivation_cost_create: int
    min_gas_price: Optional[Decimal]

    def param_set_pairs(self) -> List[ParamSetPair]:
        return list(PARAM_SET_PAIRS)

    def replace(self, **fields: Any) -> "Params":
        return dataclasses.replace(self, **fields)

    def validate(self) -> None:
        # fail-fast, in the same order as the store keys, with the total shares check after both shares
        validate_bool(self.enable_fees)
        validate_shares(self.developer_shares)
        validate_shares(self.validator_shares)
        # both shares are known to be valid decimals here
        total = add_dec(self.developer_shares, self.validator_shares)
        if total > one_dec():
            raise TotalSharesExceededError("total shares cannot be greater than 1: %s + %s" % (
                format_dec(self.developer_shares), format_dec(self.validator_shares)))
        validate_uint64(self.addr_derivation_cost_create)
        validate_min_gas_price(self.min_gas_price)


def new_params(enable_fees: bool,
               developer_shares: Optional[Decimal],
               validator_shares: Optional[Decimal],
               addr_derivation_cost_create: int,
               min_gas_price: Optional[Decimal]) -> Params:
    return Params(
        enable_fees=enable_fees,
        developer_shares=developer_shares,
        validator_shares=validator_shares,
        addr_derivation_cost_create=addr_derivation_cost_create,
        min_gas_price=min_gas_price,
    )


def default_params() -> Params:
    return Params(
        enable_fees=DEFAULT_ENABLE_FEES,
        developer_shares=new_dec_with_prec(*DEFAULT_DEVELOPER_SHARES),
        validator_shares=new_dec_with_prec(*DEFAULT_VALIDATOR_SHARES),
        addr_derivation_cost_create=DEFAULT_ADDR_DERIVATION_COST_CREATE,
        min_gas_price=new_dec_with_prec(*DEFAULT_MIN_GAS_PRICE),
    )
