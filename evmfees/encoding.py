import json
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, TypedDict
from remerkleable.complex import Container
from remerkleable.basic import boolean, uint64, uint256
from remerkleable.byte_arrays import Bytes32
from .dec import parse_dec, format_dec, dec_to_fixed, fixed_to_dec
from .errors import ParamTypeError, UnknownKeyError
from .types import Params, PARAM_SET_PAIRS


# JSON form of the params, as found in genesis files.
# Decimals and uint64 values are encoded as strings. A nil decimal is null.
class ParamsJSON(TypedDict):
    enable_fees: bool
    developer_shares: Optional[str]
    validator_shares: Optional[str]
    addr_derivation_cost_create: str
    min_gas_price: Optional[str]


def encode_dec_json(v: Optional[Decimal]) -> Optional[str]:
    if v is None:
        return None
    return format_dec(v)


def decode_dec_json(v: Any) -> Optional[Decimal]:
    if v is None:
        return None
    return parse_dec(v)


def encode_uint64_json(v: int) -> str:
    return str(v)


def decode_uint64_json(v: Any) -> int:
    # strings are canonical, plain JSON numbers are tolerated
    if isinstance(v, bool):
        raise ParamTypeError("invalid uint64: %r" % (v,))
    if isinstance(v, int):
        return v
    if isinstance(v, str) and v.isascii() and v.isdigit():
        return int(v)
    raise ParamTypeError("invalid uint64: %r" % (v,))


def encode_bool_json(v: bool) -> bool:
    return v


def decode_bool_json(v: Any) -> bool:
    # type checked by the validator, not here
    return v


# per Params field: (encode, decode, zero value when omitted)
FIELD_CODECS: Dict[str, Tuple[Callable[[Any], Any], Callable[[Any], Any], Any]] = {
    'enable_fees': (encode_bool_json, decode_bool_json, False),
    'developer_shares': (encode_dec_json, decode_dec_json, None),
    'validator_shares': (encode_dec_json, decode_dec_json, None),
    'addr_derivation_cost_create': (encode_uint64_json, decode_uint64_json, "0"),
    'min_gas_price': (encode_dec_json, decode_dec_json, None),
}

FIELD_BY_KEY = {pair.key: pair.field for pair in PARAM_SET_PAIRS}


def params_to_json(params: Params) -> ParamsJSON:
    return ParamsJSON(**{field: enc(getattr(params, field)) for field, (enc, _, _) in FIELD_CODECS.items()})


def params_from_json(obj: Mapping[str, Any]) -> Params:
    """Decode params from their JSON form. Omitted fields take their zero value.
    The result is not validated."""
    if not isinstance(obj, Mapping):
        raise ParamTypeError("invalid params: expected an object, got %s" % type(obj).__name__)
    for k in obj.keys():
        if k not in FIELD_CODECS:
            raise ParamTypeError("unknown params field: %s" % k)
    return Params(**{field: decode(obj.get(field, zero)) for field, (_, decode, zero) in FIELD_CODECS.items()})


def encode_param_value(key: str, value: Any) -> bytes:
    """Encode a single parameter value, the way a keyed parameter store holds it."""
    if key not in FIELD_BY_KEY:
        raise UnknownKeyError("parameter key %s not registered" % key)
    enc, _, _ = FIELD_CODECS[FIELD_BY_KEY[key]]
    return json.dumps(enc(value)).encode()


def decode_param_value(key: str, raw: bytes) -> Any:
    if key not in FIELD_BY_KEY:
        raise UnknownKeyError("parameter key %s not registered" % key)
    _, decode, _ = FIELD_CODECS[FIELD_BY_KEY[key]]
    try:
        obj = json.loads(raw)
    except ValueError as e:
        raise ParamTypeError("invalid value for parameter %s: %s" % (key, e)) from e
    return decode(obj)


# SSZ form of a valid parameter set.
# Decimals are fixed-point: the value multiplied by 10**18.
class ParamsRecord(Container):
    enable_fees: boolean
    developer_shares: uint256
    validator_shares: uint256
    addr_derivation_cost_create: uint64
    min_gas_price: uint256


def params_to_record(params: Params) -> ParamsRecord:
    # only valid params have an SSZ form (no nil or negative decimals)
    params.validate()
    return ParamsRecord(
        enable_fees=boolean(params.enable_fees),
        developer_shares=dec_to_fixed(params.developer_shares),
        validator_shares=dec_to_fixed(params.validator_shares),
        addr_derivation_cost_create=uint64(params.addr_derivation_cost_create),
        min_gas_price=dec_to_fixed(params.min_gas_price),
    )


def params_from_record(rec: ParamsRecord) -> Params:
    return Params(
        enable_fees=bool(rec.enable_fees),
        developer_shares=fixed_to_dec(rec.developer_shares),
        validator_shares=fixed_to_dec(rec.validator_shares),
        addr_derivation_cost_create=int(rec.addr_derivation_cost_create),
        min_gas_price=fixed_to_dec(rec.min_gas_price),
    )


def params_to_ssz(params: Params) -> bytes:
    return params_to_record(params).encode_bytes()


def params_from_ssz(data: bytes) -> Params:
    # fixed-size record: remerkleable reads short input as zero-padded and ignores trailing bytes
    if len(data) != ParamsRecord.type_byte_length():
        raise ParamTypeError("invalid SSZ params: expected %d bytes, got %d" % (
            ParamsRecord.type_byte_length(), len(data)))
    if data[0] not in (0, 1):
        raise ParamTypeError("invalid SSZ params: bad boolean byte %d" % data[0])
    try:
        rec = ParamsRecord.decode_bytes(data)
    except (ValueError, IndexError, TypeError) as e:
        raise ParamTypeError("invalid SSZ params: %s" % e) from e
    return params_from_record(rec)


def params_root(params: Params) -> Bytes32:
    return Bytes32(params_to_record(params).hash_tree_root())
