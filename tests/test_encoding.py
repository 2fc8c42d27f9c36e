import pytest
from decimal import Decimal
from evmfees.encoding import (
    params_to_json, params_from_json, encode_param_value, decode_param_value,
    params_to_ssz, params_from_ssz, params_root, ParamsRecord)
from evmfees.errors import ParamTypeError, ParamRangeError, NilValueError, UnknownKeyError
from evmfees.types import new_params, default_params


def test_default_params_json():
    assert params_to_json(default_params()) == {
        "enable_fees": False,
        "developer_shares": "0.500000000000000000",
        "validator_shares": "0.500000000000000000",
        "addr_derivation_cost_create": "50",
        "min_gas_price": "0.000000000000000000",
    }


def test_params_from_json():
    p = params_from_json({
        "enable_fees": True,
        "developer_shares": "0.3",
        "validator_shares": "0.300000000000000000",
        "addr_derivation_cost_create": "36",
        "min_gas_price": "0.000000000000000001",
    })
    assert p == new_params(True, Decimal("0.3"), Decimal("0.3"), 36, Decimal("1e-18"))
    assert params_from_json(params_to_json(p)) == p


def test_params_from_json_omitted_fields():
    p = params_from_json({"developer_shares": "0.1"})
    assert p.enable_fees is False
    assert p.developer_shares == Decimal("0.1")
    assert p.validator_shares is None
    assert p.addr_derivation_cost_create == 0
    assert p.min_gas_price is None
    with pytest.raises(NilValueError):
        p.validate()


def test_params_from_json_numbers():
    # plain json integers are tolerated for uint64, never for decimals
    p = params_from_json({"addr_derivation_cost_create": 50})
    assert p.addr_derivation_cost_create == 50
    with pytest.raises(ParamTypeError):
        params_from_json({"developer_shares": 0.5})


def test_params_from_json_invalid():
    with pytest.raises(ParamTypeError):
        params_from_json({"addr_derivation_cost_create": "-5"})
    with pytest.raises(ParamTypeError):
        params_from_json({"addr_derivation_cost_create": True})
    with pytest.raises(ParamTypeError):
        params_from_json({"min_gas_price": "1e3"})
    with pytest.raises(ParamTypeError):
        params_from_json({"burn_shares": "0.1"})
    with pytest.raises(ParamTypeError):
        params_from_json(["enable_fees"])


def test_params_from_json_is_not_validated():
    p = params_from_json({"enable_fees": "true", "developer_shares": "-1"})
    assert p.enable_fees == "true"
    assert p.developer_shares == Decimal("-1")
    with pytest.raises(ParamTypeError):
        p.validate()


def test_param_values():
    assert encode_param_value("EnableFees", True) == b'true'
    assert encode_param_value("DeveloperShares", Decimal("0.5")) == b'"0.500000000000000000"'
    assert encode_param_value("AddrDerivationCostCreate", 50) == b'"50"'
    assert encode_param_value("MinGasPrice", None) == b'null'
    assert decode_param_value("EnableFees", b'false') is False
    assert decode_param_value("ValidatorShares", b'"0.25"') == Decimal("0.25")
    assert decode_param_value("AddrDerivationCostCreate", b'"1000"') == 1000
    assert decode_param_value("MinGasPrice", b'null') is None
    with pytest.raises(ParamTypeError):
        decode_param_value("MinGasPrice", b'not json')
    with pytest.raises(UnknownKeyError):
        decode_param_value("BurnShares", b'"0.1"')
    with pytest.raises(UnknownKeyError):
        encode_param_value("BurnShares", Decimal("0.1"))


def test_ssz_encoding():
    p = new_params(True, Decimal("0.25"), Decimal("0.7"), 40, Decimal("1.5"))
    data = params_to_ssz(p)
    # bool, 3 fixed-point uint256 values and a uint64
    assert len(data) == 1 + 32 * 3 + 8
    rec = ParamsRecord.decode_bytes(data)
    assert bool(rec.enable_fees) is True
    assert int(rec.developer_shares) == 25 * 10**16
    assert int(rec.validator_shares) == 7 * 10**17
    assert int(rec.addr_derivation_cost_create) == 40
    assert int(rec.min_gas_price) == 15 * 10**17
    assert params_from_ssz(data) == p


def test_ssz_requires_valid_params():
    with pytest.raises(ParamRangeError):
        params_to_ssz(new_params(True, Decimal("0.6"), Decimal("0.5"), 50, Decimal("0")))
    with pytest.raises(NilValueError):
        params_root(new_params(True, Decimal("0.1"), Decimal("0.5"), 50, None))


def test_ssz_decode_invalid():
    with pytest.raises(ParamTypeError):
        params_from_ssz(b'\x01\x02\x03')


def test_params_root():
    a = params_root(default_params())
    assert len(a) == 32
    assert a == params_root(default_params())
    b = params_root(default_params().replace(enable_fees=True))
    assert a != b


def test_params_to_json_does_not_round():
    p = new_params(True, Decimal("0.10000000000000000016"), Decimal("0.5"), 50, Decimal("0"))
    with pytest.raises(ParamTypeError):
        params_to_json(p)


def test_params_from_json_trailing_newline():
    with pytest.raises(ParamTypeError):
        params_from_json({"developer_shares": "0.5\n"})
    with pytest.raises(ParamTypeError):
        decode_param_value("MinGasPrice", b'"0.5\\n"')


def test_ssz_decode_wrong_length():
    data = params_to_ssz(default_params())
    with pytest.raises(ParamTypeError):
        params_from_ssz(data[:-1])
    with pytest.raises(ParamTypeError):
        params_from_ssz(data + b'\x00')
    with pytest.raises(ParamTypeError):
        params_from_ssz(b'')


def test_ssz_decode_bad_boolean():
    data = params_to_ssz(default_params())
    with pytest.raises(ParamTypeError):
        params_from_ssz(b'\x02' + data[1:])
