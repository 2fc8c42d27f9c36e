from typing import Any, Mapping, TypedDict
from .encoding import ParamsJSON, params_to_json, params_from_json
from .errors import NilValueError, ParamTypeError
from .types import Params, default_params


class GenesisState(TypedDict):
    params: ParamsJSON


def default_genesis() -> GenesisState:
    return GenesisState(params=params_to_json(default_params()))


def validate_genesis(genesis: Mapping[str, Any]) -> Params:
    """Decode and validate the params of a genesis state. Returns the validated params."""
    if not isinstance(genesis, Mapping):
        raise ParamTypeError("invalid genesis state: expected an object, got %s" % type(genesis).__name__)
    if genesis.get("params") is None:
        raise NilValueError("invalid genesis state: params are nil")
    params = params_from_json(genesis["params"])
    params.validate()
    return params
