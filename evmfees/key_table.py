import logging
from typing import Any, Dict, List, Mapping
from .errors import ParamError, DuplicateKeyError, UnknownKeyError
from .types import Params, ParamSetPair, default_params

logger = logging.getLogger(__name__)


class KeyTable:
    """Registry of parameter store keys, with the field and validator of each key.

    A keyed parameter store uses this to validate individual values,
    and to apply governance changes to a full parameter set."""

    pairs: Dict[str, ParamSetPair]

    def __init__(self):
        self.pairs = dict()

    def register(self, pair: ParamSetPair) -> None:
        if pair.key in self.pairs:
            raise DuplicateKeyError("duplicate parameter key: %s" % pair.key)
        self.pairs[pair.key] = pair
        logger.debug("registered parameter key %s (%s)", pair.key, pair.field)

    def register_param_set(self, params: Params) -> "KeyTable":
        for pair in params.param_set_pairs():
            self.register(pair)
        return self

    def keys(self) -> List[str]:
        return list(self.pairs.keys())

    def has(self, key: str) -> bool:
        return key in self.pairs

    def pair(self, key: str) -> ParamSetPair:
        if key not in self.pairs:
            raise UnknownKeyError("parameter key %s not registered" % key)
        return self.pairs[key]

    def validate(self, key: str, value: Any) -> None:
        self.pair(key).validator(value)

    def apply(self, params: Params, changes: Mapping[str, Any]) -> Params:
        """Validate and apply a set of changes, keyed by store key.

        Returns a new Params, the input is never modified.
        Either all changes are applied, or an error is raised."""
        fields = dict()
        for key, value in changes.items():
            pair = self.pair(key)
            try:
                pair.validator(value)
            except ParamError as e:
                logger.warning("rejected change of parameter %s: %s", key, e)
                raise
            fields[pair.field] = value

        updated = params.replace(**fields)
        try:
            updated.validate()
        except ParamError as e:
            logger.warning("rejected parameter changes %s: %s", ", ".join(changes.keys()), e)
            raise
        logger.debug("applied parameter changes: %s", ", ".join(changes.keys()))
        return updated


def param_key_table() -> KeyTable:
    return KeyTable().register_param_set(default_params())
