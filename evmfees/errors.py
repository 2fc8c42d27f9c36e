class ParamError(Exception):
    """Base class of all fee parameter errors"""


class ParamTypeError(ParamError, TypeError):
    pass


class NilValueError(ParamError, ValueError):
    pass


class ParamRangeError(ParamError, ValueError):
    pass


class TotalSharesExceededError(ParamRangeError):
    pass


class UnknownKeyError(ParamError, KeyError):
    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0]) if self.args else ""


class DuplicateKeyError(ParamError):
    pass
