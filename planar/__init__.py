"""Points in the Euclidean plane, and the distance between them"""

from typing import *

from expression import Result, result

__all__ = [
    "ConfigurationValueError",
    "PlanarException",
    "unsafe_extract_result",
    ]


_E = TypeVar('_E', bound=BaseException)
_R = TypeVar('_R', covariant=True)


def unsafe_extract_result(res: Result[_R, _E]) -> _R:
    match res:
        case result.Result(tag="ok", ok=r):
            return r
        case result.Result(tag="error", error=e):
            raise e
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")


class PlanarException(Exception):
    "General base for exceptional situations related to the specifics of this project"
    pass


class ConfigurationValueError(PlanarException):
    "Exception subtype for when something's wrong with a configuration value"
    pass
