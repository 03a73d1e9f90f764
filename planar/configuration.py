"""Tools related to planar configuration"""

import logging
from typing import Any, Literal, Mapping

from expression import Result

from planar import ConfigurationValueError


DECIMAL_PLACES_KEY: Literal["decimalPlaces"] = "decimalPlaces"
DEFAULT_DECIMAL_PLACES = 2


def get_decimal_places(conf_data: Mapping[str, object]) -> Result[int, ConfigurationValueError]:
    """Get the number of decimal places to which to round a distance, falling back to the default if absent."""
    match conf_data.get(DECIMAL_PLACES_KEY):
        case None:
            logging.debug("No value for '%s' in configuration; using default: %d", DECIMAL_PLACES_KEY, DEFAULT_DECIMAL_PLACES)
            return Result.Ok(DEFAULT_DECIMAL_PLACES)
        case raw_value:
            return validate_decimal_places(raw_value)\
                .map_error(lambda err: ConfigurationValueError(f"Bad value for key '{DECIMAL_PLACES_KEY}' -- {err}"))


def validate_decimal_places(value: Any) -> Result[int, ConfigurationValueError]:
    if not isinstance(value, int) or isinstance(value, bool):
        return Result.Error(ConfigurationValueError(
            f"Number of decimal places ({value}) (type={type(value).__name__}) is not an integer"
        ))
    if value < 0:
        return Result.Error(ConfigurationValueError(f"Number of decimal places is negative: {value}"))
    return Result.Ok(value)
