from .config_logging import LOGGING
from .converters_scalar import parse_date_str, to_amount
from .core_util import capitalize, capitalize_all, is_string

__all__ = [
    "capitalize",
    "capitalize_all",
    "is_string",
    "parse_date_str",
    "to_amount",
    "LOGGING",
]
