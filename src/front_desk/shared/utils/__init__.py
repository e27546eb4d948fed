from .clock import hotel_today
from .error_handler import api_error_handler
from .event_params import path_parameter, query_parameter
from .http_response import api_response, error_response
from .validators import parse_iso_date, to_decimal

__all__ = [
    "api_error_handler",
    "api_response",
    "error_response",
    "hotel_today",
    "parse_iso_date",
    "path_parameter",
    "query_parameter",
    "to_decimal",
]
