from .logging import configure_logging, get_logger
from .request_logging import log_request

__all__ = ["configure_logging", "get_logger", "log_request"]
