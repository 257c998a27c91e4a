"""Generic HTTP request coordinator with tri-state outcomes."""
from .config import ServiceType, TransportConfiguration
from .coordinator import ServiceCoordinator
from .errors import NetworkError
from .exceptions import ServiceCoordinatorError
from .methods import CachePolicy, HTTPMethod
from .outcome import Failed, Informational, Outcome, Success

__all__ = [
    "CachePolicy",
    "Failed",
    "HTTPMethod",
    "Informational",
    "NetworkError",
    "Outcome",
    "ServiceCoordinator",
    "ServiceCoordinatorError",
    "ServiceType",
    "Success",
    "TransportConfiguration",
]
