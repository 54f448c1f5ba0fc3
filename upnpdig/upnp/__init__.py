from .description import FetchError, get_device_from_url, get_service_from_url
from .discover import DiscoveryError, discover
from .locate import (
    ResolvedLocation,
    ServiceNotFoundError,
    URLResolutionError,
    locate_service,
)
from .printer import print_device, print_discovered, print_service

__all__ = [
    "DiscoveryError",
    "FetchError",
    "ResolvedLocation",
    "ServiceNotFoundError",
    "URLResolutionError",
    "discover",
    "get_device_from_url",
    "get_service_from_url",
    "locate_service",
    "print_device",
    "print_discovered",
    "print_service",
]
