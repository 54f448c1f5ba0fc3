from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from urllib.parse import urljoin

from ..utils import UpnpDigError
from .models import DeviceNode

logger = logging.getLogger(__name__)

CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")


class ServiceNotFoundError(UpnpDigError):
    def __init__(self, service_id: str):
        self.service_id = service_id
        super().__init__(f"service not found {service_id}")


class URLResolutionError(UpnpDigError):
    pass


@dataclass(frozen=True)
class ResolvedLocation:
    url: str
    base_url: str


def resolve_url(base_url: str, reference: str) -> str:
    """Resolve ``reference`` against ``base_url`` (RFC 3986 section 5.3).

    An absolute reference is returned as is.
    """
    for value in (base_url, reference):
        if CONTROL_CHARACTERS.search(value):
            raise URLResolutionError(f"invalid control character in URL {value!r}")

    try:
        return urljoin(base_url, reference)
    except ValueError as exc:
        raise URLResolutionError(
            f"cannot resolve {reference!r} against {base_url!r}: {exc}"
        ) from exc


def _locate(
    device_url: str, device: DeviceNode, service_id: str, log: logging.Logger
) -> ResolvedLocation:
    for service in device.services:
        if service.service_id != service_id:
            continue
        # only the first match of a node counts, broken or not
        try:
            url = resolve_url(device_url, service.scpd_url)
        except URLResolutionError as exc:
            log.warning(
                "skip service %s of device %s %s",
                service_id,
                device.udn or device.friendly_name,
                exc,
            )
            break
        return ResolvedLocation(url, device_url)

    for embedded_device in device.embedded_devices:
        try:
            return _locate(device_url, embedded_device, service_id, log)
        except ServiceNotFoundError:
            continue
        except UpnpDigError as exc:
            log.warning(
                "skip embedded device %s %s",
                embedded_device.udn or embedded_device.friendly_name,
                exc,
            )

    raise ServiceNotFoundError(service_id)


def locate_service(
    device_url: str,
    device: DeviceNode,
    service_id: str,
    log: logging.Logger | None = None,
) -> ResolvedLocation:
    """Find the SCPD location of ``service_id`` in a device tree.

    The search is depth first, a device's own services before its embedded
    devices, everything in document order. Embedded devices have no location
    of their own, so ``device_url`` is the base at every depth. A matching
    service whose URL cannot be resolved is reported to ``log`` and the
    search goes on as if the device had no match. Only
    ``ServiceNotFoundError`` reaches the caller.
    """
    return _locate(device_url, device, service_id, log or logger)
