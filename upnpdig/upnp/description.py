from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from xml.parsers.expat import ExpatError

import aiohttp

from ..utils import UpnpDigError, ensure_list, g, xml2dict
from .models import (
    DeviceNode,
    ServiceAction,
    ServiceArgument,
    ServiceDescription,
    ServiceRef,
    ServiceStateVariable,
    ValueRange,
)

if TYPE_CHECKING:
    from .models.root import DiscoveredDevice, Root, Service
    from .models.service import Action, SCPDRoot, StateVariable

logger = logging.getLogger(__name__)


class FetchError(UpnpDigError):
    pass


def _text(element: Any, key: str) -> str:
    value = element.get(key) if isinstance(element, Mapping) else None
    if value is None:
        return ""
    if isinstance(value, Mapping):
        # element carrying attributes
        return (value.get("#text") or "").strip()
    return str(value).strip()


def _flag(element: Any, attribute: str, default: bool) -> bool:
    value = element.get(f"@{attribute}")
    if value is None:
        return default
    return value.strip().lower() in ("yes", "true", "1")


def _items(element: Any, list_key: str, item_key: str) -> list:
    container = element.get(list_key) if isinstance(element, Mapping) else None
    if not isinstance(container, Mapping):
        return []
    return ensure_list(container.get(item_key))


def _children(element: Any, list_key: str, item_key: str) -> list:
    # empty or text-only elements carry no children
    return [
        item
        for item in _items(element, list_key, item_key)
        if isinstance(item, Mapping)
    ]


def _parse_service(service: Service) -> ServiceRef:
    return ServiceRef(
        service_id=_text(service, "serviceId"),
        service_type=_text(service, "serviceType"),
        control_url=_text(service, "controlURL"),
        event_sub_url=_text(service, "eventSubURL"),
        scpd_url=_text(service, "SCPDURL"),
    )


def _parse_device(device: DiscoveredDevice) -> DeviceNode:
    return DeviceNode(
        device_type=_text(device, "deviceType"),
        friendly_name=_text(device, "friendlyName"),
        manufacturer=_text(device, "manufacturer"),
        manufacturer_url=_text(device, "manufacturerURL"),
        model_name=_text(device, "modelName"),
        model_description=_text(device, "modelDescription"),
        model_number=_text(device, "modelNumber"),
        model_url=_text(device, "modelURL"),
        serial_number=_text(device, "serialNumber"),
        presentation_url=_text(device, "presentationURL"),
        upc=_text(device, "UPC"),
        udn=_text(device, "UDN"),
        services=[
            _parse_service(s) for s in _children(device, "serviceList", "service")
        ],
        embedded_devices=[
            _parse_device(d) for d in _children(device, "deviceList", "device")
        ],
    )


def parse_device_description(xml: str | bytes) -> DeviceNode:
    try:
        info: dict[str, Root] = xml2dict(xml)
    except ExpatError as exc:
        raise FetchError(f"invalid device description: {exc}") from exc

    root = info.get("root")
    device = root.get("device") if isinstance(root, Mapping) else None
    if not isinstance(device, Mapping):
        raise FetchError("device description has no root device")
    return _parse_device(device)


def _parse_state_variable(variable: StateVariable) -> ServiceStateVariable:
    allowed_values = None
    if "allowedValueList" in variable:
        allowed_values = [
            str(v).strip()
            for v in _items(variable, "allowedValueList", "allowedValue")
            if v is not None
        ]

    allowed_value_range = None
    if "allowedValueRange" in variable:
        r = variable.get("allowedValueRange")
        allowed_value_range = ValueRange(
            minimum=_text(r, "minimum"),
            maximum=_text(r, "maximum"),
            step=_text(r, "step"),
        )

    return ServiceStateVariable(
        name=_text(variable, "name"),
        multicast=_flag(variable, "multicast", False),
        send_events=_flag(variable, "sendEvents", True),
        default_value=_text(variable, "defaultValue"),
        data_type=_text(variable, "dataType"),
        allowed_values=allowed_values,
        allowed_value_range=allowed_value_range,
    )


def _parse_action(action: Action) -> ServiceAction:
    return ServiceAction(
        name=_text(action, "name"),
        arguments=[
            ServiceArgument(
                name=_text(argument, "name"),
                direction=_text(argument, "direction"),
                related_state_variable=_text(argument, "relatedStateVariable"),
                retval="retval" in argument,
            )
            for argument in _children(action, "argumentList", "argument")
        ],
    )


def parse_service_description(xml: str | bytes) -> ServiceDescription:
    try:
        info: SCPDRoot = xml2dict(xml)
    except ExpatError as exc:
        raise FetchError(f"invalid service description: {exc}") from exc

    scpd = info.get("scpd")
    if not isinstance(scpd, Mapping):
        raise FetchError("service description has no scpd element")

    return ServiceDescription(
        state_variables=[
            _parse_state_variable(v)
            for v in _children(scpd, "serviceStateTable", "stateVariable")
        ],
        actions=[_parse_action(a) for a in _children(scpd, "actionList", "action")],
    )


async def _get(url: str, client: aiohttp.ClientSession | None) -> bytes:
    if client is None:
        client = g.http

    logger.info("fetch description %s", url)
    try:
        async with client.get(url) as response:
            response.raise_for_status()
            return await response.read()
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
        raise FetchError(
            f"fetch {url} failed: {exc.__class__.__name__} {exc}"
        ) from exc


async def get_device_from_url(
    url: str, client: aiohttp.ClientSession | None = None
) -> tuple[DeviceNode, str]:
    """Fetch a device description, returning it with the URL it came from.

    The URL is the base every relative service URL in the tree resolves
    against.
    """
    xml = await _get(url, client)
    return parse_device_description(xml), url


async def get_service_from_url(
    url: str, client: aiohttp.ClientSession | None = None
) -> ServiceDescription:
    xml = await _get(url, client)
    return parse_service_description(xml)
