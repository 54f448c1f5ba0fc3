"""Labeled, tab-delimited text views of descriptions.

Every line is ``label<TAB>value``; wrap the output in ``utils.TabWriter`` to
get aligned columns. Children are always written in document order.
"""

from __future__ import annotations

from typing import Iterable, TextIO

from .models import DeviceNode, DeviceSummary, ServiceDescription, ValueRange

PADDING = "    "


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _value_list(values: list[str] | None) -> str:
    return "[" + " ".join(values or []) + "]"


def _value_range(value_range: ValueRange | None) -> str:
    r = value_range or ValueRange()
    return f"{r.minimum}-{r.maximum}, step {r.step}"


def print_device(w: TextIO, device: DeviceNode, padding: str = ""):
    w.write(f"{padding}DeviceType\t{device.device_type}\n")
    w.write(f"{padding}FriendlyName\t{device.friendly_name}\n")
    w.write(f"{padding}Manufacturer\t{device.manufacturer}\n")
    w.write(f"{padding}ManufacturerURL\t{device.manufacturer_url}\n")
    w.write(f"{padding}ModelName\t{device.model_name}\n")
    w.write(f"{padding}ModelDescription\t{device.model_description}\n")
    w.write(f"{padding}ModelURL\t{device.model_url}\n")
    w.write(f"{padding}SerialNumber\t{device.serial_number}\n")
    w.write(f"{padding}PresentationURL\t{device.presentation_url}\n")
    w.write(f"{padding}UPC\t{device.upc}\n")
    w.write(f"{padding}UDN\t{device.udn}\n")
    w.write("\n")

    if device.services:
        w.write(f"{padding}Services\n")
        for service in device.services:
            w.write(f"\t{padding}ServiceId\t{service.service_id}\n")
            w.write(f"\t{padding}ServiceType\t{service.service_type}\n")
            w.write(f"\t{padding}ControlURL\t{service.control_url}\n")
            w.write(f"\t{padding}EventSubURL\t{service.event_sub_url}\n")
            w.write(f"\t{padding}SCPD URL\t{service.scpd_url}\n")
            w.write("\n")

    if device.embedded_devices:
        w.write(f"{padding}Devices:\n")
        for embedded_device in device.embedded_devices:
            print_device(w, embedded_device, padding + PADDING)
            w.write("\n")


def print_service(w: TextIO, service: ServiceDescription):
    w.write("State variables\n")
    for variable in service.state_variables:
        w.write(f"Name\t{variable.name}\n")
        w.write(f"Multicast\t{_yes_no(variable.multicast)}\n")
        w.write(f"SendEvents\t{_yes_no(variable.send_events)}\n")
        w.write(f"DefaultValue\t{variable.default_value}\n")
        w.write(f"DataType\t{variable.data_type}\n")
        w.write(f"AllowedValueList\t{_value_list(variable.allowed_values)}\n")
        w.write(f"AllowedValueRange\t{_value_range(variable.allowed_value_range)}\n")
        w.write("\n")

    w.write("\n")
    w.write("Actions\n")
    for action in service.actions:
        w.write(f"Name\t{action.name}\n")
        w.write("Arguments:\n")
        for argument in action.arguments:
            w.write(f"\tName\t{argument.name}\n")
            w.write(f"\tDirection\t{argument.direction}\n")
            w.write(f"\tRelatedStateVariable\t{argument.related_state_variable}\n")
            w.write(f"\tRetval\t{_yes_no(argument.retval)}\n")
            w.write("\n")
        w.write("\n")


def print_discovered(w: TextIO, devices: Iterable[DeviceSummary]):
    for device in devices:
        w.write(f"FriendlyName\t{device.friendly_name}\n")
        w.write(f"Manufacturer\t{device.manufacturer}\n")
        w.write(f"ModelName\t{device.model_name}\n")
        w.write(f"ModelDescription\t{device.model_description}\n")
        w.write(f"SerialNumber\t{device.serial_number}\n")
        w.write(f"UDN\t{device.udn}\n")
        w.write(f"Location\t{device.location}\n")
        w.write("\n")
