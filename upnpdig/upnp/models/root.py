from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict


class Service(TypedDict):
    serviceType: str
    serviceId: str
    SCPDURL: str
    controlURL: str
    eventSubURL: str


class ServiceList(TypedDict):
    service: list[Service] | Service


class DeviceList(TypedDict):
    device: list[DiscoveredDevice] | DiscoveredDevice


class DiscoveredDevice(TypedDict):
    deviceType: str
    friendlyName: str
    manufacturer: str
    manufacturerURL: str
    modelDescription: str
    modelName: str
    modelNumber: str
    modelURL: str
    serialNumber: str
    UDN: str
    UPC: str | None
    serviceList: ServiceList | None
    deviceList: DeviceList | None
    presentationURL: str | None


class Root(TypedDict):
    specVersion: dict
    URLBase: str | None

    device: DiscoveredDevice


@dataclass(frozen=True)
class ServiceRef:
    service_id: str = ""
    service_type: str = ""
    control_url: str = ""
    event_sub_url: str = ""
    scpd_url: str = ""


@dataclass(frozen=True)
class DeviceNode:
    device_type: str = ""
    friendly_name: str = ""
    manufacturer: str = ""
    manufacturer_url: str = ""
    model_name: str = ""
    model_description: str = ""
    model_number: str = ""
    model_url: str = ""
    serial_number: str = ""
    presentation_url: str = ""
    upc: str = ""
    udn: str = ""

    services: list[ServiceRef] = field(default_factory=list)
    embedded_devices: list[DeviceNode] = field(default_factory=list)


@dataclass(frozen=True)
class DeviceSummary:
    friendly_name: str
    manufacturer: str
    model_name: str
    model_description: str
    serial_number: str
    udn: str
    location: str

    @classmethod
    def from_device(cls, device: DeviceNode, location: str) -> DeviceSummary:
        return cls(
            friendly_name=device.friendly_name,
            manufacturer=device.manufacturer,
            model_name=device.model_name,
            model_description=device.model_description,
            serial_number=device.serial_number,
            udn=device.udn,
            location=location,
        )
