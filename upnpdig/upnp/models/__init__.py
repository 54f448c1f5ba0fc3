from .root import DeviceNode, DeviceSummary, ServiceRef
from .service import (
    ServiceAction,
    ServiceArgument,
    ServiceDescription,
    ServiceStateVariable,
    ValueRange,
)

__all__ = [
    "DeviceNode",
    "DeviceSummary",
    "ServiceAction",
    "ServiceArgument",
    "ServiceDescription",
    "ServiceRef",
    "ServiceStateVariable",
    "ValueRange",
]
