from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict


class Argument(TypedDict):
    name: str
    direction: str
    relatedStateVariable: str
    retval: None


class ArgumentList(TypedDict):
    argument: list[Argument] | Argument


class Action(TypedDict):
    name: str
    argumentList: ArgumentList | None


class ActionList(TypedDict):
    action: list[Action] | Action


class AllowedValueList(TypedDict):
    allowedValue: list[str] | str


class AllowedValueRange(TypedDict):
    minimum: str
    maximum: str
    step: str


# "@sendEvents" and "@multicast" arrive as xmltodict attribute keys
class StateVariable(TypedDict):
    name: str
    dataType: str
    defaultValue: str | None
    allowedValueList: AllowedValueList | None
    allowedValueRange: AllowedValueRange | None


class StateVariableList(TypedDict):
    stateVariable: list[StateVariable] | StateVariable


class Scpd(TypedDict):
    specVersion: dict
    actionList: ActionList | None
    serviceStateTable: StateVariableList | None


class SCPDRoot(TypedDict):
    scpd: Scpd


@dataclass(frozen=True)
class ValueRange:
    minimum: str = ""
    maximum: str = ""
    step: str = ""


@dataclass(frozen=True)
class ServiceStateVariable:
    name: str
    multicast: bool = False
    send_events: bool = True
    default_value: str = ""
    data_type: str = ""
    allowed_values: list[str] | None = None
    allowed_value_range: ValueRange | None = None


@dataclass(frozen=True)
class ServiceArgument:
    name: str
    direction: str = ""
    related_state_variable: str = ""
    retval: bool = False


@dataclass(frozen=True)
class ServiceAction:
    name: str
    arguments: list[ServiceArgument] = field(default_factory=list)


@dataclass(frozen=True)
class ServiceDescription:
    state_variables: list[ServiceStateVariable] = field(default_factory=list)
    actions: list[ServiceAction] = field(default_factory=list)
