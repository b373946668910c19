from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


class UserInputEventType:
    INPUT_CHANGE = "InputChangeEvent"
    BUTTON_CLICK = "ButtonClickEvent"


@dataclass(frozen=True)
class InstallEvent:
    pass


@dataclass(frozen=True)
class InputChangeEvent:
    name: str
    value: Any = None
    interface_id: Optional[str] = None


@dataclass(frozen=True)
class ButtonClickEvent:
    name: str
    interface_id: Optional[str] = None


@dataclass(frozen=True)
class RpcRequest:
    method: str
    params: Dict[str, Any] = field(default_factory=dict)


UserInputEvent = Union[InputChangeEvent, ButtonClickEvent]
SnapEvent = Union[InstallEvent, InputChangeEvent, ButtonClickEvent, RpcRequest]


def user_input_from_json(event: Dict[str, Any], interface_id: Optional[str] = None) -> UserInputEvent:
    """Build a user-input event from the host's ``{"type", "name", "value"}`` payload."""
    event_type = event.get("type")
    name = event.get("name")
    if not isinstance(name, str):
        raise ValueError("user input event without a component name")
    if event_type == UserInputEventType.INPUT_CHANGE:
        return InputChangeEvent(name=name, value=event.get("value"), interface_id=interface_id)
    if event_type == UserInputEventType.BUTTON_CLICK:
        return ButtonClickEvent(name=name, interface_id=interface_id)
    raise ValueError(f"Unsupported user input event type: {event_type}")
