"""JSON node builders for the host's interface renderer."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional

Component = Dict[str, Any]


def panel(children: Iterable[Component]) -> Component:
    return {"type": "panel", "children": list(children)}


def heading(value: str) -> Component:
    return {"type": "heading", "value": value}


def text(value: str) -> Component:
    return {"type": "text", "value": value}


def divider() -> Component:
    return {"type": "divider"}


def spinner() -> Component:
    return {"type": "spinner"}


def address(value: str) -> Component:
    return {"type": "address", "value": value}


def row(label: str, value: Component) -> Component:
    return {"type": "row", "label": label, "value": value}


def input_field(name: str, placeholder: Optional[str] = None, value: Optional[str] = None) -> Component:
    node: Component = {"type": "input", "name": name}
    if placeholder is not None:
        node["placeholder"] = placeholder
    if value is not None:
        node["value"] = value
    return node


def button(value: str, name: str, variant: str = "primary") -> Component:
    return {"type": "button", "value": value, "name": name, "variant": variant}


def iter_components(node: Component) -> Iterator[Component]:
    yield node
    for child in node.get("children", []):
        yield from iter_components(child)
    if node.get("type") == "row":
        yield from iter_components(node["value"])


def collect_text(node: Component) -> List[str]:
    """Return every heading/text/address value in render order."""
    return [
        str(component["value"])
        for component in iter_components(node)
        if component.get("type") in ("heading", "text", "address")
    ]
