"""
InMemoryHost - a stand-in for the wallet runtime.

Implements the subset of host RPC methods the snap uses, keeping interfaces,
dialogs and persisted state in plain Python containers. Used by the test
suite and by the local demo script.
"""
from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List, Optional

from chainstack_snap.core.errors import create_error

from .base import (
    SNAP_CREATE_INTERFACE,
    SNAP_DIALOG,
    SNAP_MANAGE_STATE,
    SNAP_UPDATE_INTERFACE,
    ManageStateOperation,
)


class InMemoryHost:
    def __init__(
        self,
        state: Optional[Dict[str, Any]] = None,
        on_render: Optional[Callable[[str, Dict[str, Any]], None]] = None,
    ) -> None:
        self.state: Optional[Dict[str, Any]] = copy.deepcopy(state) if state is not None else None
        self.interfaces: Dict[str, Dict[str, Any]] = {}
        self.history: Dict[str, List[Dict[str, Any]]] = {}
        self.dialogs: List[Dict[str, Any]] = []
        self.calls: List[str] = []
        self._on_render = on_render
        self._next_id = 0

    async def request(self, method: str, params: Optional[Dict[str, Any]] = None) -> Any:
        params = params or {}
        self.calls.append(method)
        if method == SNAP_MANAGE_STATE:
            return self._manage_state(params)
        if method == SNAP_CREATE_INTERFACE:
            return self._create_interface(params["ui"])
        if method == SNAP_UPDATE_INTERFACE:
            return self._update_interface(params["id"], params["ui"])
        if method == SNAP_DIALOG:
            self.dialogs.append(dict(params))
            return None
        raise create_error("host", "request", f"unsupported host method: {method}")

    def _manage_state(self, params: Dict[str, Any]) -> Any:
        operation = params.get("operation")
        if operation == ManageStateOperation.GET:
            return copy.deepcopy(self.state)
        if operation == ManageStateOperation.UPDATE:
            self.state = copy.deepcopy(params["newState"])
            return None
        if operation == ManageStateOperation.CLEAR:
            self.state = None
            return None
        raise create_error("host", "manage_state", f"unknown operation: {operation}")

    def _create_interface(self, ui: Dict[str, Any]) -> str:
        self._next_id += 1
        interface_id = f"interface-{self._next_id}"
        self.interfaces[interface_id] = ui
        self.history[interface_id] = [ui]
        self._render(interface_id, ui)
        return interface_id

    def _update_interface(self, interface_id: str, ui: Dict[str, Any]) -> None:
        if interface_id not in self.interfaces:
            raise create_error("host", "update_interface", f"interface not found: {interface_id}")
        self.interfaces[interface_id] = ui
        self.history[interface_id].append(ui)
        self._render(interface_id, ui)

    def _render(self, interface_id: str, ui: Dict[str, Any]) -> None:
        if self._on_render is not None:
            self._on_render(interface_id, ui)
