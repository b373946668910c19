from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from chainstack_snap.core.errors import create_error
from chainstack_snap.host.base import SNAP_MANAGE_STATE, ManageStateOperation, SnapHost

logger = logging.getLogger(__name__)

API_KEY = "apiKey"
SEND_ETH_ADDRESS = "sendETHAddress"
SEND_ETH_INTERFACE_ID = "sendETHInterfaceId"


@dataclass
class SnapState:
    api_key: Optional[str] = None
    send_eth_address: Optional[str] = None
    send_eth_interface_id: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "SnapState":
        return cls(
            api_key=data.get(API_KEY),
            send_eth_address=data.get(SEND_ETH_ADDRESS),
            send_eth_interface_id=data.get(SEND_ETH_INTERFACE_ID),
        )

    def to_patch(self) -> Dict[str, Any]:
        fields = {
            API_KEY: self.api_key,
            SEND_ETH_ADDRESS: self.send_eth_address,
            SEND_ETH_INTERFACE_ID: self.send_eth_interface_id,
        }
        return {key: value for key, value in fields.items() if value is not None}


class StateStore(Protocol):
    async def get_state(self) -> Dict[str, Any]:
        ...

    async def patch_state(self, partial: Dict[str, Any]) -> None:
        ...


def merge_state(current: Dict[str, Any], partial: Dict[str, Any]) -> Dict[str, Any]:
    # Shallow: nested objects in ``partial`` replace, not merge.
    return {**current, **partial}


class HostStateStore:
    """State persisted by the wallet through ``snap_manageState``."""

    def __init__(self, host: SnapHost) -> None:
        self._host = host

    async def get_state(self) -> Dict[str, Any]:
        state = await self._host.request(SNAP_MANAGE_STATE, {"operation": ManageStateOperation.GET})
        if state is None:
            return {}
        if not isinstance(state, dict):
            raise create_error("state", "get_state", f"unexpected state type: {type(state).__name__}")
        return state

    async def patch_state(self, partial: Dict[str, Any]) -> None:
        new_state = merge_state(await self.get_state(), partial)
        logger.debug("patching state keys: %s", sorted(partial))
        await self._host.request(
            SNAP_MANAGE_STATE,
            {"operation": ManageStateOperation.UPDATE, "newState": new_state},
        )


class InMemoryStateStore:
    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._state: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    async def get_state(self) -> Dict[str, Any]:
        return copy.deepcopy(self._state)

    async def patch_state(self, partial: Dict[str, Any]) -> None:
        self._state = merge_state(self._state, copy.deepcopy(partial))
