from __future__ import annotations

from typing import Any, Dict, Optional, Protocol


class ManageStateOperation:
    GET = "get"
    UPDATE = "update"
    CLEAR = "clear"


class DialogType:
    ALERT = "alert"


SNAP_MANAGE_STATE = "snap_manageState"
SNAP_CREATE_INTERFACE = "snap_createInterface"
SNAP_UPDATE_INTERFACE = "snap_updateInterface"
SNAP_DIALOG = "snap_dialog"


class SnapHost(Protocol):
    """The wallet-side RPC surface a snap is allowed to call."""

    async def request(self, method: str, params: Optional[Dict[str, Any]] = None) -> Any:
        ...
