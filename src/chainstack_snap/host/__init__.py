from .base import (
    SNAP_CREATE_INTERFACE,
    SNAP_DIALOG,
    SNAP_MANAGE_STATE,
    SNAP_UPDATE_INTERFACE,
    DialogType,
    ManageStateOperation,
    SnapHost,
)
from .memory import InMemoryHost

__all__ = [
    "DialogType",
    "InMemoryHost",
    "ManageStateOperation",
    "SnapHost",
    "SNAP_CREATE_INTERFACE",
    "SNAP_DIALOG",
    "SNAP_MANAGE_STATE",
    "SNAP_UPDATE_INTERFACE",
]
