from .store import (
    API_KEY,
    SEND_ETH_ADDRESS,
    SEND_ETH_INTERFACE_ID,
    HostStateStore,
    InMemoryStateStore,
    SnapState,
    StateStore,
    merge_state,
)

__all__ = [
    "API_KEY",
    "SEND_ETH_ADDRESS",
    "SEND_ETH_INTERFACE_ID",
    "HostStateStore",
    "InMemoryStateStore",
    "SnapState",
    "StateStore",
    "merge_state",
]
