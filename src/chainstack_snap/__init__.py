"""Chainstack Snap - testnet faucet top-ups from inside a wallet host."""

from ._version import __version__
from .events import ButtonClickEvent, InputChangeEvent, InstallEvent, RpcRequest
from .snap import FaucetSnap, FlowState, TopUpOutcome

__all__ = [
    "__version__",
    "FaucetSnap",
    "FlowState",
    "TopUpOutcome",
    "InstallEvent",
    "InputChangeEvent",
    "ButtonClickEvent",
    "RpcRequest",
]
