"""Core primitives: networks, configuration and errors."""

from .config import DEFAULT_TIMEOUT_SECONDS, SnapConfig
from .errors import (
    FaucetRequestFailed,
    InvalidParamsError,
    MissingAddressError,
    MissingCredentialError,
    NetworkOrParseError,
    SnapError,
    UnknownMethodError,
    create_error,
)
from .networks import SEPOLIA, Network, as_network

__all__ = [
    "Network",
    "SEPOLIA",
    "as_network",
    "SnapConfig",
    "DEFAULT_TIMEOUT_SECONDS",
    "SnapError",
    "MissingCredentialError",
    "MissingAddressError",
    "InvalidParamsError",
    "UnknownMethodError",
    "NetworkOrParseError",
    "FaucetRequestFailed",
    "create_error",
]
