from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .networks import SEPOLIA, Network, as_network

DEFAULT_TIMEOUT_SECONDS = 30.0

FAUCET_URL_ENV = "CHAINSTACK_FAUCET_URL"
FAUCET_TIMEOUT_ENV = "CHAINSTACK_FAUCET_TIMEOUT"


@dataclass(frozen=True)
class SnapConfig:
    network: Network = SEPOLIA
    faucet_url: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    snap_name: str = "Chainstack Snap"

    @property
    def endpoint(self) -> str:
        return self.faucet_url or self.network.faucet_url

    @classmethod
    def from_env(cls, network: Network | str | int = SEPOLIA) -> "SnapConfig":
        timeout = os.environ.get(FAUCET_TIMEOUT_ENV)
        return cls(
            network=as_network(network),
            faucet_url=os.environ.get(FAUCET_URL_ENV) or None,
            timeout_seconds=float(timeout) if timeout else DEFAULT_TIMEOUT_SECONDS,
        )
