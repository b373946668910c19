from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Network:
    id: int
    name: str
    faucet_url: str
    currency_symbol: str
    explorer_url: str


NETWORK_SEPOLIA = "sepolia"

CHAIN_ID_SEPOLIA = 11155111

FAUCET_URLS: Dict[str, str] = {
    NETWORK_SEPOLIA: "https://api.chainstack.com/v1/faucet/sepolia",
}

EXPLORER_URLS: Dict[str, str] = {
    NETWORK_SEPOLIA: "https://sepolia.etherscan.io",
}


SEPOLIA = Network(
    id=CHAIN_ID_SEPOLIA,
    name="Ethereum Sepolia",
    faucet_url=FAUCET_URLS[NETWORK_SEPOLIA],
    currency_symbol="SepoliaETH",
    explorer_url=EXPLORER_URLS[NETWORK_SEPOLIA],
)


def as_network(network: Network | str | int) -> Network:
    if isinstance(network, Network):
        return network
    if network in (NETWORK_SEPOLIA, CHAIN_ID_SEPOLIA):
        return SEPOLIA
    raise ValueError(f"Unsupported network: {network}")
