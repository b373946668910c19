#!/usr/bin/env python3
"""Request SepoliaETH from the Chainstack faucet without a wallet host"""
import os
import sys

from web3 import Web3

from chainstack_snap.core import SnapConfig, SnapError
from chainstack_snap.faucet import FaucetClient

RPC_URL = os.environ.get("SEPOLIA_RPC_URL", "https://ethereum-sepolia-rpc.publicnode.com")


def main():
    if len(sys.argv) < 2:
        print("Usage: python get_sepolia_eth.py <address>")
        sys.exit(1)
    address = sys.argv[1]
    api_key = os.environ.get("CHAINSTACK_API_KEY", "")

    w3 = Web3(Web3.HTTPProvider(RPC_URL))
    if Web3.is_address(address):
        balance = w3.eth.get_balance(Web3.to_checksum_address(address))
        print(f"Balance before: {Web3.from_wei(balance, 'ether')} SepoliaETH")

    config = SnapConfig.from_env()
    client = FaucetClient(config)
    print(f"Requesting top-up from {client.endpoint}...")
    try:
        result = client.request_top_up(api_key, address)
    except SnapError as e:
        print(f"Faucet error: {e}")
        sys.exit(2)
    finally:
        client.close()

    if result.ok:
        print(f"Sent: {result.amount_sent} {config.network.currency_symbol}")
        print(f"Tx: {result.transaction}")
    else:
        print(f"Faucet refused (HTTP {result.status_code}): {result.message}")
        sys.exit(2)


if __name__ == "__main__":
    main()
