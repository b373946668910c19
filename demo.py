#!/usr/bin/env python3
"""
chainstack-snap Demo - run the install / sendETH / confirm flow against an in-memory wallet host
"""
import asyncio
import logging
import os
import sys

from chainstack_snap import ButtonClickEvent, FaucetSnap, InputChangeEvent, InstallEvent, RpcRequest
from chainstack_snap.core import SnapConfig
from chainstack_snap.host import InMemoryHost
from chainstack_snap.ui import collect_text


def render(interface_id, ui):
    print(f"  [{interface_id}]")
    for line in collect_text(ui):
        print(f"    {line}")


async def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if len(sys.argv) < 2:
        print("Usage: python demo.py <address>")
        sys.exit(1)
    address = sys.argv[1]
    api_key = os.environ.get("CHAINSTACK_API_KEY", "")

    host = InMemoryHost(on_render=render)
    snap = FaucetSnap(host, config=SnapConfig.from_env())

    print("\n[1/4] Installing snap...")
    await snap.handle(InstallEvent())

    print("\n[2/4] Entering API key...")
    await snap.handle(InputChangeEvent("api-key-input", api_key))
    print(f"  ✓ Flow state: {snap.flow_state.value}")

    print("\n[3/4] Dapp calls sendETH...")
    await snap.handle(RpcRequest("sendETH", {"address": address}))

    print("\n[4/4] User clicks Send...")
    outcome = await snap.handle(ButtonClickEvent("send-it"))
    status = "✅ SUCCESS" if outcome.succeeded else "❌ FAILED"
    print(f"\nStatus: {status}")


if __name__ == "__main__":
    asyncio.run(main())
