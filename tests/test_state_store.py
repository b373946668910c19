"""Tests for the persisted-state adapters."""
import pytest
from unittest.mock import AsyncMock

from chainstack_snap.core import SnapError
from chainstack_snap.host import InMemoryHost
from chainstack_snap.state import HostStateStore, InMemoryStateStore, SnapState, merge_state


class TestMergeState:
    def test_later_keys_win(self):
        assert merge_state({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_values_are_replaced(self):
        merged = merge_state({"nested": {"x": 1, "y": 2}}, {"nested": {"x": 9}})
        assert merged == {"nested": {"x": 9}}


class TestHostStateStore:
    @pytest.mark.asyncio
    async def test_get_state_empty_when_absent(self):
        """Absent state reads as an empty mapping."""
        store = HostStateStore(InMemoryHost())
        assert await store.get_state() == {}

    @pytest.mark.asyncio
    async def test_patch_sequence_merges(self):
        """Successive patches merge over each other, later keys winning."""
        host = InMemoryHost()
        store = HostStateStore(host)

        await store.patch_state({"apiKey": "key-1", "sendETHAddress": "0x1"})
        await store.patch_state({"sendETHAddress": "0x2", "sendETHInterfaceId": "interface-7"})

        assert await store.get_state() == {
            "apiKey": "key-1",
            "sendETHAddress": "0x2",
            "sendETHInterfaceId": "interface-7",
        }
        assert host.state == await store.get_state()

    @pytest.mark.asyncio
    async def test_patch_preserves_existing_fields(self):
        """Fields missing from the patch survive."""
        host = InMemoryHost(state={"apiKey": "secret"})
        store = HostStateStore(host)

        await store.patch_state({"sendETHAddress": "0xABC"})

        assert host.state == {"apiKey": "secret", "sendETHAddress": "0xABC"}

    @pytest.mark.asyncio
    async def test_uses_manage_state_operations(self):
        """Reads with 'get' and writes the merged whole with 'update'."""
        host = AsyncMock()
        host.request = AsyncMock(side_effect=[{"apiKey": "k"}, None])
        store = HostStateStore(host)

        await store.patch_state({"sendETHAddress": "0x1"})

        first, second = host.request.await_args_list
        assert first.args == ("snap_manageState", {"operation": "get"})
        assert second.args == (
            "snap_manageState",
            {"operation": "update", "newState": {"apiKey": "k", "sendETHAddress": "0x1"}},
        )

    @pytest.mark.asyncio
    async def test_rejects_non_mapping_state(self):
        """A host returning something other than an object is an error."""
        host = AsyncMock()
        host.request = AsyncMock(return_value=["not", "a", "dict"])

        with pytest.raises(SnapError, match="unexpected state type"):
            await HostStateStore(host).get_state()


class TestInMemoryStateStore:
    @pytest.mark.asyncio
    async def test_returns_copies(self):
        """Mutating a returned mapping does not touch stored state."""
        store = InMemoryStateStore({"apiKey": "k"})
        state = await store.get_state()
        state["apiKey"] = "changed"
        assert (await store.get_state())["apiKey"] == "k"

    @pytest.mark.asyncio
    async def test_patch_merges(self):
        store = InMemoryStateStore()
        await store.patch_state({"a": 1})
        await store.patch_state({"b": 2})
        await store.patch_state({"a": 3})
        assert await store.get_state() == {"a": 3, "b": 2}


class TestSnapState:
    def test_from_mapping(self):
        state = SnapState.from_mapping({"apiKey": "k", "sendETHAddress": "0x1", "other": True})
        assert state.api_key == "k"
        assert state.send_eth_address == "0x1"
        assert state.send_eth_interface_id is None

    def test_to_patch_skips_absent_fields(self):
        assert SnapState(api_key="k").to_patch() == {"apiKey": "k"}
