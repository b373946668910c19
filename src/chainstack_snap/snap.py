from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from chainstack_snap import screens
from chainstack_snap.core.config import SnapConfig
from chainstack_snap.core.errors import (
    FaucetRequestFailed,
    InvalidParamsError,
    MissingAddressError,
    MissingCredentialError,
    SnapError,
    UnknownMethodError,
)
from chainstack_snap.events import (
    ButtonClickEvent,
    InputChangeEvent,
    InstallEvent,
    RpcRequest,
    SnapEvent,
    UserInputEvent,
)
from chainstack_snap.faucet import AsyncFaucetClient, TopUpResult
from chainstack_snap.host.base import SNAP_CREATE_INTERFACE, SNAP_DIALOG, SNAP_UPDATE_INTERFACE, DialogType, SnapHost
from chainstack_snap.state import API_KEY, HostStateStore, SnapState, StateStore
from chainstack_snap.ui import Component

logger = logging.getLogger(__name__)

SEND_ETH = "sendETH"


class FlowState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    AWAITING_API_KEY = "awaiting_api_key"
    API_KEY_STORED = "api_key_stored"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    SENDING_REQUEST = "sending_request"
    COMPLETED = "completed"


@dataclass
class TopUpOutcome:
    succeeded: bool
    message: str
    result: Optional[TopUpResult] = None
    error: Optional[SnapError] = None


class FaucetSnap:
    """
    Event handlers for the Chainstack faucet snap.

    The wallet host delivers install, user-input and RPC events; each handler
    runs to completion before the next one is delivered. Persisted state and
    the faucet client are injected so either can be swapped for a fake.

    Example:
        snap = FaucetSnap(host)
        await snap.on_install()
        await snap.on_user_input(InputChangeEvent("api-key-input", "my-key"))
        await snap.on_rpc_request(RpcRequest("sendETH", {"address": "0x..."}))
        outcome = await snap.on_user_input(ButtonClickEvent("send-it"))
    """

    def __init__(
        self,
        host: SnapHost,
        state: Optional[StateStore] = None,
        faucet: Optional[AsyncFaucetClient] = None,
        config: Optional[SnapConfig] = None,
    ) -> None:
        self._host = host
        self._config = config or SnapConfig()
        self._state = state or HostStateStore(host)
        self._faucet = faucet or AsyncFaucetClient(self._config)
        self._flow_state = FlowState.UNINITIALIZED
        self._last_outcome: Optional[TopUpOutcome] = None

    @property
    def flow_state(self) -> FlowState:
        return self._flow_state

    @property
    def last_outcome(self) -> Optional[TopUpOutcome]:
        return self._last_outcome

    @property
    def title(self) -> str:
        return self._config.snap_name

    async def handle(self, event: SnapEvent) -> Any:
        if isinstance(event, InstallEvent):
            return await self.on_install()
        if isinstance(event, (InputChangeEvent, ButtonClickEvent)):
            return await self.on_user_input(event)
        if isinstance(event, RpcRequest):
            return await self.on_rpc_request(event)
        raise TypeError(f"Unsupported event: {event!r}")

    async def on_install(self) -> None:
        interface_id = await self._create_interface(screens.api_key_prompt(self.title))
        await self._host.request(SNAP_DIALOG, {"type": DialogType.ALERT, "id": interface_id})
        self._flow_state = FlowState.AWAITING_API_KEY

    async def on_user_input(self, event: UserInputEvent) -> Optional[TopUpOutcome]:
        if isinstance(event, InputChangeEvent) and event.name == screens.API_KEY_INPUT:
            await self._state.patch_state({API_KEY: event.value})
            self._flow_state = FlowState.API_KEY_STORED
            return None
        if isinstance(event, ButtonClickEvent) and event.name == screens.SEND_BUTTON:
            return await self.send_top_up(event.interface_id)
        logger.debug("ignoring user input %r", event)
        return None

    async def on_rpc_request(self, request: RpcRequest) -> Any:
        if request.method == SEND_ETH:
            return await self._start_top_up(request.params)
        raise UnknownMethodError("snap", "on_rpc_request", "Method not found.")

    async def _start_top_up(self, params: Dict[str, Any]) -> Any:
        recipient = (params or {}).get("address")
        if not isinstance(recipient, str) or not recipient:
            raise InvalidParamsError("snap", SEND_ETH, "address parameter is required")

        interface_id = await self._create_interface(
            screens.confirmation(self.title, recipient, self._config.network)
        )
        await self._state.patch_state(
            SnapState(send_eth_address=recipient, send_eth_interface_id=interface_id).to_patch()
        )
        self._flow_state = FlowState.AWAITING_CONFIRMATION
        return await self._host.request(SNAP_DIALOG, {"type": DialogType.ALERT, "id": interface_id})

    async def send_top_up(self, interface_id: Optional[str] = None) -> TopUpOutcome:
        """Run the confirmed top-up and render its result in place.

        Errors from the flow are shown to the user rather than raised; the
        returned outcome carries the error for callers that need it.
        """
        self._flow_state = FlowState.SENDING_REQUEST
        try:
            try:
                stored = SnapState.from_mapping(await self._state.get_state())
                interface_id = interface_id or stored.send_eth_interface_id
                interface_id = await self._render(interface_id, screens.progress(self.title))
                outcome = await self._request_top_up(stored)
            except SnapError as exc:
                logger.warning("top-up failed: %s", exc)
                outcome = TopUpOutcome(succeeded=False, message=exc.message, error=exc)
                await self._render(interface_id, screens.error(self.title, exc.message))
            else:
                if outcome.succeeded:
                    await self._render(interface_id, screens.success(self.title, outcome.result, self._config.network))
                else:
                    await self._render(interface_id, screens.failure(self.title, outcome.message))
        finally:
            self._flow_state = FlowState.COMPLETED
        self._last_outcome = outcome
        return outcome

    async def _request_top_up(self, stored: SnapState) -> TopUpOutcome:
        if not stored.api_key:
            raise MissingCredentialError("snap", "send_top_up", "API key not found.")
        if not stored.send_eth_address:
            raise MissingAddressError("snap", "send_top_up", "Destination address not found.")

        result = await self._faucet.request_top_up(stored.api_key, stored.send_eth_address)
        if result.ok:
            logger.info("faucet sent %s to %s (tx %s)", result.amount_sent, stored.send_eth_address, result.transaction)
            message = screens.success_message(result, self._config.network)
            return TopUpOutcome(succeeded=True, message=message, result=result)
        message = "" if result.message is None else str(result.message)
        error = FaucetRequestFailed("faucet", "request_top_up", message, result=result)
        return TopUpOutcome(succeeded=False, message=message, result=result, error=error)

    async def _create_interface(self, ui: Component) -> str:
        return await self._host.request(SNAP_CREATE_INTERFACE, {"ui": ui})

    async def _render(self, interface_id: Optional[str], ui: Component) -> str:
        # A stale or unknown id gets a fresh interface so the user still sees the screen.
        if interface_id is not None:
            try:
                await self._host.request(SNAP_UPDATE_INTERFACE, {"id": interface_id, "ui": ui})
                return interface_id
            except SnapError as exc:
                logger.warning("could not update interface %s: %s", interface_id, exc)
        interface_id = await self._create_interface(ui)
        await self._host.request(SNAP_DIALOG, {"type": DialogType.ALERT, "id": interface_id})
        return interface_id
