from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from chainstack_snap.core.config import SnapConfig
from chainstack_snap.core.errors import MissingCredentialError, NetworkOrParseError

from .types import TopUpResult

logger = logging.getLogger(__name__)


def _headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
        "accept": "application/json",
    }


def _check_api_key(api_key: Optional[str]) -> str:
    if not api_key:
        raise MissingCredentialError("faucet", "request_top_up", "API key not found.")
    return api_key


def _to_result(resp: httpx.Response) -> TopUpResult:
    try:
        payload = resp.json()
    except ValueError as exc:
        raise NetworkOrParseError(
            "faucet", "request_top_up", f"unparsable response (HTTP {resp.status_code})", cause=exc
        ) from exc
    body = payload if isinstance(payload, dict) else {}
    return TopUpResult(ok=resp.is_success, status_code=resp.status_code, body=body)


class FaucetClient:
    def __init__(self, config: Optional[SnapConfig] = None, client: httpx.Client | None = None) -> None:
        self._config = config or SnapConfig()
        self._client = client or httpx.Client(timeout=self._config.timeout_seconds)

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    def request_top_up(self, api_key: str, address: str) -> TopUpResult:
        api_key = _check_api_key(api_key)
        logger.debug("requesting top-up for %s from %s", address, self.endpoint)
        try:
            resp = self._client.post(self.endpoint, json={"address": address}, headers=_headers(api_key))
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning("faucet request failed: %s", exc)
            raise NetworkOrParseError("faucet", "request_top_up", "request failed", cause=exc) from exc
        result = _to_result(resp)
        if not result.ok:
            logger.warning("faucet returned HTTP %s: %s", result.status_code, result.message)
        return result

    def close(self) -> None:
        self._client.close()


class AsyncFaucetClient:
    """
    Async client for the Chainstack testnet faucet.

    Sends a single authenticated POST per call and classifies the reply:
    any 2xx status is a success, anything else a failure whose body may
    carry a ``message``. Transport errors and unparsable bodies raise
    ``NetworkOrParseError``. No retries are attempted.

    Example:
        client = AsyncFaucetClient()
        result = await client.request_top_up(api_key, "0x...")
        if result.ok:
            print(result.amount_sent, result.transaction)
    """

    def __init__(self, config: Optional[SnapConfig] = None, client: httpx.AsyncClient | None = None) -> None:
        self._config = config or SnapConfig()
        self._client = client or httpx.AsyncClient(timeout=self._config.timeout_seconds)

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    async def request_top_up(self, api_key: str, address: str) -> TopUpResult:
        api_key = _check_api_key(api_key)
        logger.debug("requesting top-up for %s from %s", address, self.endpoint)
        try:
            resp = await self._client.post(self.endpoint, json={"address": address}, headers=_headers(api_key))
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning("faucet request failed: %s", exc)
            raise NetworkOrParseError("faucet", "request_top_up", "request failed", cause=exc) from exc
        result = _to_result(resp)
        if not result.ok:
            logger.warning("faucet returned HTTP %s: %s", result.status_code, result.message)
        return result

    async def aclose(self) -> None:
        await self._client.aclose()

