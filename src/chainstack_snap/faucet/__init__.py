from .client import AsyncFaucetClient, FaucetClient
from .types import TopUpResult

__all__ = ["AsyncFaucetClient", "FaucetClient", "TopUpResult"]
