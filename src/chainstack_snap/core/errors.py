from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from chainstack_snap.faucet.types import TopUpResult


@dataclass
class SnapError(Exception):
    component: str
    operation: str
    message: str
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        base = f"{self.component}.{self.operation}: {self.message}"
        if self.cause is not None:
            return f"{base} (cause: {self.cause})"
        return base


@dataclass
class MissingCredentialError(SnapError):
    pass


@dataclass
class MissingAddressError(SnapError):
    pass


@dataclass
class InvalidParamsError(SnapError):
    pass


@dataclass
class UnknownMethodError(SnapError):
    pass


@dataclass
class NetworkOrParseError(SnapError):
    pass


@dataclass
class FaucetRequestFailed(SnapError):
    result: Optional["TopUpResult"] = None


def create_error(component: str, operation: str, message: str, cause: Optional[BaseException] = None) -> SnapError:
    return SnapError(component=component, operation=operation, message=message, cause=cause)
