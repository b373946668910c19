from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class TopUpResult:
    ok: bool
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def amount_sent(self) -> Optional[Any]:
        return self.body.get("amountSent")

    @property
    def transaction(self) -> Optional[Any]:
        return self.body.get("transaction")

    @property
    def message(self) -> Optional[Any]:
        return self.body.get("message")
