# models/goal.py

import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

def new_goal_id() -> str:
    """ID цели: миллисекунды в base36"""
    n = int(time.time() * 1000)
    digits = []
    while n:
        n, r = divmod(n, 36)
        digits.append(_BASE36[r])
    return "".join(reversed(digits)) or "0"

@dataclass
class Goal:
    id: str
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Optional['Goal']:
        if not isinstance(data, dict) or "id" not in data:
            return None
        return cls(id=str(data["id"]), text=str(data.get("text", "")))
