# models/writing.py

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

@dataclass
class WritingSession:
    amount: int
    time: str = ""  # '09:05 PM'

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Optional['WritingSession']:
        if not isinstance(data, dict):
            return None
        amount = data.get("amount")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            return None
        return cls(amount=amount, time=str(data.get("time", "")))
