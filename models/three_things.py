# models/three_things.py

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

RANKS = ("Essential", "Important", "Important")

@dataclass
class Thing:
    text: str
    done: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Optional['Thing']:
        if not isinstance(data, dict):
            return None
        return cls(text=str(data.get("text", "")), done=bool(data.get("done", False)))
