# models/fitness.py

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

DEFAULT_EXERCISES = ["Running", "Weight Training", "Cycling", "Swimming", "Yoga", "HIIT", "Walking"]

@dataclass
class Workout:
    type: str
    duration: int  # минуты
    notes: str = ""
    time: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Optional['Workout']:
        if not isinstance(data, dict):
            return None
        duration = data.get("duration")
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            return None
        return cls(
            type=str(data.get("type", "")),
            duration=duration,
            notes=str(data.get("notes", "") or ""),
            time=str(data.get("time", ""))
        )
