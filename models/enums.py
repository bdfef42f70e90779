# models/enums.py

from enum import Enum

class Section(Enum):
    WRITING = "writing"
    GOALS = "goals"
    CALENDAR = "calendar"
    THREE_THINGS = "three-things"
    FITNESS = "fitness"

class WritingUnit(Enum):
    WORDS = "words"
    MINUTES = "minutes"
    PAGES = "pages"

    @property
    def label(self) -> str:
        return f"{self.value} / day"
