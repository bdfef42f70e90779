"""
Momentum - Models Package
Модели данных, которые сервисы хранят в кэше
"""

from .enums import Section, WritingUnit
from .writing import WritingSession
from .goal import Goal, new_goal_id
from .three_things import Thing, RANKS
from .fitness import Workout, DEFAULT_EXERCISES
from . import keys

__all__ = [
    # Enums
    'Section',
    'WritingUnit',

    # Models
    'WritingSession',
    'Goal',
    'Thing',
    'Workout',

    # Constants
    'RANKS',
    'DEFAULT_EXERCISES',
    'new_goal_id',
    'keys'
]
