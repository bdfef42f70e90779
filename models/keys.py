# models/keys.py

# Ключи полей документа; формат значений принадлежит соответствующему сервису

ACTIVE_SECTION = "activeSection"

WRITING_TARGET = "writingTarget"
WRITING_TARGET_TYPE = "writingTargetType"
WRITING_SESSIONS = "writingSessions"

DAILY_GOALS = "dailyGoals"
DAILY_CHECKED = "dailyChecked"
ACHIEVEMENT_STREAK = "achievementStreak"

CALENDAR_NOTES = "calendarNotes"

THREE_THINGS = "threeThings"

FITNESS_EXERCISE_TYPES = "fitnessExerciseTypes"
FITNESS_WORKOUTS = "fitnessWorkouts"
FITNESS_STREAK = "fitnessStreak"

ALL_KEYS = (
    ACTIVE_SECTION,
    WRITING_TARGET,
    WRITING_TARGET_TYPE,
    WRITING_SESSIONS,
    DAILY_GOALS,
    DAILY_CHECKED,
    ACHIEVEMENT_STREAK,
    CALENDAR_NOTES,
    THREE_THINGS,
    FITNESS_EXERCISE_TYPES,
    FITNESS_WORKOUTS,
    FITNESS_STREAK,
)
