"""Application constants."""

# Calorie estimate: calories per minute = base + multiplier * RPE
BASE_CALORIES_PER_MINUTE = 5.0
RPE_CALORIE_MULTIPLIER = 1.0

# Rating of perceived exertion slider range
RPE_MIN = 1.0
RPE_MAX = 10.0

# Duration pickers
MAX_DURATION_HOURS = 23
MAX_DURATION_MINUTES = 59

# Names applied at save time when the user left them blank
DEFAULT_STRENGTH_WORKOUT_NAME = "Untitled Workout"
DEFAULT_CARDIO_WORKOUT_NAME = "Untitled Cardio"
DEFAULT_EXERCISE_NAME = "Unnamed Exercise"
DEFAULT_INTERVAL_NAME = "Unnamed Activity"

MIN_PASSWORD_LENGTH = 8
