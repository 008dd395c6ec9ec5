"""Static simulation configuration constants."""

PERIOD_LENGTH_SECONDS = 1200
OVERTIME_LENGTH_SECONDS = 300
REGULATION_PERIODS = 3
OVERTIME_PERIOD = 4

# Elapsed game seconds per tick, drawn from [low, high).
DEFAULT_ELAPSED_RANGE: tuple[int, int] = (10, 40)

# Stand-in goaltending when a team dresses no goalie.
NEUTRAL_GOALTENDING = 50.0

# (category, base weight, share of the skill differential added to the base).
EVENT_BASE_WEIGHTS: tuple[tuple[str, float, float], ...] = (
    ("shot", 30.0, 0.5),
    ("faceoff", 25.0, 0.0),
    ("turnover", 20.0, -0.5),
    ("hit", 15.0, 0.0),
    ("penalty", 5.0, 0.0),
)

GOAL_PROBABILITY_FLOOR = 0.05
GOAL_PROBABILITY_CEILING = 0.25
GOAL_PROBABILITY_BASE = 0.10
GOAL_PROBABILITY_SCALE = 400.0

PRIMARY_ASSIST_CHANCE = 0.70
SECONDARY_ASSIST_CHANCE = 0.40

ACTIVE_FORWARDS = 3
ACTIVE_DEFENSE = 2

ZONES: tuple[str, ...] = ("offensive zone", "neutral zone", "defensive zone")

PENALTY_MINUTES = 2
