"""Configuration constants for the Battle Royale Bot."""

# Lobby settings
JOIN_WINDOW_SECONDS = 90  # seconds players have to react and join
JOIN_EMOJI = "👍"
MIN_PLAYERS = 2

# Round timing
FIRST_ROUND_DELAY_SECONDS = 5  # after the lobby closes
ROUND_INTERVAL_SECONDS = 10  # after each round announcement
ROUND_SOFT_BUDGET_SECONDS = 60  # slower rounds get a notice, nothing else

# Revival
REVIVE_CHANCE = 0.1  # one trial per round

# Results
PODIUM_SIZE = 3

# Phrase template markers
ACTOR_MARKER = "<username>"
TARGET_MARKER = "<target>"
KILLER_MARKER = "<killer>"

# Used when a target/killer marker has nobody left to point at
UNKNOWN_PLAYER_NAME = "someone"

# Words in a template's fixed text that mean its actor dies
DEATH_KEYWORDS = (
    'died',
    'buried',
    'killed',
    'drowned',
    'fatally',
    'crushed',
    'death',
    'impaled',
)

# Embed colors
LOBBY_COLOR = 0x00FF00
ROSTER_COLOR = 0xFFA500
ROUND_COLOR = 0xFF0000
RESULTS_COLOR = 0x0000FF
