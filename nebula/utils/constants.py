"""Game configuration constants."""

# Galaxy extent (square, light-years)
MAP_SIZE_LY = 200

# Sector grid
SECTOR_COLS = 3
SECTOR_ROWS = 2
SECTOR_IDS = ("A", "B", "C", "D", "E", "F")

# Players
PLAYER_IDS = ("Player 1", "Player 2", "Player 3", "Player 4")
NEUTRAL = "None"

# Home systems: sector -> player
HOME_SLOTS = (
    ("A", "Player 1"),
    ("C", "Player 2"),
    ("D", "Player 3"),
    ("F", "Player 4"),
)
HOME_EARTH_LIKE = 2
HOME_GAS_GIANTS = 3

# Map generation
PLACEMENT_MAX_ATTEMPTS = 50  # Last sample is accepted once exhausted
MAX_PLANETS = 4  # Earth-like / gas giant counts drawn from [0, 4]
RESERVE_MULTIPLIER_RANGE = (1, 9)

# Economy
MAX_BUILDINGS_PER_TYPE = 100_000_000
EXOTIC_COST_MULTIPLIER = 2
MAX_RESOURCE_CAP = 1_000_000_000  # Display alarm only, never enforced

# Initial stock per player ledger
INITIAL_RESOURCES = {
    "iron": 100,
    "nano": 10,
    "energy": 500,
    "hydrogen": 20,
}

# Day counter starts here on a new game
FIRST_DAY = 1
