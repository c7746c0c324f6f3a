# pellet_duel/config.py - Game constants and transport settings
import os

# Room
MAX_PLAYERS = 2
PALETTE = ["#FFD000", "#00D6FF"]

# Timing (milliseconds)
TICK_MS = 50                 # 20 steps per second
MOVE_COOLDOWN_MS = 110       # at most one cell per 110 ms
POWER_DURATION_MS = 6000
STUN_DURATION_MS = 1200

# Scoring
PELLET_SCORE = 1
POWER_PELLET_SCORE = 3
STEAL_CAP = 6
STEAL_BASE = 2
STEAL_DIVISOR = 3
SCATTER_RADIUS = 2           # Chebyshev distance around the victim

# Spawning
SPAWN_ATTEMPTS = 2000
DEFAULT_SPAWN = (1, 1)
DEFAULT_DIR = (1, 0)

POWER_HIT_MESSAGE = "POWER HIT!"
FULL_MESSAGE = "Room is full."

# Transport, overridable from the environment or the command line
DEFAULT_HOST = os.getenv("PELLET_DUEL_HOST", "0.0.0.0")
DEFAULT_PORT = int(os.getenv("PELLET_DUEL_PORT", "8765"))
STATUS_INTERVAL_SECS = float(os.getenv("PELLET_DUEL_STATUS_SECS", "30"))
