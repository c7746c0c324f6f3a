# pellet_duel/player.py - Player entity and input coercion
from .config import DEFAULT_DIR

DIRECTIONS = ("up", "down", "left", "right")


def clamp_input(data):
    """Coerce an inbound payload to four strict booleans; anything missing is False."""
    if not isinstance(data, dict):
        data = {}
    return {key: bool(data.get(key)) for key in DIRECTIONS}


class Player:
    """A connected player. Created on admission, dropped on departure."""

    def __init__(self, player_id, cx, cy, color, slot=0):
        self.id = player_id
        self.slot = slot
        self.cx = cx
        self.cy = cy
        self.dir = DEFAULT_DIR
        self.input = clamp_input(None)
        self.score = 0
        self.color = color
        self.power_until = 0
        self.stunned_until = 0
        self.last_move_at = 0

    def is_powered(self, now):
        return now < self.power_until

    def is_stunned(self, now):
        return now < self.stunned_until

    def to_dict(self):
        return {
            "id": self.id,
            "cx": self.cx,
            "cy": self.cy,
            "dir": {"dx": self.dir[0], "dy": self.dir[1]},
            "input": dict(self.input),
            "score": self.score,
            "color": self.color,
            "powerUntil": self.power_until,
            "stunnedUntil": self.stunned_until,
            "lastMoveAt": self.last_move_at,
        }

    def __repr__(self):
        return f"Player({self.id!r}, cell=({self.cx},{self.cy}), score={self.score})"
