# pellet_duel/match.py - Match state and player admission/departure
import random
import uuid
from typing import Dict, List, Optional

from .collision import resolve_collision
from .config import (
    DEFAULT_SPAWN,
    MAX_PLAYERS,
    PALETTE,
    POWER_DURATION_MS,
    SPAWN_ATTEMPTS,
)
from .grid import GRID_COLS, GRID_ROWS, is_wall
from .movement import step_player
from .pellets import PelletField
from .player import Player, clamp_input


class MatchState:
    """Everything the simulation owns for one match.

    Players live in a fixed two-slot array; `players` is the same set keyed
    by id, for lookups and snapshots.
    """

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self.reset()

    def reset(self):
        """Start a new match in place: fresh pellets, nobody in the room."""
        self.slots: List[Optional[Player]] = [None] * MAX_PLAYERS
        self.players: Dict[str, Player] = {}
        self.pellets = PelletField.initialize()
        self.last_winner = None
        self.message = None
        self.server_time = 0

    def is_full(self):
        return len(self.players) >= MAX_PLAYERS

    def is_empty(self):
        return len(self.players) == 0

    def clear_message(self):
        self.message = None
        self.last_winner = None

    def random_spawn(self):
        """A random floor cell nobody stands on, or DEFAULT_SPAWN if none turns up."""
        taken = {(p.cx, p.cy) for p in self.players.values()}
        for _ in range(SPAWN_ATTEMPTS):
            cx = self.rng.randrange(GRID_COLS)
            cy = self.rng.randrange(GRID_ROWS)
            if not is_wall(cx, cy) and (cx, cy) not in taken:
                return cx, cy
        return DEFAULT_SPAWN

    def admit(self, player_id=None) -> Optional[Player]:
        """Create a player in the first free slot. None when the room is full."""
        if self.is_full():
            return None
        slot = self.slots.index(None)
        player_id = player_id or uuid.uuid4().hex
        cx, cy = self.random_spawn()
        # Colour follows the slot, not join count, so a rejoining player never copies the other one
        player = Player(player_id, cx, cy, PALETTE[slot % len(PALETTE)], slot=slot)
        self.slots[slot] = player
        self.players[player_id] = player
        return player

    def remove(self, player_id):
        """Drop a player. Returns True when that emptied the room and the match was reset."""
        player = self.players.pop(player_id, None)
        if player is not None:
            self.slots[player.slot] = None
        self.clear_message()
        if self.is_empty():
            self.reset()
            return True
        return False

    def set_input(self, player_id, data):
        """Replace a player's held keys. Unknown ids are ignored."""
        player = self.players.get(player_id)
        if player is None:
            return False
        player.input = clamp_input(data)
        return True

    def take_pickups(self, player, now):
        pickup = self.pellets.consume(player.cx, player.cy)
        player.score += pickup.score_delta
        if pickup.power_granted:
            player.power_until = now + POWER_DURATION_MS
        return pickup

    def advance(self, now):
        """One simulation step: move, pick up, then settle collisions."""
        self.server_time = now
        for player in self.slots:
            if player is None:
                continue
            step_player(player, now)
            self.take_pickups(player, now)
        resolve_collision(self, now, self.rng)

    def snapshot(self):
        """Plain-data copy of the match, safe to serialise and hand out."""
        state = {
            "users": {pid: p.to_dict() for pid, p in self.players.items()},
            "lastWinner": self.last_winner,
            "message": self.message,
            "serverTime": self.server_time,
        }
        state.update(self.pellets.to_dict())
        return state
