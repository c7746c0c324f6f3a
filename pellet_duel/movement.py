# pellet_duel/movement.py - Grid stepping from buffered input
from .config import MOVE_COOLDOWN_MS
from .grid import DOWN, LEFT, RIGHT, UP, is_wall

# Checked in this order; the first held key wins
PRIORITY = (("left", LEFT), ("right", RIGHT), ("up", UP), ("down", DOWN))


def resolve_direction(keys):
    """Pick one offset from the held keys, or None when nothing is held."""
    for name, offset in PRIORITY:
        if keys.get(name):
            return offset
    return None


def step_player(player, now):
    """Advance a player by at most one cell. Returns True if it moved."""
    if player.is_stunned(now):
        return False
    if now - player.last_move_at < MOVE_COOLDOWN_MS:
        return False

    offset = resolve_direction(player.input)
    if offset is None:
        return False

    nx, ny = player.cx + offset[0], player.cy + offset[1]
    if is_wall(nx, ny):
        return False

    player.cx, player.cy = nx, ny
    player.dir = offset
    player.last_move_at = now
    return True
