# pellet_duel/collision.py - Player vs player overlap and power hits
from .config import (
    POWER_HIT_MESSAGE,
    STEAL_BASE,
    STEAL_CAP,
    STEAL_DIVISOR,
    STUN_DURATION_MS,
)


def steal_amount(score):
    """Points a victim with `score` loses to a power hit."""
    return min(STEAL_CAP, score // STEAL_DIVISOR + STEAL_BASE)


def apply_power_hit(attacker, victim, pellets, now, rng=None):
    """Knock points off the victim, stun it and scatter the loss around it."""
    lost = steal_amount(victim.score)
    victim.score = max(0, victim.score - lost)
    victim.stunned_until = now + STUN_DURATION_MS
    pellets.scatter(victim.cx, victim.cy, lost, rng)
    return lost


def resolve_collision(match, now, rng=None):
    """Settle the two players sharing a cell, if they do.

    Does nothing unless both slots are filled. Otherwise the message and
    last winner are cleared on every call that does not end in a power hit.
    Returns the attacker on a power hit, else None.
    """
    a, b = match.slots
    if a is None or b is None:
        return None

    if (a.cx, a.cy) != (b.cx, b.cy):
        match.clear_message()
        return None

    a_power = a.is_powered(now)
    b_power = b.is_powered(now)
    if a_power == b_power:
        match.clear_message()
        return None

    attacker, victim = (a, b) if a_power else (b, a)
    apply_power_hit(attacker, victim, match.pellets, now, rng)
    match.message = POWER_HIT_MESSAGE
    match.last_winner = attacker.id
    return attacker
