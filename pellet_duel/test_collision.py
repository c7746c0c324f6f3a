import random

import pytest

from pellet_duel.collision import resolve_collision, steal_amount
from pellet_duel.config import POWER_HIT_MESSAGE, STUN_DURATION_MS
from pellet_duel.match import MatchState
from pellet_duel.pellets import PelletField

NOW = 50_000


def two_player_match(a_cell=(1, 1), b_cell=(1, 1)):
    match = MatchState(random.Random(7))
    match.pellets = PelletField()
    a = match.admit("a")
    b = match.admit("b")
    a.cx, a.cy = a_cell
    b.cx, b.cy = b_cell
    return match, a, b


@pytest.mark.parametrize("score, lost", [
    (0, 2), (1, 2), (2, 2), (3, 3), (9, 5), (12, 6), (100, 6),
])
def test_steal_amount(score, lost):
    assert steal_amount(score) == lost


def test_apart_clears_message():
    match, a, b = two_player_match(b_cell=(2, 1))
    match.message = POWER_HIT_MESSAGE
    match.last_winner = "a"
    assert resolve_collision(match, NOW) is None
    assert match.message is None
    assert match.last_winner is None


def test_single_player_is_noop():
    match = MatchState(random.Random(7))
    match.admit("a")
    match.message = POWER_HIT_MESSAGE
    match.last_winner = "a"
    assert resolve_collision(match, NOW) is None
    assert match.message == POWER_HIT_MESSAGE
    assert match.last_winner == "a"


@pytest.mark.parametrize("victim_score", [0, 2, 5, 9, 30])
def test_power_hit(victim_score):
    match, a, b = two_player_match()
    b.power_until = NOW + 1000
    a.score = victim_score
    b.score = 4

    assert resolve_collision(match, NOW, random.Random(1)) is b

    lost = steal_amount(victim_score)
    assert a.score == max(0, victim_score - lost)
    assert a.stunned_until == NOW + STUN_DURATION_MS
    assert b.score == 4
    assert b.stunned_until == 0
    assert match.message == POWER_HIT_MESSAGE
    assert match.last_winner == "b"
    assert match.pellets.remaining() == min(lost, 7)


def test_first_slot_can_attack():
    match, a, b = two_player_match()
    a.power_until = NOW + 1
    b.score = 3
    assert resolve_collision(match, NOW) is a
    assert b.score == 0
    assert match.last_winner == "a"


@pytest.mark.parametrize("a_power, b_power", [(False, False), (True, True)])
def test_neutral_overlap(a_power, b_power):
    match, a, b = two_player_match()
    a.score, b.score = 9, 9
    if a_power:
        a.power_until = NOW + 500
    if b_power:
        b.power_until = NOW + 500
    match.message = POWER_HIT_MESSAGE
    match.last_winner = "a"

    assert resolve_collision(match, NOW) is None
    assert (a.score, b.score) == (9, 9)
    assert a.stunned_until == b.stunned_until == 0
    assert match.pellets.remaining() == 0
    assert match.message is None
    assert match.last_winner is None


def test_expired_power_does_not_count():
    match, a, b = two_player_match()
    b.power_until = NOW
    a.score = 9
    assert resolve_collision(match, NOW) is None
    assert a.score == 9
