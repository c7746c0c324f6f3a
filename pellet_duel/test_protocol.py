import json

import pytest

from pellet_duel.protocol import (
    decode,
    encode,
    full_message,
    input_payload,
    state_message,
    welcome_message,
)


def test_encode_decode():
    assert decode(encode({"type": "input", "up": True})) == {"type": "input", "up": True}


def test_decode_rejects_garbage():
    with pytest.raises(json.JSONDecodeError):
        decode("not json")


def test_outbound_frames():
    assert full_message()["type"] == "full"
    assert welcome_message("abc") == {"type": "welcome", "id": "abc"}
    frame = state_message({"users": {}, "message": None})
    assert frame == {"type": "state", "users": {}, "message": None}


def test_input_payload_flat_and_nested():
    flat = {"type": "input", "left": True}
    assert input_payload(flat) is flat
    assert input_payload({"type": "input", "input": {"up": 1}}) == {"up": 1}


def test_input_payload_ignores_other_frames():
    assert input_payload({"type": "chat", "up": True}) is None
    assert input_payload([1, 2, 3]) is None
    assert input_payload("input") is None
