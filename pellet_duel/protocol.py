# pellet_duel/protocol.py - JSON frames exchanged with clients
import json

from .config import FULL_MESSAGE


def encode(msg: dict) -> str:
    """Convert a Python dict to a JSON string."""
    return json.dumps(msg)


def decode(text: str) -> dict:
    """Convert a JSON string back to a Python dict.

    Raises json.JSONDecodeError on text that is not JSON.
    """
    return json.loads(text)


def state_message(snapshot: dict) -> dict:
    return {"type": "state", **snapshot}


def full_message() -> dict:
    return {"type": "full", "message": FULL_MESSAGE}


def welcome_message(player_id) -> dict:
    return {"type": "welcome", "id": player_id}


def input_payload(msg):
    """The key flags carried by an input frame, or None if it is some other frame.

    Accepts both {"type": "input", "up": true, ...} and
    {"type": "input", "input": {"up": true, ...}}.
    """
    if not isinstance(msg, dict) or msg.get("type") != "input":
        return None
    nested = msg.get("input")
    if isinstance(nested, dict):
        return nested
    return msg
