# pellet_duel/game_room.py - The single two-player room and its tick loop
import asyncio
import time

import websockets

from .config import MAX_PLAYERS, TICK_MS
from .match import MatchState
from .protocol import encode, full_message, state_message, welcome_message


def wall_clock_ms():
    return int(time.time() * 1000)


class GameRoom:
    """Owns the match and the broadcast group.

    Everything runs on one event loop. Mutations (admission, departure,
    input, tick) happen without awaiting in between, so a tick never sees
    half of one.
    """

    MAX_PLAYERS = MAX_PLAYERS

    def __init__(self, clock=wall_clock_ms, rng=None):
        self.clock = clock
        self.match = MatchState(rng)
        self.clients = {}  # websocket -> player id
        self.game_tick = 0
        self.running = False
        self.game_loop_task = None
        self.created_at = time.time()
        self._send_in_flight = {}

    def is_full(self):
        """Check if room is at maximum capacity"""
        return self.match.is_full()

    def is_empty(self):
        """Check if room has no players"""
        return self.match.is_empty()

    def player_for(self, websocket):
        player_id = self.clients.get(websocket)
        if player_id is None:
            return None
        return self.match.players.get(player_id)

    async def add_player(self, websocket):
        """Admit a connection. Returns the new player, or None if the room is full."""
        if websocket in self.clients:
            return self.player_for(websocket)

        player = self.match.admit()
        if player is None:
            print("[ROOM] Room is full, rejecting connection")
            await self._send(websocket, encode(full_message()))
            return None

        self.clients[websocket] = player.id
        print(f"[ROOM] Player {player.id} joined slot {player.slot} at ({player.cx},{player.cy})")
        print(f"[ROOM] Room now has {len(self.match.players)} players")

        self.match.server_time = self.clock()
        await self._send(websocket, encode(welcome_message(player.id)))

        # Start game loop if this is the first player
        if not self.running:
            self.start()

        await self._broadcast_game_state()
        return player

    async def remove_player(self, websocket):
        """Remove a connection's player; the match starts over once nobody is left."""
        player_id = self.clients.pop(websocket, None)
        self._send_in_flight.pop(websocket, None)
        if player_id is None:
            return

        reset = self.match.remove(player_id)
        print(f"[ROOM] Player {player_id} left, {len(self.match.players)} remaining")
        if reset:
            print("[ROOM] Room empty, match reset")
            self.stop()

        self.match.server_time = self.clock()
        await self._broadcast_game_state()

    async def handle_input(self, websocket, payload):
        """Store the held keys for this connection's player; no-op for unknown connections."""
        player_id = self.clients.get(websocket)
        if player_id is None:
            return False
        return self.match.set_input(player_id, payload)

    def tick(self):
        """Advance the simulation by one step and return the state frame."""
        self.game_tick += 1
        self.match.advance(self.clock())
        return encode(state_message(self.match.snapshot()))

    def start(self):
        if self.running:
            return
        self.running = True
        self.game_loop_task = asyncio.create_task(self._game_loop())
        print("[ROOM] Tick loop started")

    def stop(self):
        if not self.running:
            return
        self.running = False
        if self.game_loop_task and self.game_loop_task is not asyncio.current_task():
            self.game_loop_task.cancel()
        self.game_loop_task = None
        print("[ROOM] Tick loop stopped")

    def get_room_stats(self):
        return {
            "players": len(self.match.players),
            "max_players": self.MAX_PLAYERS,
            "is_full": self.is_full(),
            "is_empty": self.is_empty(),
            "running": self.running,
            "created_at": self.created_at,
            "game_tick": self.game_tick,
        }

    async def _send(self, websocket, payload):
        try:
            await websocket.send(payload)
        except websockets.ConnectionClosed:
            pass

    async def _broadcast_game_state(self, payload=None):
        """Send the state frame to every admitted connection"""
        if payload is None:
            payload = encode(state_message(self.match.snapshot()))

        async def _send_one(ws):
            try:
                await ws.send(payload)
            except websockets.ConnectionClosed:
                # The connection handler runs the departure
                pass
            finally:
                self._send_in_flight.pop(ws, None)

        for ws in list(self.clients):
            # Coalesce: if a previous send to this ws is still in flight, skip this frame for that ws
            inflight = self._send_in_flight.get(ws)
            if inflight and not inflight.done():
                continue
            self._send_in_flight[ws] = asyncio.create_task(_send_one(ws))

    async def _game_loop(self):
        """Main game loop: one step every TICK_MS"""
        loop = asyncio.get_running_loop()
        period = TICK_MS / 1000.0
        try:
            while self.running and not self.is_empty():
                started = loop.time()
                payload = self.tick()
                await self._broadcast_game_state(payload)
                await asyncio.sleep(max(0.0, period - (loop.time() - started)))
        except asyncio.CancelledError:
            pass
        finally:
            # A cancelled loop must not clobber one started after it
            if self.game_loop_task is asyncio.current_task():
                self.running = False
                self.game_loop_task = None
