# pellet_duel/main.py - WebSocket server for the two-player pellet duel
import asyncio
import argparse

import websockets

from .config import DEFAULT_HOST, DEFAULT_PORT, MAX_PLAYERS, STATUS_INTERVAL_SECS
from .game_room import GameRoom
from .protocol import decode, input_payload

room = GameRoom()


async def handle_client(websocket, path=None):
    """Handle one connection for its whole lifetime.

    A connection that finds the room full gets a "full" frame and stays
    open, but nothing it sends is applied.
    Compatible with websockets versions that pass either (websocket) or (websocket, path).
    """
    print("[SVR] Client connected")

    try:
        player = await room.add_player(websocket)

        async for message in websocket:
            if player is None:
                continue
            try:
                payload = input_payload(decode(message))
            except (ValueError, RecursionError) as e:
                # ValueError covers bad JSON and undecodable binary frames
                print(f"[SVR] Invalid frame received from client: {type(e).__name__}")
                continue
            if payload is not None:
                await room.handle_input(websocket, payload)

    except websockets.ConnectionClosedOK:
        print("[SVR] Client disconnected normally")
    except websockets.ConnectionClosedError as e:
        print(f"[SVR] Client disconnected with error: {e}")
    finally:
        await room.remove_player(websocket)
        print("[SVR] Client connection cleaned up")


async def status_reporter(interval: float = STATUS_INTERVAL_SECS):
    """Periodically report server status"""
    try:
        while True:
            await asyncio.sleep(interval)
            stats = room.get_room_stats()
            if stats["players"] > 0:
                print("=== SERVER STATUS ===")
                print(f"Players: {stats['players']}/{stats['max_players']}")
                print(f"Tick: {stats['game_tick']}  Running: {stats['running']}")
                print("====================")
    except asyncio.CancelledError:
        pass


async def main(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT):
    """Main server function"""
    print("Pellet Duel Server")
    print("==================")
    print(f"- Max {MAX_PLAYERS} players, match resets when the room empties")

    status_task = asyncio.create_task(status_reporter())

    try:
        async with websockets.serve(handle_client, host, port):
            print(f"\nServer running on ws://{host}:{port}")
            print("Press Ctrl+C to stop the server\n")

            # Keep the server running
            await asyncio.Event().wait()
    finally:
        status_task.cancel()
        room.stop()
        print("Server stopped")


def run():
    parser = argparse.ArgumentParser(description="Two-player pellet duel server")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Interface to bind the game server on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to bind the game server on")
    args = parser.parse_args()
    try:
        asyncio.run(main(host=args.host, port=args.port))
    except KeyboardInterrupt:
        print("\nServer stopped")


if __name__ == "__main__":
    run()
