# pellet_duel/smoke_client.py - Headless clients for poking a running server
import asyncio
import argparse
import json

import websockets

from .config import DEFAULT_PORT

SCRIPT = [
    {"right": True},
    {"down": True},
    {"left": True},
    {"up": True},
    {},
]


async def smoke_client(client_name, url, step_secs=0.3):
    """Connect, report what the server says, then walk through SCRIPT."""
    try:
        async with websockets.connect(url) as websocket:
            print(f"[{client_name}] Connected to server")
            my_id = None

            try:
                while my_id is None:
                    data = json.loads(await asyncio.wait_for(websocket.recv(), timeout=2.0))
                    if data.get("type") == "welcome":
                        my_id = data.get("id")
                        print(f"[{client_name}] Admitted as {my_id}")
                    elif data.get("type") == "full":
                        print(f"[{client_name}] Room full: {data.get('message')}")
                        return
            except asyncio.TimeoutError:
                print(f"[{client_name}] Timeout waiting for messages")
                return

            for keys in SCRIPT:
                await websocket.send(json.dumps({"type": "input", **keys}))
                await asyncio.sleep(step_secs)
                # Drain to the newest state frame
                state = None
                try:
                    while True:
                        data = json.loads(await asyncio.wait_for(websocket.recv(), timeout=0.01))
                        if data.get("type") == "state":
                            state = data
                except asyncio.TimeoutError:
                    pass
                if state:
                    me = state["users"].get(my_id, {})
                    print(f"[{client_name}] at ({me.get('cx')},{me.get('cy')}) score={me.get('score')} message={state.get('message')}")

    except (OSError, websockets.WebSocketException) as e:
        print(f"[{client_name}] Error: {e}")


async def run_clients(url, count):
    """Connect several clients at once; beyond two they should be turned away."""
    clients = [
        asyncio.create_task(smoke_client(f"Client{i + 1}", url))
        for i in range(count)
    ]
    try:
        await asyncio.wait_for(asyncio.gather(*clients), timeout=10)
    except asyncio.TimeoutError:
        print("Smoke run completed (timeout)")
    print("Smoke run finished")


def run():
    parser = argparse.ArgumentParser(description="Pellet duel smoke client")
    parser.add_argument("--url", default=f"ws://localhost:{DEFAULT_PORT}")
    parser.add_argument("--clients", type=int, default=3)
    args = parser.parse_args()
    print("Make sure the server is running first!")
    asyncio.run(run_clients(args.url, args.clients))


if __name__ == "__main__":
    run()
