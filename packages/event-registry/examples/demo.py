"""Demo: wire a few listeners onto an emitter and fire some events.

Usage:
    python examples/demo.py [--debug] [--config event-registry.toml]
"""

from __future__ import annotations

import argparse
import logging

from event_registry import EmitterConfig, EventEmitter, MaxListenersExceededError

ORDER_PLACED = "order_placed"
ORDER_SHIPPED = "order_shipped"


def main() -> None:
    parser = argparse.ArgumentParser(description="Event registry demo")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help="TOML file with an [event-registry] table")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = EmitterConfig.from_toml(args.config) if args.config else EmitterConfig.from_env()
    emitter: EventEmitter[dict] = EventEmitter(config=config)

    # Set up event listeners
    emitter.on(ORDER_PLACED, lambda order: print(f"📋 Placed: {order['id']}"))
    emitter.prepend_listener(ORDER_PLACED, lambda order: print(f"🔎 Checking stock for {order['id']}"))
    emitter.once(ORDER_SHIPPED, lambda order: print(f"✅ First shipment: {order['id']}"))

    for order_id in ("A-1", "A-2"):
        emitter.emit(ORDER_PLACED, {"id": order_id})
        emitter.emit(ORDER_SHIPPED, {"id": order_id})

    print(f"Events: {emitter.event_names()}")
    print(f"{ORDER_SHIPPED} listeners left: {emitter.listener_count(ORDER_SHIPPED)}")

    # Keep adding until the leak check trips
    try:
        while True:
            emitter.on(ORDER_PLACED, lambda order: None)
    except MaxListenersExceededError as exc:
        print(f"Stopped at {exc.count} listeners: {exc}")


if __name__ == "__main__":
    main()
