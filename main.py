"""
Observable demo
Wire an emitter, subscribe a printing listener and emit one event.
Usage:
    python main.py
    python main.py --event data --arg 1 --arg 2
    python main.py --trace --debug
"""

import argparse
import logging
import sys
from typing import List, Optional

from Observable.Events.event_emitter import ADD_LISTENER_EVENT, REMOVE_LISTENER_EVENT, EventEmitter
from Observable.Utility.env import load_env_file

logger = logging.getLogger(__name__)


def build_emitter(trace: bool = False) -> EventEmitter:
    """Create the demo emitter, optionally logging every registry change."""
    emitter = EventEmitter()
    if trace:
        emitter.on(ADD_LISTENER_EVENT, lambda event: logger.info("listener added: %s", event))
        emitter.on(REMOVE_LISTENER_EVENT, lambda event: logger.info("listener removed: %s", event))
    return emitter


def run(event: str, args: List[str], trace: bool = False) -> List[tuple]:
    received: List[tuple] = []
    emitter = build_emitter(trace)
    emitter.once(event, lambda *values: received.append(values))
    emitter.emit(event, *args)
    # once listener is gone, this one reaches nobody
    emitter.emit(event, *args)
    return received


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the demo."""
    parser = argparse.ArgumentParser(
        description="Observable event emitter demo",
        epilog="""
            Examples:
            python main.py                          # Emit 'ping' with no arguments
            python main.py --event data --arg 1     # Emit 'data' with one argument
            python main.py --trace                  # Log listener add/remove meta events
        """
    )
    parser.add_argument(
        '--event',
        default='ping',
        help='Event name to emit (default: ping)'
    )
    parser.add_argument(
        '--arg',
        action='append',
        default=[],
        help='Argument passed to listeners, repeatable'
    )
    parser.add_argument(
        '--trace',
        action='store_true',
        help='Log _addListener/_removeListener meta events'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    load_env_file()

    try:
        received = run(args.event, args.arg, trace=args.trace)
    except ValueError as e:
        print(f"\nError: {e}")
        return 1

    for values in received:
        print(f"{args.event} received {list(values)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
