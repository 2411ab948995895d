"""Hello World -- the simplest possible tick-timer loop.

Demonstrates:
- Creating a scheduler with a fixed update rate and unlimited rendering
- Draining due updates, rendering, and yielding once per iteration
- Reading the captured rates each time the one-second window closes

Run: python -m examples.basics
"""

import logging

from tick_timer import TickScheduler

WINDOWS = 3


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    print("=== Hello World ===\n")

    # 10 updates per second, render on every poll.
    scheduler = TickScheduler(10)

    windows = 0
    step = 0
    while windows < WINDOWS:
        if scheduler.is_window_elapsed():
            windows += 1
            print(
                f"  second {windows}  |  ups={scheduler.captured_update_rate}"
                f"  |  fps={scheduler.captured_render_rate}"
            )

        while scheduler.is_update_due():
            step += 1

        # A real loop would draw here.
        scheduler.is_render_due()

        # Unlimited rendering never sleeps, so this is a no-op here.
        scheduler.yield_cpu()

    print(f"\nDone. Ran {step} updates.")


if __name__ == "__main__":
    main()
