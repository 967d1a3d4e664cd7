"""
Detect double clicks from a stream of click timestamps.

Clicks arrive from a worker thread through emit_threadsafe(). Two clicks closer
than DOUBLE_CLICK_WINDOW seconds count as a double click.
"""

import asyncio
import threading
import time

from rill import Observable

DOUBLE_CLICK_WINDOW = 0.25


def fake_mouse(emit):
    def run():
        for gap in [0.1, 0.5, 0.1, 0.1, 0.6]:
            time.sleep(gap)
            emit(time.monotonic())

    threading.Thread(target=run, daemon=True).start()


async def main():
    loop = asyncio.get_running_loop()
    clicks = Observable(loop=loop)

    last = {"at": None}

    def gap_since_last(at):
        previous, last["at"] = last["at"], at
        return None if previous is None else at - previous

    double_clicks = (
        clicks.then(gap_since_last)
        & (lambda gap: gap is not None and gap < DOUBLE_CLICK_WINDOW)
    )
    double_clicks.subscribe(lambda gap: print(f"double click ({gap:.2f}s apart)"))

    fake_mouse(clicks.emit_threadsafe)
    await asyncio.sleep(2)


if __name__ == "__main__":
    asyncio.run(main())
