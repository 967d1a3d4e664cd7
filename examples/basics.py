import asyncio

from rill import Observable, never, rejected


async def main():
    loop = asyncio.get_running_loop()

    # ------------------------------------------------------------------------------------------------

    print()
    print("=" * 100)
    print("Emitting into an observable")
    print("-" * 100)
    print()

    # An observable is like a future you can resolve again and again.
    linear = Observable()

    # Subscribing creates a child observable, like then() on a future.
    negated = linear.subscribe(lambda x: -x)
    negated.subscribe(lambda x: print(f"negated: {x}"))

    linear.emit(1)
    linear.emit(2)
    await asyncio.sleep(0)

    # ------------------------------------------------------------------------------------------------

    print()
    print("=" * 100)
    print("Async transforms")
    print("-" * 100)
    print()

    # Transforms may be async. Grandchildren wait; emit() does not.
    async def quad(x):
        await asyncio.sleep(0.1)
        return x * x

    squares = linear.subscribe(quad)
    squares.subscribe(
        lambda value: print(f"square: {value}"),
        lambda reason: print(f"square failed: {reason}"),
    )

    linear.emit(3)
    await asyncio.sleep(0.2)

    # ------------------------------------------------------------------------------------------------

    print()
    print("=" * 100)
    print("Errors")
    print("-" * 100)
    print()

    # Emit a failed future to send an error down the tree.
    linear.emit(rejected(ValueError("reason"), loop))
    await asyncio.sleep(0.2)

    # ------------------------------------------------------------------------------------------------

    print()
    print("=" * 100)
    print("Filtering with a future that never settles")
    print("-" * 100)
    print()

    def only_even(x):
        return x if x % 2 == 0 else never()

    linear.subscribe(only_even).subscribe(lambda x: print(f"even: {x}"))

    for i in range(5):
        linear.emit(i)
    await asyncio.sleep(0.2)

    # ------------------------------------------------------------------------------------------------

    print()
    print("=" * 100)
    print("Unsubscribing")
    print("-" * 100)
    print()

    squares.unsubscribe()
    linear.emit(10)  # No square is printed for this one
    await asyncio.sleep(0.2)

    # Drop every subscriber at once.
    linear.subscribers = []


if __name__ == "__main__":
    asyncio.run(main())
