"""Entry point kept minimal by delegating to Engine.

Run from the repository root so the ./assets/ paths resolve.
"""

from core.engine import Engine  # noqa: E402 (local import order)


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
