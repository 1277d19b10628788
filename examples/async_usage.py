"""Searching from async code.

resolve() and find_up() mirror find_tiered() and find_one() but await
each existence check in a worker thread, so the event loop stays free.
"""

import anyio

from tierfind import find_up, resolve


async def main() -> None:
    best = await find_up(["pyproject.toml", "setup.cfg"])
    print(f"Best: {best.path if best else 'none'}")

    every = await resolve([["tox.ini", "noxfile.py"], ".pre-commit-config.yaml"])
    for found in every:
        print(f"{found.priority_score} {found.depth} {found.path}")


anyio.run(main)
