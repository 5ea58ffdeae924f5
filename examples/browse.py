#!/usr/bin/env uv run
# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "hypernav",
# ]
#
# [tool.uv.sources]
# hypernav = { path = "../", editable = true }
# ///

import logging
import sys

import anyio

from hypernav import Client


async def main(bookmark: str) -> None:
    async with Client(bookmark) as client:
        home = client.get_resource()

        print(f"\n➡ Fetching {home.uri}...")
        representation = await home.representation()
        print(f"📄 Content-Type: {representation.content_type}")

        for link in representation.links:
            print(f"🔗 {link.rel}: {link.resolve() if not link.templated else link.href}")

        for uri in representation.embedded:
            print(f"📦 Embedded: {uri} (cached: {client.get_resource(uri).is_cached})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    args = [arg for arg in sys.argv[1:] if arg != "-v"]
    anyio.run(main, args[0] if args else "https://haltalk.herokuapp.com/")
