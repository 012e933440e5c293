#!/usr/bin/env python3
"""
Operator console.
Usage: python -m lex_event_hub.cli {seed|import|list}
  seed   - insert the demo events when the table is empty
  import - persist the current live aggregate (skips known title+date pairs)
  list   - print the stored events
"""
import argparse
import asyncio

from lex_event_hub.core.database import AsyncSessionLocal, init_db
from lex_event_hub.core.logger import log
from lex_event_hub.services.manager import EventManager
from lex_event_hub.services.storage import EventStorage


async def seed() -> int:
    async with AsyncSessionLocal() as session:
        return await EventStorage(session).seed_if_empty()


async def import_live() -> int:
    async with AsyncSessionLocal() as session:
        return await EventManager().persist_all(EventStorage(session))


async def list_stored() -> int:
    async with AsyncSessionLocal() as session:
        events = await EventStorage(session).list_events()

    print("\n" + "=" * 50)
    print(f" 📊 UPCOMING STORED EVENTS: {len(events)}")
    print("=" * 50 + "\n")

    for ev in events:
        print(f"🟢 EVENT [{ev.id}]")
        print(f"   Title    : {ev.title}")
        print(f"   When     : {ev.start_time:%Y-%m-%d %H:%M}")
        print(f"   Where    : {ev.location or 'TBA'}")
        print(f"   Category : {ev.category}{' (free)' if ev.is_free else ''}")
        print("-" * 50)
    return len(events)


COMMANDS = {
    "seed": seed,
    "import": import_live,
    "list": list_stored,
}


async def run(command: str) -> int:
    await init_db()
    try:
        total = await COMMANDS[command]()
    except Exception as e:
        log.error(f"❌ Command '{command}' failed: {e}")
        raise
    log.info(f"✨ '{command}' finished: {total} events.")
    return total


def main(argv=None):
    parser = argparse.ArgumentParser(description="Lexington Event Hub operator console")
    parser.add_argument("command", choices=sorted(COMMANDS))
    args = parser.parse_args(argv)
    asyncio.run(run(args.command))


if __name__ == "__main__":
    main()
