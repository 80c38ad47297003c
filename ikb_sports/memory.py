"""Memory store interface and the recorder that writes fetched games to it."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .exceptions import MemoryStoreError
from .logging import logger
from .models import GameRecord, MemoryContent, MemoryRecord, Sport


@runtime_checkable
class MemoryStore(Protocol):
    """Capability supplied by the host runtime for durable memories."""

    async def create_memory(self, record: MemoryRecord, *, embed: bool = False) -> bool:
        """Persist a record, returning False if the store rejected it."""
        ...


class InMemoryMemoryStore:
    """Process-local MemoryStore, used by the CLI and in tests."""

    def __init__(self) -> None:
        self.records: list[MemoryRecord] = []
        self.embedded: list[bool] = []

    async def create_memory(self, record: MemoryRecord, *, embed: bool = False) -> bool:
        self.records.append(record)
        self.embedded.append(embed)
        return True


def build_memory_record(sport: Sport, date: str, games: list[GameRecord]) -> MemoryRecord:
    return MemoryRecord(
        content=MemoryContent(
            text=f"{sport} game data for {date}",
            sport=sport,
            date=date,
            data=list(games),
        )
    )


class MemoryRecorder:
    def __init__(self, store: MemoryStore) -> None:
        self.store = store

    async def record(self, sport: Sport, date: str, games: list[GameRecord]) -> MemoryRecord:
        """Store the games for (sport, date) with embedding requested.

        Raises MemoryStoreError if the store raises or reports failure.
        """
        memory = build_memory_record(sport, date, games)
        try:
            stored = await self.store.create_memory(memory, embed=True)
        except MemoryStoreError:
            raise
        except Exception as exc:
            logger.error("ikb_memory_store_error", sport=sport, date=date, error=str(exc))
            raise MemoryStoreError(f"Failed to store {sport} game data for {date}: {exc}") from exc

        if stored is False:
            logger.error("ikb_memory_store_rejected", sport=sport, date=date)
            raise MemoryStoreError(f"Memory store rejected {sport} game data for {date}")

        logger.info("ikb_memory_stored", sport=sport, date=date, games=len(games))
        return memory
