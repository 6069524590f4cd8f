"""Macro log operations composed from fetch, edit and commit."""

from dataclasses import dataclass

from macro_tracker.domain.macros import (
    EntryChanges,
    FoodEntry,
    MacroData,
    add_entry,
    delete_entry,
    update_entry,
)
from macro_tracker.services.documents import DocumentService


@dataclass
class MacroLogService:
    """Service that reads and edits the food log."""

    documents: DocumentService

    async def read(self) -> MacroData:
        """Return the current document."""
        data, _ = await self.documents.fetch()
        return data

    async def add_entry(self, date: str, entry: FoodEntry) -> FoodEntry:
        """Append a food entry to the given date."""
        data, version_tag = await self.documents.fetch()
        add_entry(data, date, entry)
        await self.documents.commit(
            data,
            version_tag,
            f"Add food entry: {entry.description} ({date} {entry.time})",
        )
        return entry

    async def update_entry(
        self, date: str, entry_index: int, changes: EntryChanges
    ) -> FoodEntry:
        """Overwrite selected fields of an entry."""
        data, version_tag = await self.documents.fetch()
        entry = update_entry(data, date, entry_index, changes)
        await self.documents.commit(
            data, version_tag, f"Update food entry: {entry.description} ({date})"
        )
        return entry

    async def delete_entry(self, date: str, entry_index: int) -> FoodEntry:
        """Remove an entry and return its prior values."""
        data, version_tag = await self.documents.fetch()
        entry = delete_entry(data, date, entry_index)
        await self.documents.commit(
            data, version_tag, f"Delete food entry: {entry.description} ({date})"
        )
        return entry
