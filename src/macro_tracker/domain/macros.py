"""Macro log document model and in-memory edits."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from macro_tracker.domain.errors import EntryNotFoundError, IndexOutOfRangeError


class FoodEntry(BaseModel):
    """One logged food intake."""

    model_config = ConfigDict(extra="allow")

    time: str
    description: str
    calories: int
    protein: int | float


class DayLog(BaseModel):
    """All entries logged for one calendar date."""

    model_config = ConfigDict(extra="allow")

    date: str
    entries: list[FoodEntry]


class MacroGoals(BaseModel):
    """Daily calorie and protein targets."""

    model_config = ConfigDict(extra="allow")

    calories: int
    protein: int | float


class MacroData(BaseModel):
    """Root document stored in the repository."""

    model_config = ConfigDict(extra="allow")

    goals: MacroGoals
    log: list[DayLog]


@dataclass(frozen=True)
class EntryChanges:
    """Fields to overwrite on an existing entry; None leaves a field as is."""

    time: str | None = None
    description: str | None = None
    calories: int | None = None
    protein: int | float | None = None


def find_day(data: MacroData, date: str) -> DayLog | None:
    """Return the day log for an exact date match."""
    for day in data.log:
        if day.date == date:
            return day
    return None


def add_entry(data: MacroData, date: str, entry: FoodEntry) -> None:
    """Append an entry, creating the day log when the date is new.

    Entries keep append order within a day. A new day triggers a re-sort of the
    log, newest date first; dates are fixed-width so string order is date order.
    """
    day = find_day(data, date)
    if day is not None:
        day.entries.append(entry)
        return
    data.log.append(DayLog(date=date, entries=[entry]))
    data.log.sort(key=lambda item: item.date, reverse=True)


def update_entry(
    data: MacroData, date: str, entry_index: int, changes: EntryChanges
) -> FoodEntry:
    """Overwrite the supplied fields of an entry in place and return it."""
    _, entry = _locate_entry(data, date, entry_index)
    if changes.time is not None:
        entry.time = changes.time
    if changes.description is not None:
        entry.description = changes.description
    if changes.calories is not None:
        entry.calories = changes.calories
    if changes.protein is not None:
        entry.protein = changes.protein
    return entry


def delete_entry(data: MacroData, date: str, entry_index: int) -> FoodEntry:
    """Remove an entry and drop its day log once empty; return the entry."""
    day, entry = _locate_entry(data, date, entry_index)
    del day.entries[entry_index]
    if not day.entries:
        data.log = [item for item in data.log if item is not day]
    return entry


def _locate_entry(
    data: MacroData, date: str, entry_index: int
) -> tuple[DayLog, FoodEntry]:
    day = find_day(data, date)
    if day is None:
        raise EntryNotFoundError(f"No entries found for date {date}")
    if entry_index < 0 or entry_index >= len(day.entries):
        raise IndexOutOfRangeError(
            f"Entry index {entry_index} is out of range. "
            f"Day has {len(day.entries)} entries."
        )
    return day, day.entries[entry_index]
