"""Tool declarations and dispatch for the macro tracker."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from mcp import types
from pydantic import ValidationError

from macro_tracker.api.tool_models import (
    AddFoodEntryInput,
    DeleteFoodEntryInput,
    ReadMacroDataInput,
    ToolInput,
    UpdateFoodEntryInput,
)
from macro_tracker.domain.codec import render_document
from macro_tracker.domain.errors import InvalidInputError, MacroTrackerError
from macro_tracker.domain.macros import EntryChanges, FoodEntry
from macro_tracker.services.macro_log import MacroLogService

READ_MACRO_DATA = "read_macro_data"
ADD_FOOD_ENTRY = "add_food_entry"
UPDATE_FOOD_ENTRY = "update_food_entry"
DELETE_FOOD_ENTRY = "delete_food_entry"

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    """Declared contract of one tool."""

    name: str
    title: str
    description: str
    input_model: type[ToolInput]
    annotations: types.ToolAnnotations
    action: str


@dataclass(frozen=True)
class ToolOutcome:
    """Result of a tool invocation in text and structured form."""

    text: str
    structured: dict[str, object] | None = None
    is_error: bool = False


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name=READ_MACRO_DATA,
        title="Read Macro Tracker Data",
        description=(
            "Read the current contents of the macro tracking file from the "
            "GitHub repository.\n\n"
            "Returns the complete macro tracking data including goals and all "
            "food entries.\n\n"
            "This is useful to check current data before adding, updating, or "
            "deleting entries."
        ),
        input_model=ReadMacroDataInput,
        annotations=types.ToolAnnotations(
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
        action="reading data",
    ),
    ToolSpec(
        name=ADD_FOOD_ENTRY,
        title="Add Food Entry",
        description=(
            "Add a new food entry to the macro tracker.\n\n"
            "Creates a new entry with the specified date, time, description, "
            "calories, and protein. If the date doesn't exist in the log, it "
            "will be created automatically. Changes are committed to GitHub.\n\n"
            "Args:\n"
            "  - date (string): Date in YYYY-MM-DD format\n"
            "  - time (string): Time in HH:MM format (24-hour)\n"
            "  - description (string): What was eaten\n"
            "  - calories (number): Total calories\n"
            "  - protein (number): Total protein in grams\n\n"
            "Returns:\n"
            "  Success message with the added entry details\n\n"
            "Example:\n"
            '  date: "2025-11-29"\n'
            '  time: "14:30"\n'
            '  description: "Grilled chicken breast with rice"\n'
            "  calories: 450\n"
            "  protein: 35"
        ),
        input_model=AddFoodEntryInput,
        annotations=types.ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=False,
            openWorldHint=False,
        ),
        action="adding food entry",
    ),
    ToolSpec(
        name=UPDATE_FOOD_ENTRY,
        title="Update Food Entry",
        description=(
            "Update an existing food entry.\n\n"
            "Modifies one or more fields of an existing entry. Only the fields "
            "you specify will be updated. Changes are committed to GitHub.\n\n"
            "Args:\n"
            "  - date (string): Date in YYYY-MM-DD format\n"
            "  - entryIndex (number): Index of the entry to update (0-based, "
            "use read_macro_data to see indices)\n"
            "  - time (string, optional): New time in HH:MM format\n"
            "  - description (string, optional): New description\n"
            "  - calories (number, optional): New calories value\n"
            "  - protein (number, optional): New protein value\n\n"
            "Returns:\n"
            "  Success message with updated entry details\n\n"
            "Example:\n"
            '  date: "2025-11-29"\n'
            "  entryIndex: 0\n"
            "  calories: 500\n"
            "  protein: 30"
        ),
        input_model=UpdateFoodEntryInput,
        annotations=types.ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=False,
            openWorldHint=False,
        ),
        action="updating food entry",
    ),
    ToolSpec(
        name=DELETE_FOOD_ENTRY,
        title="Delete Food Entry",
        description=(
            "Delete an existing food entry.\n\n"
            "Removes an entry from the specified date. If this is the last "
            "entry for that date, the entire day will be removed from the log. "
            "Changes are committed to GitHub.\n\n"
            "Args:\n"
            "  - date (string): Date in YYYY-MM-DD format\n"
            "  - entryIndex (number): Index of the entry to delete (0-based, "
            "use read_macro_data to see indices)\n\n"
            "Returns:\n"
            "  Success message with deleted entry details\n\n"
            "Example:\n"
            '  date: "2025-11-29"\n'
            "  entryIndex: 0"
        ),
        input_model=DeleteFoodEntryInput,
        annotations=types.ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=False,
            openWorldHint=False,
        ),
        action="deleting food entry",
    ),
)

_SPECS_BY_NAME = {spec.name: spec for spec in TOOL_SPECS}


@dataclass
class MacroTools:
    """Validates tool arguments and dispatches to the macro log service."""

    macro_log: MacroLogService

    def list_tools(self) -> list[types.Tool]:
        """Return the MCP declarations of all tools."""
        return [
            types.Tool(
                name=spec.name,
                title=spec.title,
                description=spec.description,
                inputSchema=spec.input_model.model_json_schema(),
                annotations=spec.annotations,
            )
            for spec in TOOL_SPECS
        ]

    async def call(self, name: str, arguments: dict[str, object] | None) -> ToolOutcome:
        """Invoke a tool; failures are returned as error outcomes."""
        spec = _SPECS_BY_NAME.get(name)
        if spec is None:
            return ToolOutcome(text=f"Unknown tool: {name}", is_error=True)
        handlers: dict[str, Callable[..., Awaitable[ToolOutcome]]] = {
            READ_MACRO_DATA: self._read_macro_data,
            ADD_FOOD_ENTRY: self._add_food_entry,
            UPDATE_FOOD_ENTRY: self._update_food_entry,
            DELETE_FOOD_ENTRY: self._delete_food_entry,
        }
        try:
            params = _validate_arguments(spec, arguments or {})
            return await handlers[name](params)
        except MacroTrackerError as exc:
            _logger.warning("Tool %s failed: %s", name, exc)
            return ToolOutcome(text=f"Error {spec.action}: {exc}", is_error=True)
        except Exception as exc:
            _logger.exception("Unexpected failure in tool %s", name)
            return ToolOutcome(text=f"Error {spec.action}: {exc}", is_error=True)

    async def _read_macro_data(self, params: ReadMacroDataInput) -> ToolOutcome:
        data = await self.macro_log.read()
        return ToolOutcome(
            text=f"Current macro tracking data:\n\n{render_document(data)}",
            structured=data.model_dump(mode="json"),
        )

    async def _add_food_entry(self, params: AddFoodEntryInput) -> ToolOutcome:
        entry = await self.macro_log.add_entry(
            params.date,
            FoodEntry(
                time=params.time,
                description=params.description,
                calories=params.calories,
                protein=params.protein,
            ),
        )
        text = "\n".join(
            [
                "Successfully added food entry!",
                "",
                f"Date: {params.date}",
                f"Time: {entry.time}",
                f"Description: {entry.description}",
                f"Calories: {entry.calories}",
                f"Protein: {_format_grams(entry.protein)}g",
                "",
                "Committed to GitHub.",
            ]
        )
        return ToolOutcome(
            text=text,
            structured={
                "success": True,
                "entry": entry.model_dump(mode="json"),
                "date": params.date,
            },
        )

    async def _update_food_entry(self, params: UpdateFoodEntryInput) -> ToolOutcome:
        entry = await self.macro_log.update_entry(
            params.date,
            params.entryIndex,
            EntryChanges(
                time=params.time,
                description=params.description,
                calories=params.calories,
                protein=params.protein,
            ),
        )
        return ToolOutcome(
            text=_format_entry_change(
                "Successfully updated entry!",
                "Updated Entry",
                params.date,
                params.entryIndex,
                entry,
            ),
            structured={
                "success": True,
                "entry": entry.model_dump(mode="json"),
                "date": params.date,
                "entryIndex": params.entryIndex,
            },
        )

    async def _delete_food_entry(self, params: DeleteFoodEntryInput) -> ToolOutcome:
        entry = await self.macro_log.delete_entry(params.date, params.entryIndex)
        return ToolOutcome(
            text=_format_entry_change(
                "Successfully deleted entry!",
                "Deleted Entry",
                params.date,
                params.entryIndex,
                entry,
            ),
            structured={
                "success": True,
                "deletedEntry": entry.model_dump(mode="json"),
                "date": params.date,
                "entryIndex": params.entryIndex,
            },
        )


def _validate_arguments(spec: ToolSpec, arguments: dict[str, object]) -> ToolInput:
    try:
        return spec.input_model.model_validate(arguments)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: "
            f"{error['msg']}"
            for error in exc.errors()
        )
        message = f"Invalid arguments for {spec.name}: {problems}"
        raise InvalidInputError(message) from exc


def _format_entry_change(
    headline: str, label: str, date: str, entry_index: int, entry: FoodEntry
) -> str:
    return "\n".join(
        [
            headline,
            "",
            f"Date: {date}",
            f"Entry Index: {entry_index}",
            f"{label}:",
            f"  Time: {entry.time}",
            f"  Description: {entry.description}",
            f"  Calories: {entry.calories}",
            f"  Protein: {_format_grams(entry.protein)}g",
            "",
            "Committed to GitHub.",
        ]
    )


def _format_grams(value: int | float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
