"""Pydantic input models for the macro tracker tools."""

from typing import Annotated

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    StringConstraints,
)


def _whole_number(value: object) -> object:
    # JSON clients may send 5.0 for an integer field.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


DateText = Annotated[str, StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$")]
TimeText = Annotated[str, StringConstraints(pattern=r"^\d{2}:\d{2}$")]
DescriptionText = Annotated[str, StringConstraints(min_length=1, max_length=500)]
Calories = Annotated[NonNegativeInt, BeforeValidator(_whole_number)]
Protein = NonNegativeInt | NonNegativeFloat
EntryIndex = Annotated[NonNegativeInt, BeforeValidator(_whole_number)]


class ToolInput(BaseModel):
    """Base for tool inputs: unknown fields and numeric strings are rejected."""

    model_config = ConfigDict(extra="forbid", strict=True)


class ReadMacroDataInput(ToolInput):
    """Input for reading the document; takes no arguments."""


class AddFoodEntryInput(ToolInput):
    """Input for adding a food entry."""

    date: DateText = Field(description="Date in YYYY-MM-DD format")
    time: TimeText = Field(description="Time in HH:MM format (24-hour)")
    description: DescriptionText = Field(description="Description of the food eaten")
    calories: Calories = Field(description="Total calories for this entry")
    protein: Protein = Field(description="Total protein in grams for this entry")


class UpdateFoodEntryInput(ToolInput):
    """Input for updating a food entry; omitted fields keep their values."""

    date: DateText = Field(description="Date in YYYY-MM-DD format")
    entryIndex: EntryIndex = Field(  # noqa: N815
        description="Index of the entry to update (0-based)"
    )
    time: TimeText | None = Field(
        default=None, description="New time in HH:MM format (24-hour)"
    )
    description: DescriptionText | None = Field(
        default=None, description="New description of the food"
    )
    calories: Calories | None = Field(default=None, description="New calories value")
    protein: Protein | None = Field(
        default=None, description="New protein value in grams"
    )


class DeleteFoodEntryInput(ToolInput):
    """Input for deleting a food entry."""

    date: DateText = Field(description="Date in YYYY-MM-DD format")
    entryIndex: EntryIndex = Field(  # noqa: N815
        description="Index of the entry to delete (0-based)"
    )
