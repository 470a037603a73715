"""Click parameter types that turn raw CLI text into the typed values the core expects.

The domain only validates already-typed values; parsing prices, dates and enum
names from text happens here.
"""

from decimal import Decimal, InvalidOperation
from enum import Enum

import click

# pylint: disable=too-few-public-methods


class DecimalParamType(click.ParamType):
    """Parse a price such as ``12000`` or ``49.99`` into a `Decimal`."""

    name = "decimal"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            parsed = Decimal(str(value).strip().lstrip("£$"))
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid number", param, ctx)
        if not parsed.is_finite():
            self.fail(f"{value!r} is not a finite number", param, ctx)
        return parsed


DECIMAL = DecimalParamType()

DISPLAY_DATE = click.DateTime(
    formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M"]
)


def enum_choice(enum_type: type[Enum]) -> click.Choice:
    """A case-insensitive choice over an enum's values (e.g. ``InGallery``)."""
    return click.Choice([member.value for member in enum_type], case_sensitive=False)


def to_enum(enum_type: type[Enum], value: str) -> Enum:
    """Map a value accepted by `enum_choice` back to its enum member."""
    for member in enum_type:
        if member.value.lower() == value.lower():
            return member
    raise click.BadParameter(f"{value!r} is not one of {[m.value for m in enum_type]}")
