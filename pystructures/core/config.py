"""
Display presets for diagnostic output.

Defines how matrices are rendered by Matrix.to_string() and
Matrix.display():
- DEFAULT: six significant digits, space separated
- COMPACT: three significant digits, for quick inspection

The rendered text carries no compatibility contract and is not meant
to be parsed.
"""

from dataclasses import dataclass

from pystructures.core.exceptions import ValidationError


@dataclass(frozen=True)
class PrintOptions:
    """Formatting specification for rendering matrix rows."""
    precision: int
    separator: str
    name: str

    def format_value(self, value: float) -> str:
        """Format a single element using the configured precision."""
        return f"{value:.{self.precision}g}"


DEFAULT = PrintOptions(
    precision=6,
    separator=' ',
    name='default',
)

COMPACT = PrintOptions(
    precision=3,
    separator=' ',
    name='compact',
)

_PRESETS = {options.name: options for options in (DEFAULT, COMPACT)}


def select_print_options(name: str) -> PrintOptions:
    """Select a display preset by name."""
    try:
        return _PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(_PRESETS))
        raise ValidationError(
            f"Unknown print options {name!r}, expected one of: {known}"
        ) from None
