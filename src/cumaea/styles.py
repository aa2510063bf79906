"""Colour choices for prompt text and their ANSI rendering."""

from dataclasses import dataclass
from enum import Enum

from rich.color import ColorSystem
from rich.style import Style


class ChoiceColor(Enum):
    """The eight base terminal colours."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


class Variant(Enum):
    """How a colour is applied: foreground or background, normal or bright."""

    NORMAL = "normal"
    ON = "on"
    BRIGHT = "bright"
    ON_BRIGHT = "on_bright"


# rich style definitions, keyed by variant. "{}" is the base colour name.
VARIANT_TEMPLATES: dict[Variant, str] = {
    Variant.NORMAL: "{}",
    Variant.ON: "on {}",
    Variant.BRIGHT: "bright_{}",
    Variant.ON_BRIGHT: "on bright_{}",
}

STYLES: dict[tuple[Variant, ChoiceColor], Style] = {
    (variant, color): Style.parse(template.format(color.value))
    for variant, template in VARIANT_TEMPLATES.items()
    for color in ChoiceColor
}


@dataclass(frozen=True)
class Choice:
    """A colour plus the variant it is rendered with."""

    variant: Variant
    color: ChoiceColor

    @classmethod
    def normal(cls, color: ChoiceColor) -> "Choice":
        return cls(Variant.NORMAL, color)

    @classmethod
    def on(cls, color: ChoiceColor) -> "Choice":
        return cls(Variant.ON, color)

    @classmethod
    def bright(cls, color: ChoiceColor) -> "Choice":
        return cls(Variant.BRIGHT, color)

    @classmethod
    def on_bright(cls, color: ChoiceColor) -> "Choice":
        return cls(Variant.ON_BRIGHT, color)

    @classmethod
    def parse(cls, name: str) -> "Choice":
        """Build a choice from a name such as ``red``, ``on_blue`` or ``on_bright_cyan``.

        Raises:
            ValueError: If the name does not describe one of the 32 choices.
        """
        normalized = name.strip().lower().replace("-", "_").replace(" ", "_")
        variant = Variant.NORMAL
        for prefix, candidate in (
            ("on_bright_", Variant.ON_BRIGHT),
            ("bright_", Variant.BRIGHT),
            ("on_", Variant.ON),
        ):
            if normalized.startswith(prefix):
                variant = candidate
                normalized = normalized[len(prefix):]
                break

        try:
            color = ChoiceColor(normalized)
        except ValueError:
            raise ValueError(f"Unknown style: {name!r}") from None
        return cls(variant, color)

    @property
    def name(self) -> str:
        """The name accepted by :meth:`parse`."""
        if self.variant is Variant.NORMAL:
            return self.color.value
        return f"{self.variant.value}_{self.color.value}"


def style_for(choice: Choice) -> Style:
    """Return the rich style for a choice."""
    return STYLES[(choice.variant, choice.color)]


def render(text: str, choice: Choice) -> str:
    """Wrap text in the ANSI codes for a choice using the 16-colour palette."""
    return style_for(choice).render(text, color_system=ColorSystem.STANDARD)


def all_choices() -> list[Choice]:
    """Every variant/colour combination, in table order."""
    return [Choice(variant, color) for variant, color in STYLES]
