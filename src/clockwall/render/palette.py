"""Colour schemes."""

from typing import List, Sequence

from pydantic import BaseModel, Field

from clockwall.logging.config import get_logger

logger = get_logger(__name__)

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class ColorScheme(BaseModel):
    """Background and accent (faces, hands, seconds bar) colours."""

    model_config = {"frozen": True}

    background: str = Field(pattern=HEX_COLOR)
    accent: str = Field(pattern=HEX_COLOR)


def default_schemes() -> List[ColorScheme]:
    return [
        ColorScheme(background="#FFFFFF", accent="#000000"),
        ColorScheme(background="#000000", accent="#FFFFFF"),
    ]


class Palette:
    """Cycles through a fixed list of colour schemes."""

    def __init__(self, schemes: Sequence[ColorScheme], index: int = 0):
        if not schemes:
            raise ValueError("Palette needs at least one colour scheme")
        if not 0 <= index < len(schemes):
            raise ValueError(f"Scheme index {index} out of range (0-{len(schemes) - 1})")
        self.schemes = tuple(schemes)
        self.index = index

    @property
    def current(self) -> ColorScheme:
        return self.schemes[self.index]

    def advance(self) -> ColorScheme:
        """Switch to the next scheme, wrapping around."""
        self.index = (self.index + 1) % len(self.schemes)
        logger.info(f"Colour scheme switched to {self.index}")
        return self.current
