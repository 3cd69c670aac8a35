from __future__ import annotations

"""Result values produced when the user selects an image on the board.

A selection never raises: it either moves the board to another page, yields
text to speak, or reports that the image has no mapping on the current page.
"""

from dataclasses import dataclass, field
from typing import Union

__all__ = ["CategoryChanged", "Spoken", "TextNotFound", "SelectionOutcome"]


@dataclass(frozen=True)
class CategoryChanged:
    """The board switched to the page with display name *name*."""

    name: str

    @property
    def message(self) -> str:
        return f"Category changed to: {self.name}"


@dataclass(frozen=True)
class Spoken:
    """The selected image resolved to *text* for speech output.

    Equality only looks at the text; ``image_id`` is carried for messages.
    """

    text: str
    image_id: str = field(default="", compare=False)

    @property
    def message(self) -> str:
        return f"Text for image {self.image_id}: {self.text}"


@dataclass(frozen=True)
class TextNotFound:
    """The current page has no text for *image_id*."""

    image_id: str

    @property
    def message(self) -> str:
        return f"Text not found for image {self.image_id}"


SelectionOutcome = Union[CategoryChanged, Spoken, TextNotFound]
