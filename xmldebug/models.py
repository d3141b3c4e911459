import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass
class DumpLine:
    """
    A single line of dump output.

    Attributes:
        depth (int): Number of indent units prefixed to the text when formatted.
        text (str): The rendered line, without indentation or line terminator.
    """

    depth: int
    text: str


@dataclass
class ContentSummary:
    """
    Display extract of a text value.

    Attributes:
        text (str): Whitespace-collapsed, possibly truncated extract.
        raw_length (int): Length of the original, untouched value.
    """

    text: str
    raw_length: int


class RootKind(Enum):
    ELEMENT = "element"
    ATTRIBUTE = "attribute"


@dataclass
class RootItem:
    """One item of a root selection, tagged with what kind of node it is."""

    kind: RootKind
    node: Any


class DumpOptions(BaseModel):
    """
    Settings controlling what a tree dump shows and how it is laid out.
    """

    model_config = ConfigDict(frozen=True)

    include_attributes_and_content: bool = False
    return_output: bool = False
    indent: str = "\t"
    content_extract_size: int = Field(default=15, ge=0)
    line_terminator: str = os.linesep
