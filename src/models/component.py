"""
Component expansion data models

Type-safe structures passed between the expansion stages.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List


@dataclass
class TagOccurrence:
    """
    A matched custom tag in the current page buffer

    Produced by Expander.occurrence_find() once the matching closing tag
    has been resolved. Only valid until the buffer is next rewritten.

    Attributes:
        name: Tag name as written in the page (e.g., "card")
        attributes: Raw text between the tag name and the closing '>'
                    (e.g., ' class="a" open')
        start: Index of the '<' that opens the tag
        open_end: Index immediately after the opening tag's '>'
        close_start: Index of the matching '</name>'

    Example:
        For buffer '<card open>Hi</card>':
        TagOccurrence(name="card", attributes=" open",
                      start=0, open_end=11, close_start=13)
    """
    name: str
    attributes: str
    start: int
    open_end: int
    close_start: int

    @property
    def closing_tag(self) -> str:
        return f"</{self.name}>"

    @property
    def opening_tag(self) -> str:
        return f"<{self.name}{self.attributes}>"

    @property
    def close_end(self) -> int:
        """Index immediately after the matching closing tag"""
        return self.close_start + len(self.closing_tag)


@dataclass
class ParsedAttributes:
    """
    Attributes extracted from a custom tag's opening text

    Returned by attributes_parse(). Each attribute name lands in exactly
    one category.

    Attributes:
        classes: Class tokens, deduplicated, first-seen order
        data: data-* attributes (name -> value)
        other: Any other quoted attribute (name -> value)
        booleans: Bare attribute names, in order encountered

    Example:
        Input: '<card class="a b" data-id="1" title="T" open>'
        Result: ParsedAttributes(
            classes=["a", "b"],
            data={"data-id": "1"},
            other={"title": "T"},
            booleans=["open"]
        )
    """
    classes: List[str] = field(default_factory=list)
    data: Dict[str, str] = field(default_factory=dict)
    other: Dict[str, str] = field(default_factory=dict)
    booleans: List[str] = field(default_factory=list)

    def empty_is(self) -> bool:
        return not (self.classes or self.data or self.other or self.booleans)


@dataclass
class Page:
    """
    One HTML page being built

    Attributes:
        source: Path of the page under the pages directory
        destination: Path the expanded page is written to
        content: Page text, replaced by the expanded text after expansion
    """
    source: Path
    destination: Path
    content: str = ""


@dataclass
class ExpansionResult:
    """
    Outcome of expanding one page

    Attributes:
        content: Final page text
        passes: Scanning passes performed (1 for a page without components)
        replacements: Components inlined
        skipped: Names of unterminated component tags left verbatim by the
                 final pass
        ceiling_reached: True if expansion stopped at the iteration ceiling
    """
    content: str
    passes: int
    replacements: int
    skipped: List[str] = field(default_factory=list)
    ceiling_reached: bool = False
