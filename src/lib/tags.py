"""
Tag scanning primitives

Regular expressions for locating tags in page and template text, plus
depth-aware matching of a component's closing tag.

Nested matching only counts tags with the same name as the one being
resolved; unrelated markup in between is ignored:

    <box>A<box>B</box>C</box>
         ^open_end          ^ match (depth 1 -> 2 -> 1 -> 0)
"""

import re
from typing import Optional, Pattern, Tuple


# Opening tag in a page buffer: name + raw attribute text
TAG_OPEN_PATTERN = re.compile(r'<([a-z][a-z0-9-]*)([^>]*)>', re.IGNORECASE)

# Start of the first (root) element in a template
ROOT_TAG_PATTERN = re.compile(r'(<[a-zA-Z][a-zA-Z0-9-]*)([\s>])')

# First element in a template, including self-closing forms like <hr/>
FIRST_TAG_PATTERN = re.compile(r'(<[a-zA-Z][a-zA-Z0-9-]*)([\s/>])')


class ComponentError(Exception):
    """Raised when a component cannot be resolved or loaded"""
    pass


class UnterminatedTagError(ComponentError):
    """Raised when a component tag has no balancing closing tag"""

    def __init__(self, tag_name: str, position: int):
        self.tag_name = tag_name
        self.position = position
        super().__init__(
            f"Unterminated component tag <{tag_name}> (opening tag ends at position {position})"
        )


def rootTag_locate(
    template: str, pattern: Pattern[str] = ROOT_TAG_PATTERN
) -> Optional[Tuple[int, int]]:
    """
    Locate the opening tag of a template's root element

    Args:
        template: Component template text
        pattern: Expression matching the start of the root tag

    Returns:
        (start, end) where start is the index of the root tag's '<' and end
        is the index of the '>' closing its opening tag, or None if the
        template has no element

    Example:
        >>> rootTag_locate('<!-- c --><div class="x">hi</div>')
        (10, 24)
    """
    match = pattern.search(template)
    if not match:
        return None

    start = match.start()
    end = template.find('>', start)
    if end == -1:
        return None
    return start, end


def closeTag_findMatching(source: str, tag_name: str, start_pos: int) -> int:
    """
    Find the closing tag matching an already-opened component tag

    Walks forward from start_pos comparing the next '<name' against the
    next '</name>'. An opening tag before the closing one increments the
    depth; a closing tag decrements it. A '<name' followed by anything
    other than whitespace or '>' is a longer tag name sharing the prefix
    (e.g. '<box-item' while resolving 'box') and does not count.

    Args:
        source: Page buffer
        tag_name: Name of the tag being resolved, as written in the buffer
        start_pos: Index immediately after the opening tag's '>'

    Returns:
        Index of the '<' of the matching '</name>'

    Raises:
        UnterminatedTagError: If the buffer runs out of closing tags before
                              the depth returns to zero

    Example:
        For source '<box>A<box>B</box>C</box>' and start_pos 5:
        Returns 19 (the final '</box>')
    """
    open_token = f"<{tag_name}"
    close_token = f"</{tag_name}>"
    depth = 1
    pos = start_pos

    while depth > 0 and pos < len(source):
        next_open = source.find(open_token, pos)
        next_close = source.find(close_token, pos)

        if next_close == -1:
            break

        if next_open != -1 and next_open < next_close:
            after = next_open + len(open_token)
            delimiter = source[after] if after < len(source) else ''
            if delimiter == '>' or delimiter.isspace():
                depth += 1
                pos = after
            else:
                pos = next_open + 1
        else:
            depth -= 1
            if depth == 0:
                return next_close
            pos = next_close + len(close_token)

    raise UnterminatedTagError(tag_name, start_pos)
