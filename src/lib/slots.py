"""
Slot injection

Places the inner content of a component invocation into the component's
template. Markers are tried in order, first match wins:

    <slot>, <slot/>, <slot />   the earliest of these in the template
    {children}                  first occurrence
    (none)                      right after the root element's opening tag
"""

from typing import Tuple

from .log import LOG
from .tags import FIRST_TAG_PATTERN, rootTag_locate


SLOT_MARKERS: Tuple[str, ...] = ('<slot>', '<slot/>', '<slot />')
CHILDREN_MARKER = '{children}'


def slot_inject(template: str, content: str) -> str:
    """
    Substitute caller content into a component template

    Args:
        template: Raw component template text
        content: Trimmed inner content of the component invocation

    Returns:
        Template with the content placed. Unchanged when content is blank,
        when there is nowhere to put it, or when the fallback target is a
        self-closing root tag.

    Example:
        >>> slot_inject('<div><slot/></div>', 'Hello')
        '<div>Hello</div>'
        >>> slot_inject('<p class="x"></p>', 'Hi')
        '<p class="x">Hi</p>'
    """
    if not content or not content.strip():
        return template

    found = [(template.find(marker), marker) for marker in SLOT_MARKERS if marker in template]
    if found:
        index, marker = min(found)
        return template[:index] + content + template[index + len(marker):]

    if CHILDREN_MARKER in template:
        index = template.find(CHILDREN_MARKER)
        return template[:index] + content + template[index + len(CHILDREN_MARKER):]

    root = rootTag_locate(template, FIRST_TAG_PATTERN)
    if root is None:
        return template

    _, tag_end = root
    if template[tag_end - 1] == '/':
        LOG("Warning: cannot inject content into a self-closing root tag", level=1)
        return template

    return template[:tag_end + 1] + content + template[tag_end + 1:]
