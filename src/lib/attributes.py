"""
Attribute parsing and injection

Moves attributes from a component invocation onto the root element of the
component's template:

    page:      <card class="wide" data-id="7" open>...</card>
    template:  <article class="card">...</article>
    result:    <article class="card wide" data-id="7" open>...</article>

Only quoted values are recognised (name="v" or name='v'). An unquoted
value such as id=main is neither an attribute nor a boolean flag; it is
dropped from the parse.
"""

import re
from typing import List

from ..models.component import ParsedAttributes
from .tags import rootTag_locate


OPENING_TAG_PATTERN = re.compile(r'<([a-zA-Z][a-zA-Z0-9-]*)\s*([^>]*)>')

VALUED_ATTRIBUTE_PATTERN = re.compile(
    r'([a-zA-Z][a-zA-Z0-9-]*)\s*=\s*"([^"]*)"'
    r"|([a-zA-Z][a-zA-Z0-9-]*)\s*=\s*'([^']*)'"
)

BOOLEAN_ATTRIBUTE_PATTERN = re.compile(r'^[a-zA-Z][a-zA-Z0-9-]*$')

# class attribute inside a root opening tag (not data-class, aria-class, ...)
CLASS_ATTRIBUTE_PATTERN = re.compile(r'(?<=\s)class\s*=\s*(["\'])([^"\']*)\1')


def classes_merge(existing: List[str], added: List[str]) -> List[str]:
    """Union of two class lists, deduplicated in first-seen order"""
    return list(dict.fromkeys(existing + added))


def attributes_parse(tag_text: str) -> ParsedAttributes:
    """
    Parse the attributes of a custom tag's opening text

    Quoted name/value pairs are consumed left to right and removed from the
    attribute text. Words left over afterwards that look like attribute
    names become boolean attributes.

    Args:
        tag_text: Opening tag text (e.g., '<card class="a" data-id="1" open>')

    Returns:
        ParsedAttributes; empty if tag_text is not an opening tag

    Example:
        >>> attributes_parse('<card class="a b" data-id="1" open>').booleans
        ['open']
    """
    attrs = ParsedAttributes()

    match = OPENING_TAG_PATTERN.search(tag_text)
    if not match:
        return attrs

    attr_string = match.group(2).strip()
    if not attr_string:
        return attrs

    remaining = attr_string
    processed = set()

    for attr_match in VALUED_ATTRIBUTE_PATTERN.finditer(attr_string):
        if attr_match.group(1) is not None:
            name, value = attr_match.group(1), attr_match.group(2)
        else:
            name, value = attr_match.group(3), attr_match.group(4)
        processed.add(name)

        if name == 'class':
            attrs.classes = classes_merge([], value.split())
        elif name.startswith('data-'):
            attrs.data[name] = value
        else:
            attrs.other[name] = value

        remaining = remaining.replace(attr_match.group(0), ' ', 1)

    for word in remaining.split():
        if BOOLEAN_ATTRIBUTE_PATTERN.match(word) and word not in processed:
            attrs.booleans.append(word)

    return attrs


def attributes_inject(template: str, attrs: ParsedAttributes) -> str:
    """
    Apply parsed attributes to a template's root element

    Rules, in order:
    1. classes + existing class attribute: union written back in place
    2. classes, no class attribute: class="..." appended
    3. data-* and other attributes appended as name="value" (existing
       attributes of the same name are left alone)
    4. boolean attributes appended bare

    Everything appended goes immediately before the '>' ending the root
    opening tag.

    Args:
        template: Component template text (slot already filled)
        attrs: Attributes from the component invocation

    Returns:
        Template with attributes applied; unchanged if it has no root element

    Example:
        >>> attributes_inject('<div class="base">x</div>', ParsedAttributes(classes=["extra"]))
        '<div class="base extra">x</div>'
    """
    root = rootTag_locate(template)
    if root is None:
        return template
    tag_start, tag_end = root

    additions = ''

    if attrs.classes:
        opening = template[tag_start:tag_end]
        class_match = CLASS_ATTRIBUTE_PATTERN.search(opening)
        if class_match:
            merged = classes_merge(class_match.group(2).split(), attrs.classes)
            rewritten = (
                opening[:class_match.start()]
                + f'class="{" ".join(merged)}"'
                + opening[class_match.end():]
            )
            template = template[:tag_start] + rewritten + template[tag_end:]
            tag_end += len(rewritten) - len(opening)
        else:
            additions += f' class="{" ".join(attrs.classes)}"'

    for name, value in attrs.data.items():
        additions += f' {name}="{value}"'

    for name, value in attrs.other.items():
        additions += f' {name}="{value}"'

    for name in attrs.booleans:
        additions += f' {name}'

    if additions:
        template = template[:tag_end] + additions + template[tag_end:]

    return template
