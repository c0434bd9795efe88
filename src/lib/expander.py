"""
Component expansion for a single page

Repeatedly inlines the first expandable custom tag in a page until none
remain:

    SCANNING  -- first custom tag with a component --> RESOLVING
    RESOLVING -- matching close tag found ----------> REWRITING
    RESOLVING -- unterminated ---------------------> keep scanning after it
    REWRITING -- spliced ---------------------------> SCANNING (from index 0)
    SCANNING  -- nothing found ---------------------> DONE
    any pass  -- iteration ceiling -----------------> DONE

Scanning restarts from the start of the buffer after every rewrite, since
a template may itself contain component tags. The iteration ceiling stops
components that include themselves, directly or through others.

Example:
    >>> registry = ComponentRegistry("src/components")
    >>> result = Expander('<card class="wide">Hi</card>', registry).expand()
    >>> result.content
    '<article class="card wide">Hi</article>'
"""

from typing import FrozenSet, List, Optional

from ..models.component import ExpansionResult, TagOccurrence
from ..models.tags import NATIVE_TAGS, native_is
from .attributes import attributes_inject, attributes_parse
from .components import ComponentRegistry
from .log import LOG
from .slots import slot_inject
from .tags import TAG_OPEN_PATTERN, UnterminatedTagError, closeTag_findMatching


class Expander:
    """
    Expands component tags in one page buffer

    Holds no state shared between pages: create one Expander per page.
    """

    def __init__(
        self,
        source: str,
        registry: ComponentRegistry,
        native_tags: FrozenSet[str] = NATIVE_TAGS,
        max_iterations: int = 100,
    ) -> None:
        """
        Args:
            source: Page text
            registry: Component lookup for this build
            native_tags: Lower-cased tag names never treated as components
            max_iterations: Maximum scanning passes before giving up

        Attributes:
            content: Page buffer, rewritten in place by each pass
            skipped: Unterminated tag names abandoned by the latest pass
        """
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")

        self.content = source
        self.registry = registry
        self.native_tags = native_tags
        self.max_iterations = max_iterations
        self.skipped: List[str] = []

    def expand(self) -> ExpansionResult:
        """
        Expand every reachable component tag in the buffer

        Returns:
            ExpansionResult with the final text and pass statistics. Never
            raises for malformed markup; problems show up as skipped tags or
            ceiling_reached.
        """
        passes = 0
        replacements = 0
        ceiling_reached = False

        while True:
            if passes >= self.max_iterations:
                ceiling_reached = True
                LOG(
                    f"Warning: stopped after {passes} passes, "
                    "component nesting may be cyclic or malformed",
                    level=1,
                )
                break

            passes += 1
            occurrence = self.occurrence_find()
            if occurrence is None:
                break

            self.occurrence_rewrite(occurrence)
            replacements += 1

        return ExpansionResult(
            content=self.content,
            passes=passes,
            replacements=replacements,
            skipped=list(self.skipped),
            ceiling_reached=ceiling_reached,
        )

    def candidate_is(self, tag_name: str) -> bool:
        """Check if a tag name refers to an existing component"""
        if native_is(tag_name, self.native_tags):
            return False
        return self.registry.template_exists(tag_name)

    def occurrence_find(self) -> Optional[TagOccurrence]:
        """
        Find the first expandable component tag in the buffer

        Scans opening tags left to right. Native tags and tags without a
        component are passed over. A component tag with no balancing close
        tag is recorded in self.skipped and scanning continues after it.

        Returns:
            TagOccurrence for the first resolvable component, or None
        """
        self.skipped = []

        for match in TAG_OPEN_PATTERN.finditer(self.content):
            name = match.group(1)
            if not self.candidate_is(name):
                continue

            try:
                close_start = closeTag_findMatching(self.content, name, match.end())
            except UnterminatedTagError as e:
                LOG(f"Skipping <{name}>: {e}", level=3)
                self.skipped.append(name)
                continue

            return TagOccurrence(
                name=name,
                attributes=match.group(2),
                start=match.start(),
                open_end=match.end(),
                close_start=close_start,
            )

        return None

    def occurrence_rewrite(self, occurrence: TagOccurrence) -> None:
        """
        Replace a component tag span with its expanded template

        The slot is filled before attributes are applied so that attribute
        injection targets the template's real root element.
        """
        inner = self.content[occurrence.open_end:occurrence.close_start].strip()
        template = self.registry.template_load(occurrence.name)
        attrs = attributes_parse(occurrence.opening_tag)

        expanded = slot_inject(template, inner)
        expanded = attributes_inject(expanded, attrs)

        self.content = (
            self.content[:occurrence.start]
            + expanded
            + self.content[occurrence.close_end:]
        )
        LOG(
            f"Rewrote <{occurrence.name}> at {occurrence.start} "
            f"({occurrence.close_end - occurrence.start} -> {len(expanded)} chars)",
            level=2,
        )
