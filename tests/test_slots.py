"""
Slot injection tests - placing caller content into templates

Tests marker precedence, the root-element fallback, and the no-op cases
(blank content, self-closing root, nothing to inject into).
"""

import pytest
from loguru import logger

from slotsmith.lib.log import state_connectToLogger
from slotsmith.lib.slots import slot_inject
from slotsmith.models import ProgramState


class TestSlotMarkers:
    """Test explicit slot markers"""

    @pytest.mark.parametrize("marker", ["<slot>", "<slot/>", "<slot />"])
    def test_slot_marker_variants(self, marker):
        """Every literal slot spelling is replaced"""
        template = f"<div>{marker}</div>"
        assert slot_inject(template, "Hello") == "<div>Hello</div>"

    def test_children_marker(self):
        """{children} is replaced when there is no slot tag"""
        assert slot_inject("<p>{children}</p>", "Hi") == "<p>Hi</p>"

    def test_slot_takes_precedence_over_children(self):
        """<slot/> wins over {children}, which is left untouched"""
        template = "<div>{children}<slot/></div>"
        assert slot_inject(template, "X") == "<div>{children}X</div>"

    def test_only_first_slot_replaced(self):
        """Only the earliest slot marker is replaced"""
        template = "<div><slot /><span><slot></span></div>"
        assert slot_inject(template, "X") == "<div>X<span><slot></span></div>"

    def test_only_first_children_replaced(self):
        """Only the first {children} marker is replaced"""
        template = "<div>{children}|{children}</div>"
        assert slot_inject(template, "X") == "<div>X|{children}</div>"

    def test_content_with_backslashes(self):
        """Content is inserted literally"""
        assert slot_inject("<div><slot/></div>", r"a\1b") == r"<div>a\1b</div>"


class TestSlotFallback:
    """Test insertion without a marker"""

    def test_inserted_after_root_opening_tag(self):
        """Content becomes the first thing inside the root element"""
        template = '<section class="s"><h2>T</h2></section>'
        assert slot_inject(template, "Body") == '<section class="s">Body<h2>T</h2></section>'

    def test_self_closing_root_unchanged(self):
        """Content cannot go into a self-closing root"""
        template = '<img src="a.png"/>'
        assert slot_inject(template, "Body") == template

    @pytest.mark.parametrize("template", [
        "<hr/>",
        "<img/>",
        '<hr/><div class="body"></div>',
        "<br/><p>after</p>",
    ])
    def test_self_closing_first_tag_without_space(self, template):
        """A self-closing first tag written without a space is still the target"""
        assert slot_inject(template, "Body") == template

    def test_self_closing_first_tag_warns(self):
        """Skipping a self-closing first tag emits a warning"""
        messages = []
        sink_id = logger.add(messages.append, level="WARNING", format="{message}")
        state_connectToLogger(ProgramState(verbosity=1))
        try:
            assert slot_inject("<img/>", "Body") == "<img/>"
        finally:
            state_connectToLogger(None)
            logger.remove(sink_id)

        assert len(messages) == 1
        assert "self-closing" in messages[0]

    def test_no_element_unchanged(self):
        """A template without an element has nowhere to put content"""
        assert slot_inject("plain text", "Body") == "plain text"


class TestBlankContent:
    """Test that blank content is never injected"""

    @pytest.mark.parametrize("content", ["", "   ", "\n\t "])
    def test_blank_content_leaves_markers(self, content):
        """Blank content leaves the template, markers included, unchanged"""
        template = "<div><slot/>{children}</div>"
        assert slot_inject(template, content) == template
