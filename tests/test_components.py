"""
Component registry and settings tests

Tests the <name>/<name>.html addressing convention, template caching, and
the native tag configuration.
"""

import tempfile
from pathlib import Path

import pytest

from slotsmith.config.settings import AppSettings
from slotsmith.lib.components import ComponentRegistry
from slotsmith.lib.tags import ComponentError
from slotsmith.models.tags import NATIVE_TAGS, native_is


class TestComponentRegistry:
    """Test component lookup and loading"""

    def test_template_path_convention(self):
        """Component X lives at X/X.html"""
        registry = ComponentRegistry("src/components")
        assert registry.templatePath_get("card") == Path("src/components/card/card.html")

    def test_custom_extension(self):
        """The template extension is configurable"""
        registry = ComponentRegistry("components", extension=".htm")
        assert registry.templatePath_get("card") == Path("components/card/card.htm")

    def test_exists_and_load(self):
        """Existing templates are found and read"""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "card").mkdir()
            (Path(tmpdir) / "card" / "card.html").write_text("<article></article>")
            registry = ComponentRegistry(tmpdir)

            assert registry.template_exists("card") is True
            assert registry.template_exists("missing") is False
            assert registry.template_load("card") == "<article></article>"

    def test_directory_without_template(self):
        """A directory alone does not make a component"""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "card").mkdir()
            (Path(tmpdir) / "card" / "other.html").write_text("<p></p>")
            registry = ComponentRegistry(tmpdir)

            assert registry.template_exists("card") is False
            assert registry.names_list() == []

    def test_load_missing_raises(self):
        """Loading an unknown component raises ComponentError"""
        with tempfile.TemporaryDirectory() as tmpdir:
            registry = ComponentRegistry(tmpdir)
            with pytest.raises(ComponentError, match="Component 'ghost' not found"):
                registry.template_load("ghost")

    def test_cached_template_survives_file_change(self):
        """With caching, a template is read once per registry"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "card" / "card.html"
            path.parent.mkdir()
            path.write_text("first")
            registry = ComponentRegistry(tmpdir, cache=True)

            assert registry.template_load("card") == "first"
            path.write_text("second")
            assert registry.template_load("card") == "first"

    def test_uncached_template_reread(self):
        """Without caching, every load reads the file"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "card" / "card.html"
            path.parent.mkdir()
            path.write_text("first")
            registry = ComponentRegistry(tmpdir, cache=False)

            assert registry.template_load("card") == "first"
            path.write_text("second")
            assert registry.template_load("card") == "second"

    def test_names_list(self):
        """Available components are listed in sorted order"""
        with tempfile.TemporaryDirectory() as tmpdir:
            for name in ["nav-bar", "card"]:
                (Path(tmpdir) / name).mkdir()
                (Path(tmpdir) / name / f"{name}.html").write_text("<div></div>")
            registry = ComponentRegistry(tmpdir)
            assert registry.names_list() == ["card", "nav-bar"]

    def test_names_list_missing_dir(self):
        """A missing components directory has no components"""
        registry = ComponentRegistry("/nonexistent/components")
        assert registry.names_list() == []


class TestNativeTags:
    """Test the native tag set and its configuration"""

    @pytest.mark.parametrize("name", ["div", "DIV", "Section", "svg", "h1"])
    def test_native(self, name):
        """Standard tags are native regardless of case"""
        assert native_is(name)

    @pytest.mark.parametrize("name", ["card", "nav-bar", "slot", "x-div"])
    def test_not_native(self, name):
        """Custom names are not native"""
        assert not native_is(name)

    def test_extra_native_tags_setting(self):
        """native_tags_extra extends the built-in set"""
        settings = AppSettings(native_tags_extra=["Slot", " menu ", ""])
        tags = settings.nativeTags_get()

        assert "slot" in tags
        assert "menu" in tags
        assert "" not in tags
        assert NATIVE_TAGS <= tags

    def test_default_settings(self):
        """Defaults match the conventional site layout"""
        settings = AppSettings()
        assert settings.pages_dir == "src/pages"
        assert settings.components_dir == "src/components"
        assert settings.max_iterations == 100
        assert settings.nativeTags_get() == NATIVE_TAGS
