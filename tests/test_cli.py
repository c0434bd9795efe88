"""
Command-line pipeline tests

Runs the pipeline stages directly on a ProgramState, bypassing the
chris_plugin wrapper.
"""

import tempfile
from argparse import Namespace
from pathlib import Path

import pytest

from slotsmith.__main__ import env_check, site_build, results_report
from slotsmith.models import ProgramState, pipeline


def state_make(root: Path, **overrides) -> ProgramState:
    options = Namespace(
        pagesDir="src/pages",
        componentsDir="src/components",
        pageGlob="**/*.html",
        maxIterations=100,
        clean=False,
        strict=False,
        verbosity=0,
        unrelated="ignored",
    )
    for key, value in overrides.items():
        setattr(options, key, value)
    return ProgramState.state_createFromNamespace(options, inputdir=root, outputdir=root / "public")


def site_create(root: Path) -> None:
    (root / "src" / "components" / "card").mkdir(parents=True)
    (root / "src" / "components" / "card" / "card.html").write_text('<div class="card"><slot/></div>')
    (root / "src" / "pages").mkdir(parents=True)
    (root / "src" / "pages" / "index.html").write_text("<card>Hi</card>")


class TestProgramState:
    """Test state creation from CLI options"""

    def test_unknown_options_dropped(self):
        """Options without a matching field are ignored"""
        state = state_make(Path("/site"))
        assert state.pagesDir == "src/pages"
        assert state.outputdir == Path("/site/public")
        assert not hasattr(state, "unrelated")

    def test_copy_is_independent(self):
        """copy() returns a new state"""
        state = state_make(Path("/site"))
        other = state.copy()
        other.envOK = True
        assert state.envOK is False


class TestPipelineStages:
    """Test env_check, site_build and results_report"""

    def test_full_pipeline(self):
        """A valid site builds and reports success"""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            site_create(root)
            state = pipeline(state_make(root), env_check, site_build, results_report)

            assert state.envOK is True
            assert state.buildResult['page_count'] == 1
            assert (root / "public" / "index.html").read_text() == '<div class="card">Hi</div>'

    def test_missing_pages_dir_exits(self):
        """A missing pages directory stops the pipeline"""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(SystemExit) as excinfo:
                env_check(state_make(Path(tmpdir)))
            assert excinfo.value.code == 1

    def test_missing_components_dir_builds_pages_unexpanded(self):
        """Without a components directory the pages are still written"""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "src" / "pages").mkdir(parents=True)
            (root / "src" / "pages" / "index.html").write_text("<card>Hi</card>")
            state = pipeline(state_make(root), env_check, site_build, results_report)

            assert state.envOK is True
            assert state.buildResult['component_count'] == 0
            assert (root / "public" / "index.html").read_text() == "<card>Hi</card>"

    def test_invalid_ceiling_exits(self):
        """maxIterations below one is rejected"""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            site_create(root)
            with pytest.raises(SystemExit):
                env_check(state_make(root, maxIterations=0))

    def test_clean_refuses_to_remove_sources(self):
        """Cleaning an output directory that holds the pages is refused"""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            site_create(root)
            state = state_make(root, clean=True)
            state.outputdir = root
            with pytest.raises(SystemExit):
                env_check(state)
            assert (root / "src" / "pages" / "index.html").exists()

    def test_strict_failure_exits(self):
        """In strict mode a leftover tag fails the report stage"""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            site_create(root)
            (root / "src" / "pages" / "draft.html").write_text("<card>open")
            with pytest.raises(SystemExit):
                pipeline(state_make(root, strict=True), env_check, site_build, results_report)
