"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing build stages.
"""

import dataclasses
from argparse import Namespace
from dataclasses import dataclass, field
from functools import reduce
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Type, TypeVar


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the build pipeline (state bus pattern).

    Each stage receives a state, copies it, and adds its own fields.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, pagesDir, componentsDir,
          pageGlob, maxIterations, clean, strict
        - env_check: pagesInputdir, componentsInputdir, siteOutputdir, envOK
        - site_build: buildResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Site root containing the pages and components directories
        outputdir: Directory receiving the expanded pages
        verbosity: Logging verbosity level (1-3)
        pagesDir: Pages directory, relative to inputdir
        componentsDir: Components directory, relative to inputdir
        pageGlob: Glob selecting page files under the pages directory
        maxIterations: Iteration ceiling per page
        clean: Remove previous output before building
        strict: Report skipped tags or ceiling hits as a failed build
        envOK: Environment validation passed
        pagesInputdir: Resolved pages directory
        componentsInputdir: Resolved components directory
        siteOutputdir: Resolved output directory
        buildResult: Builder results (status, page_count, component_count, ...)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pagesDir: str = field(default="src/pages")
    componentsDir: str = field(default="src/components")
    pageGlob: str = field(default="**/*.html")
    maxIterations: int = field(default=100)
    clean: bool = field(default=False)
    strict: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    pagesInputdir: Path = field(default=Path("/"))
    componentsInputdir: Path = field(default=Path("/"))
    siteOutputdir: Path = field(default=Path("/"))
    buildResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (pagesDir, componentsDir, etc.)
            inputdir: Site root directory
            outputdir: Directory for expanded pages

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Drop anything argparse carries that the state does not model
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(initial_state, env_check, site_build, results_report)

    This is equivalent to:
        results_report(site_build(env_check(initial_state)))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
