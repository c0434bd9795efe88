#!/usr/bin/env python3
"""
slotsmith - Component inlining for static HTML sites

Expands custom tags in HTML pages into reusable component templates.

Layout of a site (relative to inputdir):
    src/pages/**/*.html                 page sources
    src/components/<name>/<name>.html   one template per component

A page containing

    <card class="wide">Hello</card>

with src/components/card/card.html being

    <article class="card"><slot/></article>

is written to outputdir as

    <article class="card wide">Hello</article>

Usage:
    slotsmith site/ public/

Examples:
    # Basic build
    slotsmith . public/

    # Custom layout, start from an empty output directory
    slotsmith . public/ --pagesDir pages --componentsDir components --clean

    # Verbose output
    slotsmith . public/ -vv
"""

import sys
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from pathlib import Path

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Builder, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
       _       _                  _ _   _
   ___| | ___ | |_ ___ _ __ ___  (_) |_| |__
  / __| |/ _ \| __/ __| '_ ` _ \ | | __| '_ \
  \__ \ | (_) | |_\__ \ | | | | || | |_| | | |
  |___/_|\___/ \__|___/_| |_| |_||_|\__|_| |_|

  Component inlining for static HTML sites
"""

# Define CLI arguments
parser = ArgumentParser(
    description="slotsmith - expand component tags in static HTML pages",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pagesDir",
    default=appsettings.pages_dir,
    type=str,
    help="Pages directory (relative to inputdir)",
)

parser.add_argument(
    "--componentsDir",
    default=appsettings.components_dir,
    type=str,
    help="Components directory (relative to inputdir)",
)

parser.add_argument(
    "--pageGlob",
    default=appsettings.page_glob,
    type=str,
    help="Glob selecting page files under the pages directory",
)

parser.add_argument(
    "--maxIterations",
    default=appsettings.max_iterations,
    type=int,
    help="Maximum expansion passes per page",
)

parser.add_argument(
    "--clean",
    action="store_true",
    default=appsettings.clean_output,
    help="Remove previous output before building",
)

parser.add_argument(
    "--strict",
    action="store_true",
    default=appsettings.strict_mode,
    help="Fail the build if any tag was left unexpanded",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all directories.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - pagesInputdir: Resolved pages directory
            - componentsInputdir: Resolved components directory
            - siteOutputdir: Output directory
            - envOK: True if environment is valid

    Exits:
        1 if the pages directory is missing or the iteration ceiling is invalid
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    state.pagesInputdir = state.inputdir / state.pagesDir
    if not state.pagesInputdir.is_dir():
        print(f"Error: Pages directory not found: {state.pagesInputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    LOG(f"Pages directory: {state.pagesInputdir}", level=2)

    state.componentsInputdir = state.inputdir / state.componentsDir
    if not state.componentsInputdir.is_dir():
        # A site without components still builds; pages are copied as-is
        LOG(f"Warning: Components directory not found: {state.componentsInputdir}", level=1)
    else:
        LOG(f"Components directory: {state.componentsInputdir}", level=2)

    if state.maxIterations < 1:
        print(f"Error: --maxIterations must be at least 1, got {state.maxIterations}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.siteOutputdir = state.outputdir
    if state.clean and state.pagesInputdir.resolve().is_relative_to(state.siteOutputdir.resolve()):
        print(
            f"Error: refusing to clean {state.siteOutputdir}: it contains the pages directory",
            file=sys.stderr,
        )
        state.envOK = False
        sys.exit(1)
    LOG(f"Output directory: {state.siteOutputdir}", level=2)

    state.envOK = True
    return state


def site_build(inputstate: ProgramState) -> ProgramState:
    """
    Expand components in every page and write the results.

    Args:
        inputstate: Program state with resolved directories

    Returns:
        ProgramState with added field:
            - buildResult: Builder results dict (status, page_count,
              component_count, failed_pages, skipped_tags, ...)

    Exits:
        1 if the build raises unexpectedly
    """
    state = inputstate.copy()

    LOG("Building pages...", level=1)

    try:
        builder = Builder(
            pages_dir=state.pagesInputdir,
            components_dir=state.componentsInputdir,
            output_dir=state.siteOutputdir,
            page_glob=state.pageGlob,
            component_extension=appsettings.component_extension,
            native_tags=appsettings.nativeTags_get(),
            max_iterations=state.maxIterations,
            cache_templates=appsettings.cache_templates,
            clean=state.clean,
            strict=state.strict,
        )
        state.buildResult = builder.build()
    except Exception as e:
        print(f"Build error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display build results to the user.

    Args:
        inputstate: Program state with buildResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if buildResult is missing or reports failure
    """
    state: ProgramState = inputstate.copy()
    result = state.buildResult
    if not result:
        print("Error: Build failed", file=sys.stderr)
        sys.exit(1)

    LOG(f"\nPages: {result['page_count']}", level=1)
    LOG(f"Components replaced: {result['component_count']}", level=1)
    LOG(f"Output: {result['output_dir']}", level=1)
    LOG(f"Duration: {result['duration_ms']}ms", level=2)

    for page in result['failed_pages']:
        print(f"Error: could not build {page}", file=sys.stderr)
    for page, names in result['skipped_tags'].items():
        LOG(f"Warning: {page}: unterminated {', '.join(f'<{n}>' for n in names)}", level=1)
    for page in result['ceiling_pages']:
        LOG(f"Warning: {page}: iteration ceiling reached", level=1)

    if not result['status']:
        print("Error: Build completed with errors", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Build successful!", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="slotsmith - Component inlining for static HTML sites",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - expand components in a site's pages.

    Orchestrates the build pipeline:
        1. env_check: Validate and resolve directories
        2. site_build: Expand and write every page
        3. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Site root directory
        outputdir: Directory where expanded pages are written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, site_build, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
