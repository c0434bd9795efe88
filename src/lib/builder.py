"""
Site builder

Expands every page under the pages directory and writes the result to the
output directory, mirroring the relative layout:

    src/pages/index.html        -> public/index.html
    src/pages/blog/post.html    -> public/blog/post.html

Pages are processed one at a time in sorted order. A page that cannot be
read or written is reported and skipped; the rest of the site still builds.
"""

import shutil
import time
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Union

from ..models.component import ExpansionResult, Page
from ..models.tags import NATIVE_TAGS
from .components import ComponentRegistry
from .expander import Expander
from .log import LOG


class Builder:
    """
    Builds a static site by expanding component tags in its pages

    Responsibilities:
    - Discover page files
    - Map each page to its output path
    - Expand components page by page
    - Write expanded pages
    """

    def __init__(
        self,
        pages_dir: Union[str, Path],
        components_dir: Union[str, Path],
        output_dir: Union[str, Path],
        page_glob: str = "**/*.html",
        component_extension: str = ".html",
        native_tags: FrozenSet[str] = NATIVE_TAGS,
        max_iterations: int = 100,
        cache_templates: bool = True,
        clean: bool = False,
        strict: bool = False,
    ) -> None:
        """
        Initialize builder

        Args:
            pages_dir: Directory containing page sources
            components_dir: Directory containing component directories
            output_dir: Directory receiving expanded pages
            page_glob: Glob selecting pages under pages_dir
            component_extension: Extension of component template files
            native_tags: Tag names never treated as components
            max_iterations: Iteration ceiling per page
            cache_templates: Keep templates in memory for this build
            clean: Remove output_dir contents before building
            strict: Fail the build on skipped tags or ceiling hits
        """
        self.pages_dir = Path(pages_dir)
        self.output_dir = Path(output_dir)
        self.page_glob = page_glob
        self.native_tags = native_tags
        self.max_iterations = max_iterations
        self.clean = clean
        self.strict = strict
        self.registry = ComponentRegistry(
            components_dir, extension=component_extension, cache=cache_templates
        )

    def build(self) -> Dict[str, Any]:
        """
        Expand and write all pages

        Returns:
            dict with build results and statistics:
                - status: bool (no failed pages; in strict mode also no
                  skipped tags and no ceiling hits)
                - page_count: int (pages written)
                - component_count: int (components inlined across all pages)
                - failed_pages: List[str]
                - skipped_tags: Dict[str, List[str]] (page -> tag names)
                - ceiling_pages: List[str]
                - output_dir: str
                - duration_ms: int
        """
        start = time.monotonic()
        LOG("Starting build...", level=2)

        if self.clean:
            self.output_clean()
        self.output_dir.mkdir(parents=True, exist_ok=True)

        LOG(f"Components available: {', '.join(self.registry.names_list()) or '(none)'}", level=2)

        pages = self.pages_discover()
        page_count = 0
        component_count = 0
        failed_pages: List[str] = []
        skipped_tags: Dict[str, List[str]] = {}
        ceiling_pages: List[str] = []

        for page in pages:
            LOG(f"{page.source}", level=1)
            try:
                page.content = page.source.read_text(encoding="utf-8")
                result = self.page_expand(page)
                self.page_write(page)
            except (OSError, UnicodeDecodeError) as e:
                LOG(f"Warning: failed to build {page.source}: {e}", level=1)
                failed_pages.append(str(page.source))
                continue

            page_count += 1
            component_count += result.replacements
            if result.skipped:
                skipped_tags[str(page.source)] = result.skipped
            if result.ceiling_reached:
                ceiling_pages.append(str(page.source))

            LOG(f"  {result.replacements} component(s) replaced", level=1)
            LOG(f"  Wrote: {page.destination}", level=1)

        status = not failed_pages
        if self.strict and (skipped_tags or ceiling_pages):
            status = False

        duration_ms = int((time.monotonic() - start) * 1000)
        LOG(f"Build finished in {duration_ms}ms", level=2)

        return {
            'status': status,
            'page_count': page_count,
            'component_count': component_count,
            'failed_pages': failed_pages,
            'skipped_tags': skipped_tags,
            'ceiling_pages': ceiling_pages,
            'output_dir': str(self.output_dir),
            'duration_ms': duration_ms,
        }

    def pages_discover(self) -> List[Page]:
        """Collect page files under pages_dir in sorted order"""
        sources = sorted(path for path in self.pages_dir.glob(self.page_glob) if path.is_file())
        LOG(f"Found {len(sources)} page(s) in {self.pages_dir}", level=2)
        return [Page(source=source, destination=self.outputPath_derive(source)) for source in sources]

    def outputPath_derive(self, source: Path) -> Path:
        """
        Map a page path to its output path

        Example:
            pages_dir=src/pages, output_dir=public
            src/pages/blog/post.html -> public/blog/post.html
        """
        return self.output_dir / source.relative_to(self.pages_dir)

    def page_expand(self, page: Page) -> ExpansionResult:
        """Expand component tags in a page, replacing its content"""
        expander = Expander(
            page.content,
            self.registry,
            native_tags=self.native_tags,
            max_iterations=self.max_iterations,
        )
        result = expander.expand()
        page.content = result.content

        for name in result.skipped:
            LOG(f"Warning: unterminated <{name}> left as text in {page.source}", level=1)
        return result

    def page_write(self, page: Page) -> None:
        """Write a page's content to its destination, creating directories"""
        page.destination.parent.mkdir(parents=True, exist_ok=True)
        page.destination.write_text(page.content, encoding="utf-8")

    def output_clean(self) -> None:
        """Remove everything inside output_dir"""
        if not self.output_dir.exists():
            return
        LOG(f"Cleaning {self.output_dir}", level=1)
        for entry in self.output_dir.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
