"""
Component registry

Maps a custom tag name to its template file. A component named X lives at

    <components_dir>/X/X<extension>

e.g. src/components/card/card.html. A tag with no such file is plain text
as far as expansion is concerned.
"""

from pathlib import Path
from typing import Dict, List, Union

from .log import LOG
from .tags import ComponentError


class ComponentRegistry:
    """
    Lookup and loading of component templates

    Templates are treated as read-only for the lifetime of the registry.
    With caching enabled both existence checks and template text are
    memoized, so a registry should be created once per build.
    """

    def __init__(
        self,
        components_dir: Union[str, Path],
        extension: str = ".html",
        cache: bool = True,
    ) -> None:
        """
        Args:
            components_dir: Root directory holding one subdirectory per component
            extension: Template file extension, including the dot
            cache: Memoize existence checks and template text
        """
        self.components_dir = Path(components_dir)
        self.extension = extension
        self.cache = cache
        self._exists: Dict[str, bool] = {}
        self._templates: Dict[str, str] = {}

    def templatePath_get(self, name: str) -> Path:
        """Path of the template file for component `name`"""
        return self.components_dir / name / f"{name}{self.extension}"

    def template_exists(self, name: str) -> bool:
        """Check whether a template file exists for component `name`"""
        if self.cache and name in self._exists:
            return self._exists[name]

        exists = self.templatePath_get(name).is_file()
        if self.cache:
            self._exists[name] = exists
        return exists

    def template_load(self, name: str) -> str:
        """
        Read the template text for component `name`

        Raises:
            ComponentError: If the component has no template file
        """
        if self.cache and name in self._templates:
            return self._templates[name]

        path = self.templatePath_get(name)
        if not self.template_exists(name):
            raise ComponentError(f"Component '{name}' not found. Expected file: {path}")

        template = path.read_text(encoding="utf-8")
        LOG(f"Loaded component '{name}' from {path}", level=3)
        if self.cache:
            self._templates[name] = template
        return template

    def names_list(self) -> List[str]:
        """Names of all components present under components_dir, sorted"""
        if not self.components_dir.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self.components_dir.iterdir()
            if entry.is_dir() and self.template_exists(entry.name)
        )
