"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use SLOTSMITH_ prefix (e.g., SLOTSMITH_MAX_ITERATIONS=50).

Settings can also be loaded from a .env file in the project root.
"""

from typing import FrozenSet, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.tags import NATIVE_TAGS


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use SLOTSMITH_ prefix.

    Examples:
        SLOTSMITH_PAGES_DIR=site/pages
        SLOTSMITH_MAX_ITERATIONS=50
        SLOTSMITH_NATIVE_TAGS_EXTRA='["slot", "menu"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="SLOTSMITH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Site layout
    pages_dir: str = Field(
        default="src/pages",
        description="Pages directory, relative to the site root",
    )

    components_dir: str = Field(
        default="src/components",
        description="Components directory, relative to the site root",
    )

    page_glob: str = Field(
        default="**/*.html",
        description="Glob selecting page files under the pages directory",
    )

    component_extension: str = Field(
        default=".html",
        description="Extension of component template files (<name>/<name><ext>)",
    )

    # Expansion configuration
    max_iterations: int = Field(
        default=100,
        ge=1,
        description="Maximum expansion passes per page (guards against cyclic components)",
    )

    cache_templates: bool = Field(
        default=True,
        description="Keep component templates in memory for the duration of a build",
    )

    native_tags_extra: List[str] = Field(
        default_factory=list,
        description="Additional tag names to treat as native markup",
    )

    # Build configuration
    clean_output: bool = Field(
        default=False,
        description="Remove previous output before building",
    )

    strict_mode: bool = Field(
        default=False,
        description="Strict mode: skipped tags and iteration ceiling hits fail the build",
    )

    def nativeTags_get(self) -> FrozenSet[str]:
        """
        Build the native tag set used for a build.

        Returns:
            Built-in native tags plus native_tags_extra, lower-cased

        Example:
            >>> settings = AppSettings(native_tags_extra=["Slot"])
            >>> "slot" in settings.nativeTags_get()
            True
        """
        extra = {name.strip().lower() for name in self.native_tags_extra if name.strip()}
        return NATIVE_TAGS | frozenset(extra)


# Singleton instance - import this in your code
appsettings = AppSettings()
