"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use LOLMARK_ prefix (e.g., LOLMARK_LISTS_ENABLED=true).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use LOLMARK_ prefix.

    Examples:
        LOLMARK_LISTS_ENABLED=true
        LOLMARK_OPEN_BROWSER=true
        LOLMARK_BROWSER=firefox
    """

    model_config = SettingsConfigDict(
        env_prefix="LOLMARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Input/output naming
    source_extension: str = Field(
        default=".lol",
        description="Extension of lolmark source files",
    )

    output_extension: str = Field(
        default=".html",
        description="Extension of generated HTML files",
    )

    strict_extension: bool = Field(
        default=True,
        description="Reject input files that do not end in source_extension",
    )

    # Grammar configuration
    lists_enabled: bool = Field(
        default=False,
        description="Accept #MAEK LIST ... #OIC blocks in the document body",
    )

    # Viewer configuration
    open_browser: bool = Field(
        default=False,
        description="Open the generated HTML in a browser after compilation",
    )

    browser: Optional[str] = Field(
        default=None,
        description="Browser name passed to webbrowser.get(); system default if unset",
    )

    # Source listing configuration
    listing_style: str = Field(
        default="default",
        description="Pygments style used for highlighted source listings",
    )

    def sourceName_isValid(self, filename: str) -> bool:
        """
        Check if a filename carries the source extension (case-insensitive).

        Always True when strict_extension is off.

        Example:
            >>> AppSettings().sourceName_isValid("page.LOL")
            True
        """
        if not self.strict_extension:
            return True
        return filename.lower().endswith(self.source_extension.lower())

    def outputName_make(self, filename: str) -> str:
        """
        Derive the HTML output filename from a source filename.

        The source extension is replaced when present, otherwise the output
        extension is appended.

        Example:
            >>> AppSettings().outputName_make("page.lol")
            'page.html'
        """
        return f"{self.stem_get(filename)}{self.output_extension}"

    def listingName_make(self, filename: str) -> str:
        """
        Derive the highlighted source listing filename.

        Example:
            >>> AppSettings().listingName_make("page.lol")
            'page.source.html'
        """
        return f"{self.stem_get(filename)}.source{self.output_extension}"

    def stem_get(self, filename: str) -> str:
        """Strip the source extension from a filename, if present"""
        if filename.lower().endswith(self.source_extension.lower()):
            return filename[: -len(self.source_extension)]
        return filename


# Singleton instance - import this in your code
appsettings = AppSettings()
