"""Configuration system for BranchTree.

This module defines how users choose the glyphs, value formatting and
caching behavior of the renderer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class ConfigurationError(ValueError):
    """Raised when a RenderConfig fails validation."""
    pass


class GlyphStyle(Enum):
    """Which glyph set to draw connectors with."""
    UNICODE = "unicode"     # Box-drawing characters
    ASCII = "ascii"         # Plain 7-bit characters
    CUSTOM = "custom"       # User-supplied Glyphs


@dataclass(frozen=True)
class Glyphs:
    """The four strings a tree diagram is assembled from.

    ``branch`` and ``last_branch`` are connectors drawn before a node's
    value; ``pipe`` and ``blank`` fill the column of an ancestor that does
    or does not have further siblings below.
    """

    branch: str = "├─ "
    last_branch: str = "└─ "
    pipe: str = "│  "
    blank: str = "   "

    @classmethod
    def for_style(cls, style: GlyphStyle) -> "Glyphs":
        """Return the built-in glyph set for a style.

        Args:
            style: UNICODE or ASCII

        Returns:
            Glyphs for the style

        Raises:
            ValueError: If style is CUSTOM (no built-in glyphs)
        """
        if style == GlyphStyle.UNICODE:
            return UNICODE_GLYPHS
        if style == GlyphStyle.ASCII:
            return ASCII_GLYPHS
        raise ValueError(f"No built-in glyphs for style: {style.value}")

    def widths(self) -> List[int]:
        return [len(self.branch), len(self.last_branch), len(self.pipe), len(self.blank)]


UNICODE_GLYPHS = Glyphs()
ASCII_GLYPHS = Glyphs(branch="|- ", last_branch="`- ", pipe="|  ", blank="   ")


@dataclass
class RenderConfig:
    """Complete configuration for rendering a tree.

    This is the primary way users customize the diagram. TreeRenderer
    validates it on construction.
    """

    # Glyphs
    style: GlyphStyle = GlyphStyle.UNICODE
    custom_glyphs: Optional[Glyphs] = None  # Required when style is CUSTOM

    # Value display
    formatter: Callable[[Any], str] = str

    # Indentation prefix cache (0 = no caching)
    prefix_cache_size: int = 256

    # Output joining for whole-tree rendering
    line_separator: str = "\n"

    # Convenience constructors for common configurations

    @classmethod
    def ascii(cls) -> "RenderConfig":
        """Create config drawing with plain ASCII glyphs."""
        return cls(style=GlyphStyle.ASCII)

    @classmethod
    def uncached(cls, style: GlyphStyle = GlyphStyle.UNICODE) -> "RenderConfig":
        """Create config that rebuilds every prefix from scratch.

        Args:
            style: Glyph style to use

        Returns:
            RenderConfig with the prefix cache disabled
        """
        return cls(style=style, prefix_cache_size=0)

    def glyphs(self) -> Glyphs:
        """Resolve the glyph set this configuration draws with."""
        if self.style == GlyphStyle.CUSTOM:
            if self.custom_glyphs is None:
                raise ConfigurationError("custom_glyphs required when style is CUSTOM")
            return self.custom_glyphs
        return Glyphs.for_style(self.style)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.style, GlyphStyle):
            errors.append(f"style must be a GlyphStyle, got {self.style!r}")
        elif self.style == GlyphStyle.CUSTOM and self.custom_glyphs is None:
            errors.append("custom_glyphs required when style is CUSTOM")

        if self.style == GlyphStyle.CUSTOM and self.custom_glyphs is not None:
            # Columns only line up if every glyph has the same width
            if len(set(self.custom_glyphs.widths())) != 1:
                errors.append("custom glyphs must all have the same width")

        if not callable(self.formatter):
            errors.append("formatter must be callable")

        if not isinstance(self.prefix_cache_size, int) or isinstance(self.prefix_cache_size, bool):
            errors.append(
                f"prefix_cache_size must be an int, got {self.prefix_cache_size!r}"
            )
        elif self.prefix_cache_size < 0:
            errors.append("prefix_cache_size cannot be negative")

        return errors
