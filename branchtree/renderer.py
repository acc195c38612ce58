"""Line rendering for BranchTree.

The renderer turns each ``(BranchPath, value)`` pair into one line of the
diagram. It knows nothing about how the pairs were produced, so it works
with a TreeTraverser or any other iterable of pairs.
"""

import logging
from typing import Any, Iterable, Iterator, Optional, Tuple

from cachetools import LRUCache

from .config import ConfigurationError, RenderConfig
from .core.path import BranchPath
from .core.tree import Tree

logger = logging.getLogger(__name__)


class TreeRenderer:
    """Map branch paths to indentation prefixes and connectors.

    The indentation before a connector depends only on the ancestor flags,
    which every sibling shares. Those strings are memoized in an LRU cache
    sized by ``RenderConfig.prefix_cache_size``.

    Example:
        renderer = TreeRenderer()
        for line in renderer.render_lines(tree.into_traversal()):
            print(line)
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """Create a renderer.

        Args:
            config: Rendering options (defaults to RenderConfig())

        Raises:
            ConfigurationError: If the config does not validate
        """
        self.config = config or RenderConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.glyphs = self.config.glyphs()
        self._indent_cache: Optional[LRUCache] = None
        if self.config.prefix_cache_size > 0:
            self._indent_cache = LRUCache(maxsize=self.config.prefix_cache_size)
        logger.debug(
            "Renderer using %s glyphs, prefix cache size %d",
            self.config.style.value, self.config.prefix_cache_size
        )

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0

    def prefix(self, path: Tuple[bool, ...]) -> str:
        """Build the indentation plus connector for a node.

        Args:
            path: Last-child flags, innermost first

        Returns:
            Empty string for the root, otherwise indentation columns for
            each ancestor (root-adjacent first) followed by the connector
        """
        if not path:
            return ""
        innermost = path[0]
        connector = self.glyphs.last_branch if innermost else self.glyphs.branch
        return self._indent(tuple(path[1:])) + connector

    def render_line(self, path: Tuple[bool, ...], value: Any) -> str:
        """Render one node as a diagram line."""
        return self.prefix(path) + self.config.formatter(value)

    def render_lines(self, items: Iterable[Tuple[BranchPath, Any]]) -> Iterator[str]:
        """Lazily render each pair of a traversal as a line.

        Args:
            items: (BranchPath, value) pairs in pre-order

        Yields:
            One line per pair, without trailing newline
        """
        for path, value in items:
            yield self.render_line(path, value)

    def render(self, tree: Tree) -> str:
        """Consume a tree and return the whole diagram.

        Args:
            tree: A free tree; it is moved into a traversal

        Returns:
            The diagram lines joined with the configured separator
        """
        with tree.into_traversal() as traversal:
            return self.config.line_separator.join(self.render_lines(traversal))

    def _indent(self, ancestors: Tuple[bool, ...]) -> str:
        """Indentation columns for ancestor flags ordered nearest first."""
        cache = self._indent_cache
        if cache is not None:
            cached = cache.get(ancestors)
            if cached is not None:
                self.cache_hits += 1
                return cached
            self.cache_misses += 1

        pipe, blank = self.glyphs.pipe, self.glyphs.blank
        indent = "".join(blank if is_last else pipe for is_last in reversed(ancestors))

        if cache is not None:
            cache[ancestors] = indent
        return indent

    def clear_cache(self) -> None:
        """Drop memoized prefixes and reset cache statistics."""
        if self._indent_cache is not None:
            self._indent_cache.clear()
        self.cache_hits = 0
        self.cache_misses = 0

    def get_stats(self) -> dict:
        """Get renderer cache statistics."""
        return {
            'cache_hits': self.cache_hits,
            'cache_misses': self.cache_misses,
            'cache_size': len(self._indent_cache) if self._indent_cache is not None else 0,
            'cache_enabled': self._indent_cache is not None,
        }
