"""Tests for the high-level API and the demo entry point."""

import io
import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from branchtree import (
    ConfigurationError,
    Ownership,
    RenderConfig,
    TreeConsumedError,
    print_tree,
    render_lines,
    render_tree,
    traverse_tree,
    tr,
)
from branchtree.__main__ import main
from branchtree.testing import SAMPLE_TREE_LINES, sample_tree


def test_traverse_tree_pairs():
    pairs = list(traverse_tree(tr("top", tr("a"), tr("b"))))
    assert pairs == [((), "top"), ((False,), "a"), ((True,), "b")]


def test_traverse_tree_consumes():
    tree = tr("top")
    list(traverse_tree(tree))
    assert tree.ownership is Ownership.CONSUMED


def test_traverse_tree_rejects_adopted_subtree():
    child = tr("child")
    tr("parent", child)
    with pytest.raises(TreeConsumedError):
        list(traverse_tree(child))


def test_render_lines():
    assert list(render_lines(sample_tree())) == SAMPLE_TREE_LINES


def test_render_lines_ascii():
    lines = list(render_lines(tr("top", tr("a")), RenderConfig.ascii()))
    assert lines == ["top", "`- a"]


def test_render_tree():
    assert render_tree(sample_tree()) == "\n".join(SAMPLE_TREE_LINES)


def test_print_tree_to_stream():
    out = io.StringIO()
    count = print_tree(sample_tree(), file=out)
    assert count == 13
    assert out.getvalue() == "\n".join(SAMPLE_TREE_LINES) + "\n"


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(tr("root"))
    assert capsys.readouterr().out == "root\n"


def test_cli_prints_sample_tree(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == SAMPLE_TREE_LINES


def test_traversal_logs_lifecycle(caplog):
    with caplog.at_level(logging.DEBUG, logger="branchtree"):
        render_tree(tr("top", tr("a")))
    messages = [record.getMessage() for record in caplog.records]
    assert "Traversal started with 1 top-level children" in messages
    assert "Traversal exhausted after 2 items" in messages


def test_traverse_tree_moves_at_call():
    """The tree is consumed when traverse_tree is called, before any pull."""
    tree = tr("top", tr("a"))
    pairs = traverse_tree(tree)
    assert tree.ownership is Ownership.CONSUMED
    with pytest.raises(TreeConsumedError):
        tree.into_traversal()
    assert list(pairs) == [((), "top"), ((True,), "a")]


def test_traverse_tree_rejects_reuse_at_call():
    tree = tr("top")
    traverse_tree(tree)
    with pytest.raises(TreeConsumedError):
        traverse_tree(tree)


def test_render_lines_moves_at_call():
    tree = tr("top", tr("a"))
    lines = render_lines(tree)
    assert tree.ownership is Ownership.CONSUMED
    assert list(lines) == ["top", "└─ a"]


def test_render_lines_validates_at_call():
    """A bad config fails immediately and leaves the tree free."""
    tree = tr("top")
    with pytest.raises(ConfigurationError):
        render_lines(tree, RenderConfig(prefix_cache_size=-1))
    assert tree.ownership is Ownership.FREE
