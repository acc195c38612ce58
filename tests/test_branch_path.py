"""Unit tests for the BranchPath descriptor."""

import sys
import typing
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from branchtree import BranchPath, ROOT_PATH


def test_root_path():
    assert ROOT_PATH == ()
    assert ROOT_PATH.is_root
    assert ROOT_PATH.depth == 0
    assert ROOT_PATH.is_last is None
    assert ROOT_PATH.split_first() is None
    assert ROOT_PATH.ancestors == ()


def test_accessors():
    path = BranchPath((True, False, True))
    assert not path.is_root
    assert path.depth == 3
    assert path.is_last is True
    assert path.ancestors == (False, True)
    assert path.split_first() == (True, (False, True))
    assert path.outermost_first() == (True, False, True)


def test_outermost_first_reverses():
    path = BranchPath((False, True, True))
    assert path.outermost_first() == (True, True, False)


def test_flags_normalized_to_bool():
    path = BranchPath([1, 0, "x"])
    assert path == (True, False, True)
    assert all(type(flag) is bool for flag in path)


def test_is_a_tuple():
    path = BranchPath((True,))
    assert isinstance(path, tuple)
    assert hash(path) == hash((True,))
    assert {path: "value"}[(True,)] == "value"


def test_slicing_returns_plain_tuple():
    path = BranchPath((True, False))
    assert type(path[1:]) is tuple


def test_repr():
    assert repr(BranchPath((True, False))) == "BranchPath((True, False))"
    assert repr(ROOT_PATH) == "BranchPath(())"


def test_accepts_any_iterable():
    path = BranchPath(flag for flag in (True, False))
    assert path == (True, False)


def test_constructor_annotated():
    hints = typing.get_type_hints(BranchPath.__new__)
    assert hints["flags"] == typing.Iterable[typing.Any]
    assert hints["return"] is BranchPath
