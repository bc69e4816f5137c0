import pytest

from fixpath.algorithms.paths import (
    NO_PREDECESSOR,
    check_target_length,
    is_simple_path,
    walk_predecessors,
)
from fixpath.exceptions import GraphContractError


def test_walk_predecessors():
    predecessor = [NO_PREDECESSOR, 0, 1, 0]
    assert walk_predecessors(predecessor, 2) == [0, 1, 2]
    assert walk_predecessors(predecessor, 3) == [0, 3]
    assert walk_predecessors(predecessor, 0) == [0]


@pytest.mark.parametrize("length", [0, -3, 2.0, None, True])
def test_check_target_length_rejects(length):
    with pytest.raises(GraphContractError, match="Target length"):
        check_target_length(length)


def test_check_target_length_accepts():
    check_target_length(1)
    check_target_length(50)


def test_is_simple_path_valid(square):
    assert is_simple_path(square, [0, 1, 2], 0, 2)
    assert is_simple_path(square, [0, 1, 2], 0, 2, 3)
    assert is_simple_path(square, [0], 0, 0, 1)


@pytest.mark.parametrize(
    "path,start,end,length",
    [
        (None, 0, 2, None),
        ([], 0, 2, None),
        ([0, 1, 2], 0, 2, 4),
        ([0, 1, 2], 1, 2, None),
        ([0, 1, 2], 0, 1, None),
        ([0, 2], 0, 2, None),
        ([0, 1, 0, 3, 2], 0, 2, None),
        ([0, 1, 9], 0, 9, None),
    ],
)
def test_is_simple_path_invalid(square, path, start, end, length):
    assert not is_simple_path(square, path, start, end, length)
