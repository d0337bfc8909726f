import numpy as np
import pytest
from pynetreach.DisjointSet import DisjointSet


def test_initial_sets_are_singletons():
    ds = DisjointSet(5)
    assert len(ds) == 5
    assert ds.num_components == 5
    for i in range(5):
        assert ds.find(i) == i
        assert ds.is_connected(i, i)


def test_empty_domain():
    ds = DisjointSet(0)
    assert len(ds) == 0
    with pytest.raises(IndexError, match="Element 0 was not found"):
        ds.find(0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


@pytest.mark.parametrize("element", [-1, 4, 100])
def test_find_out_of_range(element):
    ds = DisjointSet(4)
    with pytest.raises(IndexError, match=f"Element {element} was not found"):
        ds.find(element)


@pytest.mark.parametrize("element", [True, False, 1.5, "1", None])
def test_find_rejects_non_integers(element):
    ds = DisjointSet(3)
    with pytest.raises(TypeError, match="element must be an integer"):
        ds.find(element)
    assert list(ds.parent) == [0, 1, 2]


def test_find_accepts_numpy_integers():
    ds = DisjointSet(3)
    ds.union(np.int64(0), np.int32(2))
    assert ds.find(np.int64(2)) == 0
    assert isinstance(ds.find(np.intp(2)), int)


def test_union_merges_sets():
    ds = DisjointSet(4)
    ds.union(0, 1)
    assert ds.is_connected(0, 1)
    assert not ds.is_connected(0, 2)
    assert ds.num_components == 3


def test_union_tie_attaches_second_root_under_first():
    ds = DisjointSet(2)
    ds.union(0, 1)
    assert ds.parent[1] == 0
    assert ds.rank[0] == 1
    assert ds.rank[1] == 0


def test_union_attaches_lower_rank_under_higher():
    ds = DisjointSet(3)
    ds.union(0, 1)  # root 0, rank 1
    ds.union(2, 0)  # rank(2) == 0 < rank(0)
    assert ds.parent[2] == 0
    assert ds.rank[0] == 1


def test_union_of_same_set_is_noop():
    ds = DisjointSet(3)
    ds.union(0, 1)
    parent_before = ds.parent.copy()
    rank_before = ds.rank.copy()
    ds.union(1, 0)
    assert (ds.parent == parent_before).all()
    assert (ds.rank == rank_before).all()
    assert ds.num_components == 2


def test_find_compresses_path():
    ds = DisjointSet(4)
    # build a chain 3 -> 2 -> 1 -> 0 by hand
    ds.parent[1] = 0
    ds.parent[2] = 1
    ds.parent[3] = 2
    assert ds.find(3) == 0
    assert list(ds.parent) == [0, 0, 0, 0]


def test_find_handles_long_chains():
    n = 100_000
    ds = DisjointSet(n)
    for i in range(1, n):
        ds.parent[i] = i - 1
    assert ds.find(n - 1) == 0
    assert ds.parent[n - 1] == 0


def test_union_out_of_range_leaves_state_untouched():
    ds = DisjointSet(3)
    with pytest.raises(IndexError):
        ds.union(0, 3)
    assert ds.num_components == 3
    assert list(ds.parent) == [0, 1, 2]


def test_num_components_reflects_unions():
    ds = DisjointSet(6)
    ds.union(0, 1)
    ds.union(1, 2)
    ds.union(3, 4)
    assert ds.num_components == 3
    ds.union(2, 3)
    assert ds.num_components == 2
