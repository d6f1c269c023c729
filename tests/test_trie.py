import bisect

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from xfasttrie.trie import XFastTrie

MAX_KEY = 2**32 - 1

clustered_keys = st.one_of(
    st.integers(0, 64),
    st.integers(2**31 - 32, 2**31 + 32),
    st.integers(MAX_KEY - 64, MAX_KEY),
    st.integers(0, MAX_KEY),
)


def test_empty_trie_has_no_predecessor():
    trie = XFastTrie()
    assert trie.predecessor(0) is None
    assert trie.predecessor(MAX_KEY) is None
    assert trie.get(5) is None
    assert not trie.contains(5)


def test_insert_reports_new_and_duplicate_keys():
    trie = XFastTrie()
    assert trie.insert(10, "a") is True
    assert trie.insert(10, "b") is False
    assert trie.get(10) == "a"
    assert 10 in trie


def test_predecessor_of_present_key_is_itself():
    trie = XFastTrie()
    for key in (3, 9, 27):
        trie.insert(key, key)
    assert trie.predecessor(9) == 9


def test_predecessor_below_minimum_is_none():
    trie = XFastTrie()
    trie.insert(100, 1)
    trie.insert(200, 2)
    assert trie.predecessor(99) is None
    assert trie.predecessor(150) == 100
    assert trie.predecessor(MAX_KEY) == 200


def test_unsorted_insertion_keeps_predecessors_right():
    trie = XFastTrie()
    for key in (10, 5, 2**31, 7, MAX_KEY, 0):
        trie.insert(key, str(key))
    assert trie.predecessor(6) == 5
    assert trie.predecessor(9) == 7
    assert trie.predecessor(2**31 - 1) == 10
    assert trie.predecessor(MAX_KEY - 1) == 2**31
    assert trie.get(MAX_KEY) == str(MAX_KEY)


def test_longest_prefix_search_full_and_empty():
    trie = XFastTrie()
    assert trie.longest_prefix_search(12345) == 0
    trie.insert(12345, None)
    assert trie.longest_prefix_search(12345) == 32


def test_longest_prefix_search_partial():
    trie = XFastTrie()
    trie.insert(0, None)
    assert trie.longest_prefix_search(1) == 31
    assert trie.longest_prefix_search(2**31) == 0


@pytest.mark.parametrize("key", [-1, 2**32])
def test_out_of_range_keys_rejected(key):
    trie = XFastTrie()
    with pytest.raises(ValueError):
        trie.insert(key, None)
    with pytest.raises(ValueError):
        trie.predecessor(key)
    with pytest.raises(ValueError):
        trie.get(key)


def test_non_integer_key_rejected():
    trie = XFastTrie()
    with pytest.raises(TypeError):
        trie.insert("1", None)


@settings(max_examples=150, deadline=None)
@given(
    keys=st.lists(clustered_keys, max_size=40),
    queries=st.lists(clustered_keys, min_size=1, max_size=20),
)
def test_predecessor_matches_sorted_list(keys, queries):
    trie = XFastTrie()
    for key in keys:
        trie.insert(key, key * 2)
    ordered = sorted(set(keys))
    for query in queries:
        index = bisect.bisect_right(ordered, query)
        expected = ordered[index - 1] if index else None
        assert trie.predecessor(query) == expected
        assert trie.contains(query) == (query in ordered)
        assert trie.get(query) == (query * 2 if query in ordered else None)


@settings(max_examples=100, deadline=None)
@given(keys=st.lists(clustered_keys, min_size=1, max_size=30))
def test_every_inserted_key_has_full_prefix(keys):
    trie = XFastTrie()
    for key in keys:
        trie.insert(key, None)
    for key in keys:
        assert trie.longest_prefix_search(key) == 32