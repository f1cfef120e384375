import random

import pytest

from library_catalog.book import Book
from library_catalog.index import CatalogIndex, normalize_title


def _titles(books):
    return [b.title for b in books]


def _keys(index):
    return [normalize_title(b.title) for b in index.all_sorted()]


@pytest.fixture
def index():
    return CatalogIndex()


def _fill(index, *titles, author="Anon"):
    books = [Book(t, author) for t in titles]
    for book in books:
        index.insert(book)
    return books


def test_empty_index_queries(index):
    assert index.all_sorted() == []
    assert index.count() == 0
    assert len(index) == 0
    assert not index
    assert index.search_exact("Dune") is None
    assert index.search_by_id("id_missing") is None
    assert index.search_by_author("Herbert") == []
    index.delete("Dune")  # no-op
    assert index.count() == 0


def test_all_sorted_orders_by_title():
    index = CatalogIndex()
    _fill(index, "Dune", "1984", "Moby Dick")
    assert _titles(index.all_sorted()) == ["1984", "Dune", "Moby Dick"]


def test_ordering_ignores_case(index):
    _fill(index, "cherry", "Banana", "apple", "Apricot")
    assert _titles(index.all_sorted()) == ["apple", "Apricot", "Banana", "cherry"]


def test_search_exact_is_case_insensitive(index):
    dune, _ = _fill(index, "Dune", "Emma")
    assert index.search_exact("DUNE") is dune
    assert index.search_exact("dune") is dune
    assert index.search_exact("Dun") is None
    assert "dUnE" in index
    assert "Dun" not in index


def test_padded_titles_share_the_same_key(index):
    dune, _ = _fill(index, "Dune", "Emma")
    assert normalize_title("  Dune ") == "dune"
    assert index.search_exact("  DUNE ") is dune

    index.delete(" dune ")
    assert index.search_exact("Dune") is None
    assert index.count() == 1


def test_delete_leaf(index):
    _fill(index, "M", "C", "T")
    index.delete("c")
    assert _titles(index.all_sorted()) == ["M", "T"]
    assert index.count() == 2


def test_delete_node_with_one_child(index):
    _fill(index, "M", "C", "A")
    index.delete("C")
    assert _titles(index.all_sorted()) == ["A", "M"]
    assert index.search_exact("A") is not None


def test_delete_node_with_two_children_keeps_book_objects(index):
    books = _fill(index, "M", "C", "T", "P", "X", "N")
    by_title = {b.title: b for b in books}

    index.delete("M")

    assert _titles(index.all_sorted()) == ["C", "N", "P", "T", "X"]
    for book in index.all_sorted():
        assert book is by_title[book.title]
    assert index.search_exact("M") is None
    assert index.search_exact("N") is by_title["N"]


def test_delete_root_until_empty(index):
    _fill(index, "B", "A", "C")
    for title in ("B", "A", "C"):
        index.delete(title)
    assert index.count() == 0
    assert index.all_sorted() == []


def test_delete_missing_title_is_noop(index):
    _fill(index, "Dune", "Emma")
    index.delete("Ulysses")
    assert index.count() == 2


def test_duplicate_keys_do_not_break_index(index):
    first, second = _fill(index, "Dune", "DUNE")
    assert index.count() == 2
    assert _keys(index) == ["dune", "dune"]

    index.delete("dune")
    assert index.count() == 1
    assert index.all_sorted()[0] in (first, second)


def test_two_child_delete_with_duplicate_successor_key(index):
    # The successor's key equals another node's key in the right subtree
    books = _fill(index, "B", "A", "D", "C", "c")
    index.delete("B")

    remaining = index.all_sorted()
    assert len(remaining) == 4
    assert len({id(b) for b in remaining}) == 4
    assert {b.title for b in remaining} == {"A", "C", "c", "D"}
    assert all(b in books for b in remaining)


def test_search_by_id(index):
    books = _fill(index, "Dune", "1984", "Emma")
    for book in books:
        assert index.search_by_id(book.id) is book
    assert index.search_by_id("id_unknown") is None


def test_search_by_author_collects_all_matches_in_title_order(index):
    index.insert(Book("Wuthering Heights", "Emily Bronte"))
    index.insert(Book("Jane Eyre", "Charlotte Bronte"))
    index.insert(Book("Agnes Grey", "Anne Bronte"))
    index.insert(Book("Emma", "Jane Austen"))

    assert _titles(index.search_by_author("bronte")) == ["Agnes Grey", "Jane Eyre", "Wuthering Heights"]
    assert _titles(index.search_by_author("JANE")) == ["Emma"]
    assert index.search_by_author("Tolstoy") == []


def test_count_tracks_inserts_and_deletes(index):
    _fill(index, "A", "B", "C")
    assert index.count() == 3
    index.delete("B")
    assert len(index) == 2


@pytest.mark.parametrize("seed", [1, 7, 42, 2024])
def test_random_operations_keep_sorted_order(seed):
    rng = random.Random(seed)
    pool = [f"Title {n}" for n in range(40)] + [f"title {n}x" for n in range(20)]
    index = CatalogIndex()
    present = set()

    for _ in range(300):
        title = rng.choice(pool)
        if rng.random() < 0.6 and normalize_title(title) not in present:
            index.insert(Book(title, "Anon"))
            present.add(normalize_title(title))
        else:
            index.delete(title)
            present.discard(normalize_title(title))

        keys = _keys(index)
        assert keys == sorted(keys)
        assert index.count() == len(present)
        assert set(keys) == present


def test_degenerate_tree_traversal_is_not_recursive(index):
    titles = [f"{n:05d}" for n in range(1500)]
    _fill(index, *titles)

    assert _titles(index.all_sorted()) == titles
    assert index.search_exact("01499").title == "01499"
    assert index.count() == 1500
