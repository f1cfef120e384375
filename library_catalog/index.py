from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from library_catalog.book import Book

logger = logging.getLogger(__name__)


def normalize_title(title: str) -> str:
    """Ordering and equality key for titles. Every index operation goes through it."""
    return title.strip().casefold()


@dataclass
class _Node:
    book: Book
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None

    @property
    def key(self) -> str:
        return normalize_title(self.book.title)


class CatalogIndex:
    """Binary search tree of books ordered by normalized title.

    The tree is not rebalanced. Equal keys are routed to the right subtree;
    uniqueness is the caller's job, the index only has to survive duplicates.
    Lookups and traversals are iterative; only delete recurses, to the depth
    of the removed node.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    # ------------------------- Mutation ------------------------- #
    def insert(self, book: Book) -> None:
        new_node = _Node(book)
        if self._root is None:
            self._root = new_node
            return

        key = new_node.key
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new_node
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    break
                node = node.right
        logger.debug("Indexed %r", book.title)

    def delete(self, title: str) -> None:
        """Remove the book with this title. Missing titles are ignored."""
        self._root = self._delete_node(self._root, normalize_title(title))

    def _delete_node(self, node: Optional[_Node], key: str) -> Optional[_Node]:
        if node is None:
            return None

        node_key = node.key
        if key < node_key:
            node.left = self._delete_node(node.left, key)
            return node
        if key > node_key:
            node.right = self._delete_node(node.right, key)
            return node

        logger.debug("Removing %r from index", node.book.title)
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left

        # Two children: take over the in-order successor's book, then unlink the
        # successor node itself (not a key match, which could hit a duplicate)
        successor = self._min_node(node.right)
        node.book = successor.book
        node.right = self._remove_min(node.right)
        return node

    @staticmethod
    def _min_node(node: _Node) -> _Node:
        while node.left is not None:
            node = node.left
        return node

    def _remove_min(self, node: _Node) -> Optional[_Node]:
        if node.left is None:
            return node.right
        node.left = self._remove_min(node.left)
        return node

    # ------------------------- Queries ------------------------- #
    def search_exact(self, title: str) -> Optional[Book]:
        key = normalize_title(title)
        node = self._root
        while node is not None:
            node_key = node.key
            if key == node_key:
                return node.book
            node = node.left if key < node_key else node.right
        return None

    def search_by_id(self, book_id: str) -> Optional[Book]:
        """Linear scan; stops at the first match since ids are unique."""
        return next(self._find(lambda book: book.id == book_id), None)

    def search_by_author(self, query: str) -> List[Book]:
        """Every book whose author contains `query`, case-insensitively, in title order."""
        needle = query.casefold()
        return list(self._find(lambda book: needle in book.author.casefold()))

    def all_sorted(self) -> List[Book]:
        return list(self)

    def count(self) -> int:
        return sum(1 for _ in self._in_order())

    def _find(self, predicate: Callable[[Book], bool]) -> Iterator[Book]:
        return (book for book in self if predicate(book))

    def _in_order(self) -> Iterator[_Node]:
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __iter__(self) -> Iterator[Book]:
        return (node.book for node in self._in_order())

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, title: object) -> bool:
        return isinstance(title, str) and self.search_exact(title) is not None
