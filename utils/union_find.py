"""
Union-Find (Disjoint Set Union) data structure.

Efficient data structure for tracking disjoint sets with:
- find(x): Which set contains x? - O(α(n)) amortized
- merge(x, y): Merge sets containing x and y - O(α(n)) amortized
- connected(x, y): Are x and y in the same set? - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

Used by Kruskal's algorithm in utils/graph.py, one forest per spanning tree.
"""

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

Element = TypeVar("Element", bound=Hashable)


class DisjointSet(Generic[Element]):
    """
    Union-Find with path compression and union by size.

    Every element starts in its own singleton set. Elements are fixed at
    construction, looking up an unknown element raises KeyError.

    Example:
        >>> forest = DisjointSet(range(1, 5))
        >>> forest.merge(1, 2)
        >>> forest.merge(2, 3)
        >>> forest.connected(1, 3)
        True
        >>> forest.connected(1, 4)
        False
    """

    def __init__(self, elements: Iterable[Element]) -> None:
        self._parent: dict[Element, Element] = {}
        self._size: dict[Element, int] = {}
        for element in elements:
            self._parent[element] = element
            self._size[element] = 1

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def find(self, element: Element) -> Element:
        """
        Find the representative (root) of the set containing element.

        Uses path compression: flattens the tree by pointing all nodes
        along the path directly to the root.
        """
        # Find root
        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression: point all nodes to root
        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def merge(self, x: Element, y: Element) -> None:
        """
        Merge the sets containing x and y.

        Uses union by size: the root of the smaller tree is attached under
        the root of the larger one. Does nothing if both are already joined.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return

        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x

        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]

    def connected(self, x: Element, y: Element) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def size(self, element: Element) -> int:
        """Number of elements in the set containing element."""
        return self._size[self.find(element)]

    def components(self) -> dict[Element, set[Element]]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members.
        """
        sets: dict[Element, set[Element]] = {}
        for element in self._parent:
            sets.setdefault(self.find(element), set()).add(element)
        return sets
