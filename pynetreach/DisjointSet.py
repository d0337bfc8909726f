import logging
import numpy as np

from pynetreach.Network import _as_label


class DisjointSet:
    """
    A fixed-size Union-Find (Disjoint Set) data structure over the dense
    domain ``[0, num_elements)``.

    Uses union by rank and path compression, so any sequence of ``find`` and
    ``union`` calls runs in amortized near-constant time per operation.
    """

    def __init__(self, num_elements: int):
        """
        Initialize the structure with every element in its own set.

        Parameters
        ----------
        num_elements : int
            The number of elements in the domain.
        """

        if num_elements < 0:
            raise ValueError("The number of elements must be a non-negative number")

        self.num_elements = num_elements
        self.parent = np.arange(num_elements, dtype=np.intp)
        self.rank = np.zeros(num_elements, dtype=np.intp)  # only grows on roots
        self.num_components = num_elements

    def _check_element(self, element: int) -> int:
        """
        Validate an element and return it as a plain int.

        Parameters
        ----------
        element : int
            The element to validate.

        Returns
        -------
        int
            The element, normalized to a Python int.

        Raises
        ------
        TypeError
            If the element is not an integer (``bool`` included).
        IndexError
            If the element lies outside ``[0, num_elements)``.
        """

        element = _as_label(element, "element")
        if element < 0 or element >= self.num_elements:
            raise IndexError(f"Element {element} was not found")
        return element

    def find(self, element: int) -> int:
        """
        Find the representative of the set containing the element.

        Every element visited on the way to the root is re-pointed directly at
        the root.

        Parameters
        ----------
        element : int
            The element whose representative is to be found.

        Returns
        -------
        int
            The root element of the set.

        Raises
        ------
        TypeError
            If the element is not an integer.
        IndexError
            If the element lies outside ``[0, num_elements)``.
        """

        element = self._check_element(element)
        parent = self.parent

        root = element
        while parent[root] != root:
            root = parent[root]

        # second pass: compress
        while parent[element] != root:
            next_element = parent[element]
            parent[element] = root
            element = next_element

        return int(root)

    def union(self, element1: int, element2: int) -> None:
        """
        Merge the sets containing element1 and element2.

        Parameters
        ----------
        element1 : int
            An element of the first set.
        element2 : int
            An element of the second set.
        """

        root1 = self.find(element1)
        root2 = self.find(element2)

        if root1 == root2:
            logging.debug(
                "Elements %d and %d already share representative %d",
                element1, element2, root1,
            )
            return

        # Attach smaller rank tree under the larger rank tree
        if self.rank[root1] < self.rank[root2]:
            self.parent[root1] = root2
        elif self.rank[root1] > self.rank[root2]:
            self.parent[root2] = root1
        else:
            self.parent[root2] = root1
            self.rank[root1] += 1
        self.num_components -= 1

    def is_connected(self, element1: int, element2: int) -> bool:
        """
        Check whether two elements belong to the same set.

        Parameters
        ----------
        element1 : int
            First element.
        element2 : int
            Second element.

        Returns
        -------
        bool
            True if both elements share a representative, False otherwise.
        """

        return self.find(element1) == self.find(element2)

    def __len__(self) -> int:
        """
        Return the number of elements in the domain.

        Returns
        -------
        int
            The number of elements, fixed at construction.
        """

        return self.num_elements
