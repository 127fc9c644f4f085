# bst.py
import logging

from algoviz.errors import EmptyStructureError, InvalidInputError
from algoviz.structures.linked_list import collect_search, search_step
from algoviz.trace import generate_id

logger = logging.getLogger(__name__)


class TreeNode:
    def __init__(self, value):
        self.value = value
        self.id = generate_id()
        self.left = None
        self.right = None


class BinarySearchTree:
    """
    Unbalanced binary search tree: left subtree < node < right subtree.
    The order is enforced on insert only; there is no deletion and no
    rebalancing. Duplicate values are rejected.
    """

    kind = "bst"

    def __init__(self, values=()):
        self.root = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self):
        return self._size

    def __contains__(self, value):
        return self.root is not None and self.search(value).found

    def is_empty(self) -> bool:
        return self.root is None

    def insert(self, value) -> TreeNode:
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            self._size += 1
            logger.debug("bst: %s inserted as root", value)
            return node

        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
            else:
                raise InvalidInputError(f"Value {value} is already in the tree")

        self._size += 1
        logger.debug("bst: %s inserted under %s", value, current.value)
        return node

    def iter_search(self, value, delay=1.0):
        """Comparison descent from the root, one highlighted node per step."""
        if self.root is None:
            raise EmptyStructureError("The tree is empty; there is nothing to search")
        return self._search_steps(value, delay)

    def _search_steps(self, value, delay):
        current = self.root
        depth = 0
        while current is not None:
            yield search_step("visit", f"Compare {value} with {current.value}", delay, current.id, depth)
            if value == current.value:
                yield search_step("found", f"Found: value {value} is in the tree", delay,
                                  current.id, depth, found=True)
                return
            current = current.left if value < current.value else current.right
            depth += 1
        yield search_step("not_found", f"Value {value} does not exist in the tree", 0, found=False)

    def search(self, value):
        return collect_search(self.iter_search(value, delay=0))

    def inorder(self) -> list:
        result = []

        def walk(node):
            if node is None:
                return
            walk(node.left)
            result.append(node.value)
            walk(node.right)

        walk(self.root)
        return result

    def height(self) -> int:
        def h(node):
            if node is None:
                return 0
            return 1 + max(h(node.left), h(node.right))
        return h(self.root)

    def layout(self) -> list:
        """
        Drawing positions: x is the in-order rank, y the depth. Returns node
        dicts with parent ids so the renderer can draw the links.
        """
        positions = []
        rank = [0]

        def walk(node, depth, parent_id):
            if node is None:
                return
            walk(node.left, depth + 1, node.id)
            positions.append({"id": node.id, "value": node.value, "x": rank[0], "y": depth, "parent": parent_id})
            rank[0] += 1
            walk(node.right, depth + 1, node.id)

        walk(self.root, 0, None)
        return positions
