import logging

from .exceptions import DuplicateKeyError, NotFoundError
from .node import BinaryNode
from .render import breadth_first_lines

logger = logging.getLogger(__name__)


def _identity(item):
    return item


class BinarySearchTree:
    """
    Unbalanced binary search tree of unique keys.

    Items are ordered by ``key(item)`` (the item itself by default). Every
    mutation is a recursive descent that returns the possibly replaced
    subtree to its parent slot, so each node has exactly one owner.
    """

    def __init__(self, items=(), key=None):
        self.root = None
        self._key = key or _identity
        for item in items:
            self.insert(item)

    def insert(self, item):
        self.root = self._insert(self.root, item, self._key(item))
        logger.debug("Inserted %r", item)

    def _insert(self, node, item, key):
        if node is None:
            return BinaryNode(item)
        node_key = self._key(node.data)
        if key == node_key:
            raise DuplicateKeyError(key)
        if key < node_key:
            node.left = self._insert(node.left, item, key)
        else:
            node.right = self._insert(node.right, item, key)
        return node

    def search(self, key):
        node = self.root
        while node is not None:
            node_key = self._key(node.data)
            if key == node_key:
                return node.data
            node = node.left if key < node_key else node.right
        raise NotFoundError(key)

    def delete(self, key):
        self.root = self._delete(self.root, key)
        logger.debug("Deleted %r", key)

    def _delete(self, node, key):
        if node is None:
            raise NotFoundError(key)
        node_key = self._key(node.data)
        if key < node_key:
            node.left = self._delete(node.left, key)
            return node
        if key > node_key:
            node.right = self._delete(node.right, key)
            return node
        return self._excise(node)

    def _excise(self, node):
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        # Two children: take over the in-order predecessor's payload and
        # drop its old position, which has no right child.
        node.data = self._max_node(node.left).data
        node.left = self._delete_max(node.left)
        return node

    @staticmethod
    def _max_node(node):
        while node.right is not None:
            node = node.right
        return node

    def _delete_max(self, node):
        if node.right is None:
            return node.left
        node.right = self._delete_max(node.right)
        return node

    def min_item(self):
        if self.root is None:
            raise NotFoundError("min of empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def max_item(self):
        if self.root is None:
            raise NotFoundError("max of empty tree")
        return self._max_node(self.root).data

    # Traversals

    def preorder(self):
        items = []

        def visit(node):
            if node is not None:
                items.append(node.data)
                visit(node.left)
                visit(node.right)

        visit(self.root)
        return items

    def inorder(self):
        items = []

        def visit(node):
            if node is not None:
                visit(node.left)
                items.append(node.data)
                visit(node.right)

        visit(self.root)
        return items

    def postorder(self):
        items = []

        def visit(node):
            if node is not None:
                visit(node.left)
                visit(node.right)
                items.append(node.data)

        visit(self.root)
        return items

    def breadth_first_lines(self, label=str):
        return breadth_first_lines(self.root, label=label)

    def height(self):
        def depth(node):
            if node is None:
                return 0
            return 1 + max(depth(node.left), depth(node.right))

        return depth(self.root)

    def is_empty(self):
        return self.root is None

    def __len__(self):
        return len(self.inorder())

    def __iter__(self):
        return iter(self.inorder())

    def __contains__(self, key):
        try:
            self.search(key)
        except NotFoundError:
            return False
        return True

    def __str__(self):
        return ", ".join(str(item) for item in self.inorder())

    def __repr__(self):
        return f"BinarySearchTree({self.inorder()!r})"
