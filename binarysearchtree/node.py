class Node:
    """Singly-linked node: one payload and a pointer to the next node."""

    def __init__(self, data, next=None):
        self.data = data
        self.next = next

    def __str__(self):
        return str(self.data)

    def __repr__(self):
        return f"Node({self.data!r})"


class BinaryNode:
    """Tree node owning at most two children."""

    def __init__(self, data, left=None, right=None):
        self.data = data
        self.left = left
        self.right = right

    def is_leaf(self):
        return self.left is None and self.right is None

    def __str__(self):
        return str(self.data)

    def __repr__(self):
        return f"BinaryNode({self.data!r})"


def iter_linked(head):
    node = head
    while node is not None:
        yield node.data
        node = node.next
