"""Level-order rendering of binary trees as indented text lines."""


def _inorder_columns(root):
    columns = {}
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        columns[id(node)] = len(columns)
        node = node.right
    return columns


def breadth_first_levels(root):
    """
    Collect node payloads level by level as ``(column, data)`` pairs.

    ``column`` is the node's in-order position, so a missing child leaves an
    unused column instead of shifting its neighbours. Size is linear in the
    number of nodes whatever the height.
    """
    if root is None:
        return []

    columns = _inorder_columns(root)
    levels = []
    current = [root]
    while current:
        levels.append([(columns[id(node)], node.data) for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def breadth_first_lines(root, label=str):
    """
    Yield the lines of a drawing of the tree rooted at ``root``.

    Each node gets its own horizontal cell in in-order sequence, so a
    complete tree draws as a triangle whose sibling spacing halves with
    depth, and a degenerate tree stays as wide as its labels.
    """
    levels = breadth_first_levels(root)
    labels = {column: label(data) for level in levels for column, data in level}

    offsets = {}
    position = 0
    for column in sorted(labels):
        offsets[column] = position
        position += len(labels[column]) + 3

    for level in levels:
        names = ""
        branches = ""
        for column, _ in level:
            text = labels[column]
            names += " " * (offsets[column] - len(names)) + " " + text
            branches += " " * (offsets[column] - len(branches)) + "/" + " " * len(text) + "\\"
        yield names
        yield branches
        yield ""
