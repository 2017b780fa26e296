import pytest

from binarysearchtree import BinarySearchTree, breadth_first_levels, breadth_first_lines


def test_empty_tree_renders_nothing():
    assert breadth_first_levels(None) == []
    assert list(BinarySearchTree().breadth_first_lines()) == []


def test_levels_carry_inorder_columns():
    tree = BinarySearchTree([50, 30, 70, 20, 80])
    assert breadth_first_levels(tree.root) == [
        [(2, 50)],
        [(1, 30), (3, 70)],
        [(0, 20), (4, 80)],
    ]


def test_missing_child_leaves_column_unused():
    tree = BinarySearchTree([2, 1, 3, 4])
    levels = breadth_first_levels(tree.root)
    assert levels[-1] == [(3, 4)]
    assert len(levels) == 3


def test_each_label_on_its_level():
    tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
    lines = list(tree.breadth_first_lines())
    # label line, branch line, blank line per level
    assert len(lines) == 9
    assert lines[0].split() == ["50"]
    assert lines[3].split() == ["30", "70"]
    assert lines[6].split() == ["20", "40", "60", "80"]
    assert lines[1].strip() == "/  \\"
    assert lines[2] == ""


def test_layout_narrows_with_depth():
    tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
    lines = list(tree.breadth_first_lines())
    indents = [len(lines[i]) - len(lines[i].lstrip()) for i in (0, 3, 6)]
    assert indents[0] > indents[1] > indents[2]


def test_custom_label():
    tree = BinarySearchTree([2, 1])
    lines = list(breadth_first_lines(tree.root, label=lambda item: f"<{item}>"))
    assert "<2>" in lines[0]
    assert "<1>" in lines[3]


@pytest.mark.timeout(10)
def test_degenerate_tree_stays_narrow():
    tree = BinarySearchTree(range(1, 61))
    lines = list(tree.breadth_first_lines())
    assert len(lines) == 3 * 60
    assert lines[-3].split() == ["60"]
    assert max(len(line) for line in lines) < 400
