from algokit.tree_problems import TreeNode, vertical_traversal


def _values(node):
    if node is None:
        return []
    return [node.val, *_values(node.left), *_values(node.right)]


def _sample():
    return TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))


def test_source_example():
    assert vertical_traversal(_sample()) == [[9], [3, 15], [20], [7]]


def test_same_cell_values_are_sorted():
    root = TreeNode(1, TreeNode(2, right=TreeNode(6)), TreeNode(3, left=TreeNode(5)))
    assert vertical_traversal(root) == [[2], [1, 5, 6], [3]]


def test_empty_tree():
    assert vertical_traversal(None) == []


def test_single_node():
    assert vertical_traversal(TreeNode(42)) == [[42]]


def test_every_value_appears_once():
    root = TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )
    result = vertical_traversal(root)
    assert sorted(v for column in result for v in column) == sorted(_values(root))


def test_left_chain_columns_run_leftmost_first():
    root = TreeNode(1, TreeNode(2, TreeNode(3, TreeNode(4))))
    assert vertical_traversal(root) == [[4], [3], [2], [1]]


def test_root_is_first_in_its_column():
    root = _sample()
    result = vertical_traversal(root)
    root_column = next(column for column in result if root.val in column)
    assert root_column[0] == root.val