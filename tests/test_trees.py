import pytest

from algopractice.trees import (
    TreeNode,
    find_value,
    first_child,
    flatten,
    inorder,
    inorder_iter,
    is_same_tree,
    max_depth,
    min_depth,
    min_depth_bfs,
    postorder,
    postorder_iter,
    preorder,
    preorder_iter,
    sum_values,
)


def traversal_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5, TreeNode(6), TreeNode(7))),
        TreeNode(3, None, TreeNode(8, TreeNode(9))),
    )


def min_depth_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5, TreeNode(6))),
        TreeNode(3, TreeNode(7)),
    )


def left_chain(n):
    root = None
    for value in range(n, 0, -1):
        root = TreeNode(value, root)
    return root


def right_chain(n):
    root = None
    for value in range(n, 0, -1):
        root = TreeNode(value, None, root)
    return root


def bst_insert(root, value):
    if root is None:
        return TreeNode(value)
    if value < root.val:
        root.left = bst_insert(root.left, value)
    else:
        root.right = bst_insert(root.right, value)
    return root


def build_bst(values):
    root = None
    for value in values:
        root = bst_insert(root, value)
    return root


TREES = [
    traversal_tree,
    min_depth_tree,
    lambda: left_chain(5),
    lambda: right_chain(4),
    lambda: build_bst([50, 30, 70, 20, 40, 60, 80, 35]),
    lambda: TreeNode(42),
]


def test_inorder_of_traversal_tree():
    assert inorder(traversal_tree()) == [4, 2, 6, 5, 7, 1, 3, 9, 8]


@pytest.mark.parametrize("make", TREES)
def test_iterative_traversals_match_recursive(make):
    root = make()
    assert inorder_iter(root) == inorder(root)
    assert preorder_iter(root) == preorder(root)
    assert postorder_iter(root) == postorder(root)


@pytest.mark.parametrize(
    "func", [inorder, inorder_iter, preorder, preorder_iter, postorder, postorder_iter]
)
def test_traversals_of_empty_tree(func):
    assert func(None) == []


@pytest.mark.parametrize("make", TREES)
def test_traversals_visit_every_node_once(make):
    root = make()
    expected = sorted(inorder(root))
    assert sorted(preorder(root)) == expected
    assert sorted(postorder(root)) == expected


@pytest.mark.parametrize("make", TREES)
def test_root_position_in_traversals(make):
    root = make()
    assert preorder(root)[0] == root.val
    assert postorder(root)[-1] == root.val


def test_inorder_of_bst_is_sorted():
    values = [50, 30, 70, 20, 40, 60, 80, 35]
    assert inorder(build_bst(values)) == sorted(values)


def test_preorder_postorder_reverse_on_chain():
    root = left_chain(6)
    assert preorder(root) == list(range(1, 7))
    assert postorder(root) == list(range(6, 0, -1))


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_depths_of_chain(n):
    for root in (left_chain(n), right_chain(n)):
        assert max_depth(root) == n
        assert min_depth(root) == n
        assert min_depth_bfs(root) == n


@pytest.mark.parametrize("func", [max_depth, min_depth, min_depth_bfs])
def test_depth_of_empty_tree(func):
    assert func(None) == 0


def test_min_depth_of_sample_tree():
    root = min_depth_tree()
    assert min_depth(root) == 3
    assert min_depth_bfs(root) == min_depth(root)


@pytest.mark.parametrize("make", TREES)
def test_min_depth_agrees_and_bounded(make):
    root = make()
    assert min_depth(root) == min_depth_bfs(root)
    assert 1 <= min_depth(root) <= max_depth(root)


def test_min_depth_ignores_missing_child():
    root = TreeNode(1, TreeNode(2, TreeNode(3, TreeNode(4))), TreeNode(5, TreeNode(6)))
    assert min_depth(root) == max_depth(root.right) + 1
    assert min_depth_bfs(root) == min_depth(root)


@pytest.mark.parametrize("make", TREES)
def test_sum_values_matches_traversal(make):
    root = make()
    assert sum_values(root) == sum(inorder(root))


def test_sum_values_of_empty_tree():
    assert sum_values(None) == 0


def test_is_same_tree_for_equal_builds():
    assert is_same_tree(traversal_tree(), traversal_tree()) is True
    assert is_same_tree(None, None) is True


def test_is_same_tree_detects_shape_difference():
    p = TreeNode(1, TreeNode(2), TreeNode(3))
    q = TreeNode(1, None, TreeNode(3))
    assert is_same_tree(p, q) is False
    assert is_same_tree(p, None) is False
    assert is_same_tree(None, q) is False


def test_is_same_tree_detects_value_difference():
    p = traversal_tree()
    q = traversal_tree()
    q.right.right.left.val = 99
    assert is_same_tree(p, q) is False


def test_find_value_in_bst():
    values = [50, 30, 70, 20, 40, 60, 80, 35]
    root = build_bst(values)
    assert all(find_value(root, v) for v in values)
    assert not any(find_value(root, v) for v in (10, 33, 55, 90, 45))


def test_find_value_in_sample_tree():
    root = TreeNode(10, TreeNode(16, TreeNode(21), TreeNode(13)), TreeNode(5))
    assert find_value(root, 55) is False
    assert find_value(root, 10) is True


def test_find_value_in_empty_tree():
    assert find_value(None, 1) is False


@pytest.mark.parametrize("make", TREES)
def test_flatten_produces_preorder_chain(make):
    root = make()
    expected = preorder(root)
    flatten(root)
    chain = []
    node = root
    while node is not None:
        assert node.left is None
        chain.append(node.val)
        node = node.right
    assert chain == expected


def test_flatten_empty_tree():
    assert flatten(None) is None


def test_first_child_prefers_left():
    root = traversal_tree()
    assert first_child(root) is root.left


def test_first_child_falls_back_to_right_then_self():
    only_right = TreeNode(1, None, TreeNode(2))
    assert first_child(only_right) is only_right.right
    leaf = TreeNode(7)
    assert first_child(leaf) is leaf
    assert first_child(None) is None