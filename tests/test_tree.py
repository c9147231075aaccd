import pytest

from treelist.tree import BinaryTree, TreeNode


def build(text):
    tree = BinaryTree()
    for ch in text:
        tree.insert(ch)
    return tree


def test_empty_tree_defaults():
    tree = BinaryTree()
    assert tree.root is None
    assert tree.height() == -1
    assert tree.total_value() == 0
    assert tree.inorder() == []
    assert tree.render() == ""


def test_first_insert_becomes_root():
    tree = build("m")
    assert tree.root == TreeNode("m")
    assert tree.height() == 0


def test_inorder_is_sorted_and_unique():
    text = "hello world"
    tree = build(text)
    assert tree.inorder() == sorted(set(text))


def test_duplicates_are_ignored():
    once = build("abc")
    twice = build("abcabc")
    assert once.inorder() == twice.inorder()
    assert once.total_value() == twice.total_value()
    assert once.render() == twice.render()


def test_smaller_goes_left_larger_right():
    tree = build("bac")
    assert tree.root.value == "b"
    assert tree.root.left.value == "a"
    assert tree.root.right.value == "c"


def test_height_of_chain_and_balanced():
    assert build("abcd").height() == 3
    assert build("bac").height() == 1


def test_total_value_single_node_is_code_point():
    assert build("z").total_value() == ord("z")


def test_total_value_left_child_weighted():
    assert build("ba").total_value() == 389


def test_total_value_left_weighs_more_than_right():
    left_heavy = build("ba")
    right_heavy = build("ab")
    assert left_heavy.total_value() > right_heavy.total_value()


def test_mirror_reverses_inorder():
    tree = build("dbfaceg")
    before = tree.inorder()
    assert tree.mirror() is True
    assert tree.inorder() == list(reversed(before))


def test_mirror_twice_restores():
    tree = build("dbfaceg")
    render = tree.render()
    total = tree.total_value()
    tree.mirror()
    tree.mirror()
    assert tree.render() == render
    assert tree.total_value() == total


def test_mirror_empty_returns_false():
    tree = BinaryTree()
    assert tree.mirror() is False
    assert tree.root is None


def test_mirror_keeps_height():
    tree = build("abcde")
    tree.mirror()
    assert tree.height() == 4


def test_render_single_node():
    assert build("x").render() == "x\n \n"


def test_render_small_tree():
    assert build("bac").render() == " b \n.. \na c\n   \n"


def test_render_mirrored_small_tree():
    tree = build("bac")
    tree.mirror()
    assert tree.render().splitlines()[2] == "c a"


def test_render_shape_invariants():
    tree = build("the quick brown fox")
    lines = tree.render().split("\n")
    assert lines[-1] == ""
    body = lines[:-1]
    width = (1 << (tree.height() + 1)) - 1
    assert len(body) == 2 * (tree.height() + 1)
    assert all(len(line) == width for line in body)
    node_chars = sorted(ch for line in body[0::2] for ch in line if ch != " ")
    assert node_chars == sorted(c for c in tree.inorder() if c != " ")


@pytest.mark.parametrize("bad", ["", "ab"])
def test_insert_rejects_non_single_char(bad):
    with pytest.raises(ValueError):
        BinaryTree().insert(bad)


def test_insert_rejects_non_string():
    with pytest.raises(TypeError):
        BinaryTree().insert(65)