from application.services.mime_walker import iter_leaves
from domain.models import MimePart


def leaf(name):
    return MimePart(headers={"X-Name": [name]}, body=name)


def names(parts):
    return [p.headers["X-Name"][0] for p in parts]


def test_single_part_is_its_own_leaf():
    root = leaf("only")
    assert list(iter_leaves(root)) == [root]


def test_depth_first_left_to_right():
    root = MimePart(
        headers={},
        body="",
        children=(
            leaf("a"),
            MimePart(headers={}, body="", children=(leaf("b"), MimePart(headers={}, body="", children=(leaf("c"),)))),
            leaf("d"),
        ),
    )
    assert names(iter_leaves(root)) == ["a", "b", "c", "d"]


def test_containers_are_never_yielded():
    inner = MimePart(headers={}, body="ignored", children=(leaf("x"),))
    root = MimePart(headers={}, body="", children=(inner,))
    visited = list(iter_leaves(root))
    assert inner not in visited
    assert root not in visited
    assert names(visited) == ["x"]


def test_iterator_is_lazy_and_single_pass():
    root = MimePart(headers={}, body="", children=(leaf("a"), leaf("b")))
    it = iter_leaves(root)
    assert names([next(it)]) == ["a"]
    assert names(list(it)) == ["b"]
    assert list(it) == []
