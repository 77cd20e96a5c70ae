from dirtally.domain.model import DirPath


def test_root_renders_as_slash():
    assert str(DirPath.root()) == "/"
    assert DirPath.root().depth == 0
    assert DirPath.root().prefixes() == (DirPath.root(),)


def test_paths_compare_by_segments():
    assert DirPath(("a", "e")) == DirPath(tuple(["a", "e"]))
    assert hash(DirPath(("a",))) == hash(DirPath(("a",)))
    assert DirPath(("a",)) != DirPath(("e",))
    assert sorted([DirPath(("b",)), DirPath.root(), DirPath(("a", "z"))]) == [
        DirPath.root(),
        DirPath(("a", "z")),
        DirPath(("b",)),
    ]


def test_prefixes_are_root_first():
    p = DirPath(("a", "e"))
    assert p.prefixes() == (DirPath.root(), DirPath(("a",)), p)
    assert p.depth == 2
    assert str(p) == "/a/e"
