from lsh.core.search_path import SearchPath


def test_default_search_path_is_bin() -> None:
    assert SearchPath().directories == ("/bin",)


def test_replace_discards_previous_entries() -> None:
    search_path = SearchPath(["/bin", "/usr/bin"])
    search_path.replace(["/opt/a", "/opt/b"])
    assert list(search_path) == ["/opt/a", "/opt/b"]
    assert len(search_path) == 2


def test_replace_with_nothing_empties_path() -> None:
    search_path = SearchPath()
    search_path.replace([])
    assert list(search_path) == []
    assert len(search_path) == 0


def test_iteration_is_a_snapshot() -> None:
    search_path = SearchPath(["/a"])
    seen = []
    for directory in search_path:
        seen.append(directory)
        search_path.replace(["/b", "/c"])
    assert seen == ["/a"]
