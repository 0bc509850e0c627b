import pytest

from xvsix.find import find, fmtname, main


@pytest.mark.parametrize(
    "path, expected",
    [("a/b/c", "c"), ("name", "name"), ("/abs/file.txt", "file.txt"), ("dir/", "")],
)
def test_fmtname(path, expected):
    assert fmtname(path) == expected


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "target").write_text("1")
    (tmp_path / "a" / "b" / "target").write_text("2")
    (tmp_path / "a" / "other").write_text("3")
    return tmp_path


def test_find_recurses(tree):
    root = str(tree)
    assert sorted(find(root, "target")) == sorted(
        [f"{root}/a/target", f"{root}/a/b/target"]
    )


def test_find_no_match(tree):
    assert list(find(str(tree), "absent")) == []


def test_find_directories_are_not_reported(tree):
    assert list(find(str(tree), "b")) == []


def test_find_on_file(tree):
    path = f"{tree}/a/other"
    assert list(find(path, "other")) == [path]


def test_find_missing(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    assert list(find(missing, "x")) == []
    assert capsys.readouterr().err == f"find: cannot open {missing}\n"


def test_path_too_long(tmp_path, capsys):
    deep = tmp_path
    while len(str(deep)) <= 500:
        deep = deep / ("d" * 100)
        deep.mkdir()
    (deep / "x").write_text("")
    assert list(find(str(deep), "x")) == []
    assert "find: path too long" in capsys.readouterr().out


def test_main_prints(tree, capsys):
    assert main([str(tree), "other"]) == 0
    assert capsys.readouterr().out == f"{tree}/a/other\n"


def test_main_too_few_args(capsys):
    assert main(["."]) == 0
    assert capsys.readouterr().out == ""