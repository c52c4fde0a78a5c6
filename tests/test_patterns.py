import pytest

from cellsim.patterns import PatternLoader, load_pattern


@pytest.fixture
def folder(tmp_path):
    (tmp_path / "a.txt").write_text("010\n111\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("11\n11", encoding="utf-8")
    (tmp_path / "c.txt").write_text("1", encoding="utf-8")
    (tmp_path / "notes.md").write_text("111", encoding="utf-8")
    return tmp_path


def test_load_pattern(tmp_path):
    path = tmp_path / "glider.txt"
    path.write_text("010\n111\n", encoding="utf-8")
    assert load_pattern(path) == [[False, True, False], [True, True, True]]


def test_non_one_characters_are_dead(tmp_path):
    path = tmp_path / "p.txt"
    path.write_text("1x0.\n", encoding="utf-8")
    assert load_pattern(path) == [[True, False, False, False]]


def test_empty_file(tmp_path):
    path = tmp_path / "p.txt"
    path.write_text("", encoding="utf-8")
    assert load_pattern(path) == []


def test_loader_reads_only_txt(folder):
    loader = PatternLoader(folder)
    assert len(loader.patterns) == 3
    assert loader.current() == load_pattern(folder / "a.txt")


def test_next_cycles(folder):
    loader = PatternLoader(folder)
    first = loader.current()
    seen = []
    for _ in loader.patterns:
        loader.next()
        seen.append(loader.current())
    assert seen[-1] == first
    assert len({str(p) for p in seen}) == len(loader.patterns)


def test_previous_wraps_to_last(folder):
    loader = PatternLoader(folder)
    loader.previous()
    assert loader.current() == loader.patterns[-1]
    loader.next()
    assert loader.current() == loader.patterns[0]


def test_empty_folder(tmp_path):
    loader = PatternLoader(tmp_path)
    loader.next()
    loader.previous()
    with pytest.raises(IndexError):
        loader.current()


def test_missing_folder(tmp_path):
    with pytest.raises(FileNotFoundError):
        PatternLoader(tmp_path / "missing")


def test_reload_resets_selection(folder):
    loader = PatternLoader(folder)
    loader.next()
    (folder / "d.txt").write_text("0", encoding="utf-8")
    loader.load_patterns()
    assert len(loader.patterns) == 4
    assert loader.current() == load_pattern(folder / "a.txt")