import io

import pytest

from wordgraphs.ladder import (
    NoPathError,
    WordGraph,
    WordNotFoundError,
    are_connected,
    main,
    read_words,
)

WORDS = ["aaaaa", "aaaab", "aaabb", "bbbbb", "ccccc", "ccccd", "zzzzz"]


@pytest.fixture
def graph():
    return WordGraph(WORDS)


def test_read_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("which\nthere\nthose\n", encoding="utf-8")
    assert read_words(path) == ["which", "there", "those"]


def test_read_words_crlf_and_no_trailing_newline(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"which\r\nthere")
    assert read_words(path) == ["which", "there"]


def test_are_connected_one_letter():
    assert are_connected("aaaaa", "aaaab")


def test_are_connected_rejects_same_word():
    assert not are_connected("aaaaa", "aaaaa")


def test_are_connected_rejects_many_differences():
    assert not are_connected("aaaaa", "aabbb")


def test_neighbours_in_dictionary_order(graph):
    assert graph.neighbours("aaaab") == ["aaaaa", "aaabb"]


def test_neighbours_are_symmetric_and_connected(graph):
    for word in graph.words:
        for other in graph.neighbours(word):
            assert are_connected(word, other)
            assert word in graph.neighbours(other)


def test_neighbours_unknown_word(graph):
    with pytest.raises(WordNotFoundError):
        graph.neighbours("qqqqq")


def test_isolated_words(graph):
    assert graph.isolated_words() == ["bbbbb", "zzzzz"]


def test_count_components(graph):
    assert graph.count_components() == 2


def test_shortest_path_chain(graph):
    assert graph.shortest_path("aaaaa", "aaabb") == ["aaaaa", "aaaab", "aaabb"]


def test_shortest_path_to_itself(graph):
    assert graph.shortest_path("aaaaa", "aaaaa") == ["aaaaa"]


def test_shortest_path_prefers_direct_edge():
    words = ["aaaaa", "baaaa", "bbaaa", "abaaa"]
    assert WordGraph(words).shortest_path("aaaaa", "abaaa") == ["aaaaa", "abaaa"]


def test_shortest_path_steps_are_connected():
    words = ["stone", "store", "score", "scare", "share", "shore", "spore"]
    path = WordGraph(words).shortest_path("stone", "share")
    assert path[0] == "stone"
    assert path[-1] == "share"
    assert all(are_connected(a, b) for a, b in zip(path, path[1:]))


def test_shortest_path_missing_word(graph):
    with pytest.raises(WordNotFoundError) as info:
        graph.shortest_path("aaaaa", "qqqqq")
    assert info.value.word == "qqqqq"


def test_shortest_path_no_path(graph):
    with pytest.raises(NoPathError) as info:
        graph.shortest_path("aaaaa", "ccccc")
    assert (info.value.start, info.value.end) == ("aaaaa", "ccccc")


def test_not_found_is_lookup_error(graph):
    with pytest.raises(LookupError):
        graph.shortest_path("qqqqq", "aaaaa")


def _dictionary(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(path)


def test_main_prints_path(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("aaaaa\naaabb\n"))
    assert main([_dictionary(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Có 2 thành phần liên thông trong đồ thị" in out
    assert "Đường đi ngắn nhất từ aaaaa đến aaabb như sau" in out
    assert "aaabb <- aaaab <- aaaaa \n" in out


def test_main_reports_missing_words(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("qqqqq\nrrrrr\n"))
    assert main([_dictionary(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Đồ thị không chứa qqqqq" in out
    assert "Đồ thị không chứa rrrrr" in out


def test_main_reports_no_path(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("aaaaa\nccccc\n"))
    assert main([_dictionary(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Không tồn tại đường đi từ aaaaa đến ccccc trong đồ thị này" in out