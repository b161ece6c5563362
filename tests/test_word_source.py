import json
import random
from pathlib import Path

from speedtyper import word_source
from speedtyper.word_source import load_wordlist, load_wordlists, load_words_from_file, sample_words


def test_bundled_wordlists_load() -> None:
    wordlists = load_wordlists()
    assert {"python", "english"} <= set(wordlists)
    python = wordlists["python"]
    assert python.title == "Python vocabulary"
    assert python.words[:3] == ("variable", "function", "loop")
    assert all(word and not any(ch.isspace() for ch in word) for word in python.words)


def test_load_wordlist_default_and_unknown() -> None:
    assert load_wordlist().id == word_source.DEFAULT_WORDLIST
    try:
        load_wordlist("klingon")
        raise AssertionError("Expected KeyError for unknown list.")
    except KeyError as exc:
        assert exc.args[0] == "klingon"


def test_load_words_from_text_file(tmp_path: Path) -> None:
    path = tmp_path / "mine.txt"
    path.write_text("# practice words\nalpha beta\n\n  gamma\n", encoding="utf-8")
    wordlist = load_words_from_file(path)
    assert wordlist.id == "mine"
    assert wordlist.words == ("alpha", "beta", "gamma")


def test_load_words_from_json_file(tmp_path: Path) -> None:
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"id": "custom", "title": "Custom", "words": ["one", "two"]}), encoding="utf-8")
    wordlist = load_words_from_file(path)
    assert wordlist.title == "Custom"
    assert wordlist.words == ("one", "two")


def test_json_entry_with_whitespace_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"id": "bad", "words": ["fine", "list comprehension"]}), encoding="utf-8")
    try:
        load_words_from_file(path)
        raise AssertionError("Expected ValueError for word containing whitespace.")
    except ValueError as exc:
        assert "contains whitespace" in str(exc)


def test_empty_sources_rejected(tmp_path: Path) -> None:
    text_path = tmp_path / "empty.txt"
    text_path.write_text("# nothing here\n", encoding="utf-8")
    json_path = tmp_path / "empty.json"
    json_path.write_text(json.dumps({"id": "empty", "words": []}), encoding="utf-8")
    root_path = tmp_path / "root.json"
    root_path.write_text(json.dumps(["a", "b"]), encoding="utf-8")
    for path, message in ((text_path, "has no words"), (json_path, "has no words"), (root_path, "JSON object")):
        try:
            load_words_from_file(path)
            raise AssertionError(f"Expected ValueError for {path.name}.")
        except ValueError as exc:
            assert message in str(exc)


def test_non_string_entry_rejected(tmp_path: Path) -> None:
    path = tmp_path / "numbers.json"
    path.write_text(json.dumps({"id": "numbers", "words": ["one", 2]}), encoding="utf-8")
    try:
        load_words_from_file(path)
        raise AssertionError("Expected ValueError for non-string entry.")
    except ValueError as exc:
        assert "position 1" in str(exc)


def test_sample_words_is_seeded_and_unique_within_list() -> None:
    words = ("a", "b", "c", "d", "e")
    first = sample_words(words, 4, random.Random(7))
    second = sample_words(words, 4, random.Random(7))
    assert first == second
    assert len(first) == 4
    assert len(set(first)) == 4


def test_sample_words_larger_than_list_uses_every_word() -> None:
    words = ("a", "b", "c")
    picked = sample_words(words, 8, random.Random(1))
    assert len(picked) == 8
    assert set(picked[:3]) == set(words)


def test_sample_words_none_keeps_order() -> None:
    assert sample_words(("x", "y"), None) == ["x", "y"]


def test_sample_words_rejects_bad_input() -> None:
    for words, count in (((), 3), (("a",), 0), (("a",), -1)):
        try:
            sample_words(words, count)
            raise AssertionError("Expected ValueError.")
        except ValueError:
            pass
