# tests/test_text_processor.py
# разбиение на слова и классы слов

import pytest
from text_processor import TextProcessor, WordStats, tokenize


def test_tokenize_keeps_case_and_marks():
    assert tokenize("The cat sat. The cat ran!") == ["The", "cat", "sat.", "The", "cat", "ran!"]


def test_tokenize_drops_digits_and_loose_punctuation():
    assert tokenize("Room 101 - hello, world ... bye?") == ["Room", "hello,", "world", "bye?"]


def test_tokenize_apostrophes_and_hyphens():
    assert tokenize("don't stop, rock-n-roll") == ["don't", "stop,", "rock", "n", "roll"]


def test_tokenize_cyrillic():
    assert tokenize("Привет, мир! Ёлка їжак ґанок.") == ["Привет,", "мир!", "Ёлка", "їжак", "ґанок."]


def test_capitalized_word_does_not_capture_terminal_mark():
    # у слова с заглавной буквы может быть только запятая
    assert tokenize("Stop. Wait,") == ["Stop", "Wait,"]


def test_tokenize_empty_and_junk():
    assert tokenize("") == []
    assert tokenize("123 ... !!! 42") == []


def test_tokenize_is_pure():
    text = "Один, два. Три четыре!"
    assert tokenize(text) == tokenize(text)


@pytest.mark.parametrize("word, cap, term, comma, clean", [
    ("The", True, False, False, False),
    ("cat", False, False, False, True),
    ("sat.", False, True, False, False),
    ("ran!", False, True, False, False),
    ("why?", False, True, False, False),
    ("well,", False, False, True, False),
    ("Мир,", True, False, True, False),
    ("co-", False, False, False, False),
])
def test_word_roles(word, cap, term, comma, clean):
    assert TextProcessor.is_capitalized(word) is cap
    assert TextProcessor.is_terminal(word) is term
    assert TextProcessor.has_comma(word) is comma
    assert TextProcessor.is_clean(word) is clean


def test_count_word_stats():
    words = tokenize("The cat sat, the dog ran! Why?")
    assert TextProcessor.count_word_stats(words) == WordStats(
        capitalized=2, with_comma=1, with_ending=1, clean=3, total=7
    )


def test_read_text_falls_back_to_cp1251(tmp_path):
    p = tmp_path / "book.txt"
    p.write_bytes("Привет мир.".encode("cp1251"))
    assert TextProcessor.read_text(str(p)) == "Привет мир."


def test_read_text_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TextProcessor.read_text(str(tmp_path / "nope.txt"))
