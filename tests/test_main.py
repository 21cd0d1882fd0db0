# tests/test_main.py - запуск командной строки целиком
import json

import pytest
import config
import main as cli


@pytest.fixture(autouse=True)
def no_env(monkeypatch):
    for name in ("MARKOV_BOOK", "MARKOV_MAX_STEPS", "MARKOV_SEED", "MARKOV_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **kw: False)


@pytest.fixture
def book(tmp_path):
    p = tmp_path / "book.txt"
    p.write_text("The cat sat. The cat ran!", encoding="utf-8")
    return str(p)


def test_generates_sentence(book, capsys):
    assert cli.main(["-f", book, "--seed", "1"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1
    assert out[0].startswith("The ")
    assert out[0].endswith(("sat.", "ran!"))


def test_count_and_mode(book, capsys):
    assert cli.main(["-f", book, "-n", "3", "--mode", "classes", "--seed", "2"]) == 0
    assert len(capsys.readouterr().out.strip().splitlines()) == 3


def test_stats(book, capsys):
    assert cli.main(["-f", book, "-s"]) == 0
    out = capsys.readouterr().out
    assert "Статистика:" in out
    assert "2 слов с заглавной буквы" in out
    assert "0 слов с запятой" in out
    assert "2 чистых слов" in out
    assert "6 слов всего" in out


def test_graph_dump(book, capsys):
    assert cli.main(["-f", book, "-g"]) == 0
    out = capsys.readouterr().out
    start = out.index("{")
    end = out.index("Стартовые слова:")
    assert json.loads(out[start:end]) == {"The": {"cat": 2}, "cat": {"sat.": 1, "ran!": 1}, "sat.": {"The": 1}}
    assert "['The', 'The']" in out


def test_no_start_word(tmp_path, capsys):
    p = tmp_path / "lower.txt"
    p.write_text("cat sat. dog ran!", encoding="utf-8")
    assert cli.main(["-f", str(p)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Ошибка: [start]")


def test_missing_file(tmp_path, capsys):
    assert cli.main(["-f", str(tmp_path / "missing.txt")]) == 1
    assert "Ошибка:" in capsys.readouterr().err


def test_bad_max_steps(book, capsys):
    assert cli.main(["-f", book, "--max-steps", "0"]) == 2


def test_default_book(capsys):
    assert cli.main(["--seed", "3", "--max-steps", "200"]) == 0
    assert capsys.readouterr().out.strip()
