import pytest

from letterboxed.cli import main


@pytest.fixture
def dictionary(tmp_path):
    dict_file = tmp_path / "valid_words.txt"
    dict_file.write_text("adgj\njbehk\nkcfil\nco-op\n")
    return str(dict_file)


def test_count_only(dictionary, capsys):
    code = main(["--letters", "ABC,DEF,GHI,JKL", "--dictionary", dictionary, "--count-only"])
    assert code == 0
    out = capsys.readouterr().out
    assert " - Letters: ABC,DEF,GHI,JKL" in out
    assert " - Solutions: 1" in out


def test_invalid_letters_exit(dictionary, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--letters", "ABC,DEF", "--dictionary", dictionary])
    assert exc.value.code == 2
    assert "2 grouping(s) provided" in capsys.readouterr().err


def test_missing_letters_exit(dictionary, capsys):
    with pytest.raises(SystemExit):
        main(["--dictionary", dictionary])
    assert "No letters provided" in capsys.readouterr().err


def test_unreadable_dictionary(tmp_path, capsys):
    code = main(["--letters", "ABC,DEF,GHI,JKL", "--dictionary", str(tmp_path / "missing.txt")])
    assert code == 1
    assert "Error: could not read word list" in capsys.readouterr().err


def test_interactive_session(dictionary, capsys, monkeypatch):
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nexit\n"))
    code = main(["--letters", "ABC,DEF,GHI,JKL", "--dictionary", dictionary])
    assert code == 0
    assert "There are 1 valid words starting with 'a': ['ADGJ']" in capsys.readouterr().out
