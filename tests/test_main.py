from textwrap import dedent

import pytest

import main
from thesispage.config import BEGIN_MARKER, END_MARKER

THESES_TXT = dedent("""
    Smith, J.
    2019
    Convection
    Jones, B.
    Virginia Tech
    PhD


    Adams, K.
    2020
    Echoes
    Brown, C.
    USask
    MS
    http://x

    Young, T.
    2003
    Drifts
    Green, D.
    Dartmouth
    BS
    http://y
""").lstrip("\n")


@pytest.fixture
def theses_file(tmp_path):
    path = tmp_path / "superdarn_theses.txt"
    path.write_text(THESES_TXT, encoding="utf-8")
    return path


def test_main_writes_fragment_to_stdout(theses_file, capsys):
    """
    A successful run prints the whole fragment and exits with 0.
    """
    code = main.main([str(theses_file), "--quiet"])
    out = capsys.readouterr().out

    assert code == 0
    assert out.startswith(BEGIN_MARKER + "\n")
    assert out.endswith(END_MARKER + "\n")
    assert out.index("Adams, K.") < out.index("Smith, J.") < out.index("Young, T.")
    assert "Number of items: <b>3</b>" in out
    assert "(1 MS | 1 PhD)" in out


def test_main_year_order(theses_file, capsys):
    code = main.main([str(theses_file), "--order", "year", "--quiet"])
    out = capsys.readouterr().out

    assert code == 0
    assert out.index("Adams, K.") < out.index("Smith, J.") < out.index("Young, T.")
    assert '<a href="#2003">2003</a>&nbsp;\n' in out
    assert "<a name=A-G></a>" not in out


def test_main_default_input_path(tmp_path, monkeypatch, capsys):
    """
    Without a positional argument the conventional file name is read from
    the working directory.
    """
    (tmp_path / "superdarn_theses.txt").write_text(THESES_TXT, encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert main.main(["--quiet"]) == 0
    assert "Number of items: <b>3</b>" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    """
    A missing input exits non-zero, prints nothing to stdout, and logs the
    diagnostic.
    """
    missing = tmp_path / "missing.txt"
    log_file = tmp_path / "logs" / "run.log"

    code = main.main([str(missing), "--log-file", str(log_file)])

    assert code == 1
    assert capsys.readouterr().out == ""
    assert f"File not found: {missing}" in log_file.read_text(encoding="utf-8")


def test_main_capacity_exceeded(theses_file, tmp_path, capsys):
    """
    Exceeding --max-records is a parse failure with no partial output.
    """
    log_file = tmp_path / "run.log"
    code = main.main([str(theses_file), "--max-records", "2", "--log-file", str(log_file)])

    assert code == 1
    assert capsys.readouterr().out == ""
    assert "Failed to parse input text file." in log_file.read_text(encoding="utf-8")


def test_main_output_file(theses_file, tmp_path, capsys):
    """
    --output writes the fragment to a file and leaves stdout empty.
    """
    out_path = tmp_path / "public" / "theses.html"
    code = main.main([str(theses_file), "--output", str(out_path), "--quiet"])

    assert code == 0
    assert capsys.readouterr().out == ""
    content = out_path.read_text(encoding="utf-8")
    assert content.startswith(BEGIN_MARKER)
    assert "Number of items: <b>3</b>" in content


def test_main_rejects_unknown_order(theses_file):
    with pytest.raises(SystemExit) as exc_info:
        main.main([str(theses_file), "--order", "title"])
    assert exc_info.value.code == 2


def test_main_rejects_non_positive_max_records(theses_file):
    """
    A record limit below 1 is an argument error, not a parse failure.
    """
    for value in ("0", "-3", "many"):
        with pytest.raises(SystemExit) as exc_info:
            main.main([str(theses_file), "--max-records", value])
        assert exc_info.value.code == 2, f"--max-records {value} should be rejected"


def test_main_accepts_max_records_at_limit(theses_file, capsys):
    assert main.main([str(theses_file), "--max-records", "3", "--quiet"]) == 0
    assert "Number of items: <b>3</b>" in capsys.readouterr().out
