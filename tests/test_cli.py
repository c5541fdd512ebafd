import argparse
import io

import pytest

from scoutcode import cli
from scoutcode.configuration import reset_settings_cache


def run_cli(capsys, *argv):
    exit_code = cli.main(list(argv))
    captured = capsys.readouterr()
    return exit_code, captured.out


def test_coerce_value():
    assert cli.coerce_value("3") == 3
    assert cli.coerce_value("-2") == -2
    assert cli.coerce_value("True") is True
    assert cli.coerce_value("off") is False
    assert cli.coerce_value("KEY") == "KEY"


def test_parse_encoder_spec():
    step = cli.parse_encoder_spec("vigenere:key=SCOUT, is-decoding-key=false")
    assert step.encoder_id == "vigenere"
    assert step.config == {"key": "SCOUT", "is_decoding_key": False}
    assert cli.parse_encoder_spec("morse").config == {}
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_encoder_spec("caesar:shift")


def test_encode_from_argument(capsys):
    assert run_cli(capsys, "-e", "binary", "--letter-separator", " ", "ABC") == (0, "1 10 11\n")
    assert run_cli(capsys, "-e", "caesar:shift=3", "Hello") == (0, "Khoor\n")


def test_chained_encoders(capsys):
    exit_code, out = run_cli(
        capsys, "-e", "morse", "-e", "morse-stylized", "--letter-separator", " ", "ET"
    )
    assert exit_code == 0
    assert out == "• ⸺\n"


def test_escaped_separators(capsys):
    exit_code, out = run_cli(
        capsys, "-e", "binary", "--letter-separator", ",", "--phrase-separator", "\\n", "A. B"
    )
    assert exit_code == 0
    assert out == "1\n10\n"


def test_encoder_errors_exit_with_one(capsys):
    exit_code, out = run_cli(capsys, "-e", "rot47", "abc")
    assert exit_code == 1
    assert out.startswith('[ENCODER_NOT_FOUND] Unknown encoder: "rot47"')

    exit_code, out = run_cli(capsys, "-e", "caesar", "abc")
    assert exit_code == 1
    assert out.startswith("[INVALID_CONFIG]")

    exit_code, out = run_cli(capsys, "-e", "binary", "?!")
    assert exit_code == 1
    assert out.startswith("[NO_CONTENT]")


def test_malformed_encoder_option_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-e", "caesar:shift", "abc"])
    assert excinfo.value.code == 2


def test_list_encoders(capsys):
    exit_code, out = run_cli(capsys, "--list")
    assert exit_code == 0
    assert "binary" in out and "Binary" in out
    assert "requires letters, produces twoSymbols" in out
    assert "emoji-digits" in out


def test_list_camouflages(capsys):
    exit_code, out = run_cli(capsys, "--camouflages", "morse")
    assert exit_code == 0
    first = out.splitlines()[0]
    assert "morse-stylized" in first and first.endswith("*")

    exit_code, out = run_cli(capsys, "--camouflages", "nope")
    assert exit_code == 1


def test_tree_output(capsys):
    exit_code, out = run_cli(capsys, "-e", "binary", "--tree", "AB")
    assert exit_code == 0
    assert out.startswith("Message: 1 phrase(s), 1 word(s), 2 letter(s)")
    assert "[WORD] 1(1,0)" in out


def test_input_file_and_output_file(tmp_path, capsys):
    source = tmp_path / "in.txt"
    source.write_text("SOS", encoding="utf-8")
    target = tmp_path / "out" / "code.txt"

    exit_code, out = run_cli(
        capsys, "-i", str(source), "-e", "morse", "--letter-separator", " ", "-o", str(target)
    )
    assert exit_code == 0
    assert out == ""
    assert target.read_text(encoding="utf-8") == "... --- ..."


def test_missing_input_file(tmp_path, capsys):
    exit_code, out = run_cli(capsys, "-i", str(tmp_path / "missing.txt"), "-e", "morse")
    assert exit_code == 1
    assert out.startswith("Input could not be read")


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab"))
    assert run_cli(capsys, "-e", "invert") == (0, "zy\n")


def test_verbose_flag(capsys):
    exit_code, out = run_cli(capsys, "-v", "-e", "phone", "--letter-separator", " ", "ab")
    assert exit_code == 0
    assert out == "Applied phone: produced digits, spacing separators.\n2 22\n"


def test_format_and_settings(isolated_settings, monkeypatch, capsys):
    exit_code, out = run_cli(capsys, "-e", "stars", "--format", "text", "--letter-separator", " ", "ab")
    assert (exit_code, out) == (0, "[stars/a] [stars/b]\n")

    monkeypatch.setenv("SCOUTCODE_IMAGE_FORMAT", "PNG")
    monkeypatch.setenv("SCOUTCODE_ASSETS_BASE", "/codes/")
    reset_settings_cache()
    exit_code, out = run_cli(capsys, "-e", "stars", "--letter-separator", "", "a")
    assert exit_code == 0
    assert out == '<img src="/codes/stars/a.png" alt="a" class="code-symbol" />\n'


def test_render_format_from_config_file(isolated_settings, capsys):
    (isolated_settings / "scoutcode.yaml").write_text(
        "SCOUTCODE_RENDER_FORMAT: text\n", encoding="utf-8"
    )
    exit_code, out = run_cli(capsys, "-e", "stars", "--letter-separator", "+", "ab")
    assert (exit_code, out) == (0, "[stars/a]+[stars/b]\n")


def test_invalid_settings_exit_with_one(monkeypatch, capsys):
    monkeypatch.setenv("SCOUTCODE_RENDER_FORMAT", "pdf")
    exit_code, out = run_cli(capsys, "-e", "morse", "SOS")
    assert exit_code == 1
    assert "Configuration validation errors detected" in out
