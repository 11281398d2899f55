from pathlib import Path

import pytest

from nabaztag import cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: None)


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "nabaztag.cfg"
    path.write_text(body, encoding="utf-8")
    return path


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_parser_reads_ear_options():
    args = cli.build_parser().parse_args(["ears", "--left", "3"])

    assert args.command == "ears"
    assert args.left == 3
    assert args.right is None


def test_show_config_masks_token(tmp_path: Path, capsys):
    path = _write_config(tmp_path, "[nabaztag]\nmac = 0013D3841234\ntoken = secret\n")

    assert cli.main(["-c", str(path), "show-config"]) == 0

    output = capsys.readouterr().out
    assert "mac = 0013D3841234" in output
    assert "token = ********" in output
    assert "secret" not in output


def test_voices_lists_languages(tmp_path: Path, capsys):
    assert cli.main(["-c", str(tmp_path / "none.cfg"), "voices"]) == 0

    output = capsys.readouterr().out
    assert "fr: julie22k, claire22s" in output
    assert "heather22k" in output


def test_device_command_without_credentials_fails(tmp_path: Path):
    assert cli.main(["-c", str(tmp_path / "none.cfg"), "say", "hello"]) == 1


def test_ears_without_sides_fails(tmp_path: Path):
    path = _write_config(tmp_path, "[nabaztag]\nmac = m\ntoken = t\n")

    assert cli.main(["-c", str(path), "ears"]) == 1
