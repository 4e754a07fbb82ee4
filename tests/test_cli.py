import json

import pytest

from conftest import save_image
from watermark_exif_date import __version__
from watermark_exif_date import cli


@pytest.fixture
def run_batch_calls(monkeypatch):
    calls = []

    def fake_run_batch(input_dir, **kwargs):
        calls.append((input_dir, kwargs))
        return 0

    monkeypatch.setattr(cli, "run_batch", fake_run_batch)
    return calls


def test_defaults(tmp_path, run_batch_calls):
    assert cli.main([str(tmp_path)]) == 0
    (input_dir, kwargs), = run_batch_calls
    assert input_dir == tmp_path
    assert kwargs == {
        "font_size": 48,
        "color": "255,255,255",
        "anchor": cli.Anchor.BOTTOM_RIGHT,
        "font_path": None,
    }


def test_short_flags(tmp_path, run_batch_calls):
    cli.main([str(tmp_path), "-s", "20", "-c", "255,0,0", "-p", "CENTER"])
    _, kwargs = run_batch_calls[0]
    assert kwargs["font_size"] == 20
    assert kwargs["color"] == "255,0,0"
    assert kwargs["anchor"] is cli.Anchor.CENTER


def test_position_is_case_insensitive(tmp_path, run_batch_calls):
    cli.main([str(tmp_path), "--position", "top_left"])
    assert run_batch_calls[0][1]["anchor"] is cli.Anchor.TOP_LEFT


def test_unknown_position_is_a_usage_error(tmp_path, run_batch_calls):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path), "-p", "TOP_RIGHT"])
    assert excinfo.value.code == 2
    assert run_batch_calls == []


def test_config_file(tmp_path, run_batch_calls):
    config = tmp_path / "wm.json"
    config.write_text(json.dumps({"font_size": 30, "position": "TOP_LEFT"}), encoding="utf-8")
    cli.main([str(tmp_path), "--config", str(config), "-s", "12"])
    _, kwargs = run_batch_calls[0]
    assert kwargs["font_size"] == 12
    assert kwargs["anchor"] is cli.Anchor.TOP_LEFT


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_end_to_end(photos):
    assert cli.main([str(photos), "-s", "20", "-c", "0,255,0", "-p", "TOP_LEFT"]) == 0
    assert [p.name for p in (photos / "photos_watermark").iterdir()] == ["holiday.jpg"]


def test_invalid_directory_exit_code(tmp_path):
    assert cli.main([str(tmp_path / "missing")]) == 1


def test_invalid_color_exit_code(tmp_path):
    directory = tmp_path / "pics"
    directory.mkdir()
    save_image(directory / "a.png", fmt="PNG")
    assert cli.main([str(directory), "-c", "a,b,c"]) == 1


@pytest.mark.parametrize("size", ["0", "-5", "big"])
def test_font_size_must_be_positive(tmp_path, run_batch_calls, size):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path), "-s", size])
    assert excinfo.value.code == 2
    assert run_batch_calls == []
