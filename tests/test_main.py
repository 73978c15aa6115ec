import logging

import pytest

from skatemechanics.controller.simulation import run_simulation
from skatemechanics.main import build_parser, format_summary, main, parse_overrides


@pytest.fixture(autouse=True)
def detach_log_handlers():
    yield
    logging.getLogger("skatemechanics").handlers.clear()


def test_parse_overrides_skips_malformed():
    fields = parse_overrides(["bpm=120", " direction = cw ", "oops", "=3", "l=0.5=1"])
    assert fields == {"bpm": "120", "direction": "cw", "l": "0.5=1"}


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.preset is None
    assert args.overrides == []
    assert not args.reverse_at_midpoint
    assert args.width == 640 and args.height == 480


def test_parser_rejects_unknown_preset():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--preset", "foxtrot"])


def test_format_summary(scenario_inputs):
    text = format_summary(run_simulation(scenario_inputs))
    lines = text.splitlines()
    assert lines[0].startswith("Tb [s]")
    assert lines[0].split()[-1] == "0.435"
    assert any(line.startswith("R [m]") and line.endswith("4.5") for line in lines)


def test_main_without_images(tmp_path, capsys):
    assert main(["--no-images", "--set", "bpm=120", "--out", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Tb [s]" in out
    assert any(line.startswith("Tb [s]") and line.split()[-1] == "0.5" for line in out.splitlines())
    assert not list(tmp_path.iterdir())


def test_main_writes_images(tmp_path):
    out_dir = tmp_path / "images"
    code = main(["--preset", "willow", "--set", "direction=cw", "--out", str(out_dir), "--width", "320", "--height", "240"])
    assert code == 0
    assert (out_dir / "absolute.png").stat().st_size > 0
    assert (out_dir / "relative.png").stat().st_size > 0


def test_main_writes_plot(tmp_path):
    import matplotlib

    matplotlib.use("Agg")
    assert main(["--no-images", "--plot", "--out", str(tmp_path)]) == 0
    assert (tmp_path / "lateral_drift.png").exists()
