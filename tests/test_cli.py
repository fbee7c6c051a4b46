import json

import pytest

from lumalab import __version__
from lumalab.main import main


def run_json(capsys, *argv):
    main(list(argv) + ["--json"])
    return json.loads(capsys.readouterr().out)


def test_json_output_with_explicit_weights(capsys):
    data = run_json(capsys, "-rgb", "200, 0, 0", "-w", "0.5 0.3 0.2")
    assert data["color"] == "#C80000"
    assert data["rgb"] == [200, 0, 0]
    assert data["luma"] == 100.0
    assert data["model"] == {
        "red_weight": 0.5,
        "green_weight": 0.3,
        "blue_weight": 0.2,
        "tolerance": 0.0,
    }


def test_default_preset_is_bt709(capsys):
    data = run_json(capsys, "-H", "FFFFFF")
    assert data["model"]["red_weight"] == 0.2126
    assert data["luma"] == pytest.approx(255.0)


def test_bt601_preset_white(capsys):
    data = run_json(capsys, "-H", "fff", "-p", "bt601")
    assert data["luma"] == pytest.approx(255.0)


def test_decimal_index_input(capsys):
    data = run_json(capsys, "-di", "16711680", "-p", "bt709")
    assert data["rgb"] == [255, 0, 0]
    assert data["luma"] == pytest.approx(0.2126 * 255)


def test_random_with_seed_is_reproducible(capsys):
    first = run_json(capsys, "-r", "-s", "42")
    second = run_json(capsys, "-r", "-s", "42")
    assert first == second
    assert 0.0 <= first["luma"] <= 255.0


def test_text_report(capsys):
    main(["-H", "C80000", "-w", "0.5 0.3 0.2"])
    out = capsys.readouterr().out
    assert "LumaModel [red_weight=0.5, green_weight=0.3, blue_weight=0.2]" in out
    assert "100.0000" in out
    assert "#646464" in out


def test_text_report_hide_bars(capsys):
    main(["-H", "C80000", "-hb"])
    assert "█" not in capsys.readouterr().out


def test_negative_weight_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-H", "FFFFFF", "--weights=-0.1 0.5 0.6"])
    assert exc.value.code == 2
    assert "negative" in capsys.readouterr().err


def test_inexact_sum_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-H", "FFFFFF", "-w", "0.299 0.587 0.114"])
    assert exc.value.code == 2
    assert "Sum of weights" in capsys.readouterr().err


def test_tolerance_flag_accepts_inexact_sum(capsys):
    data = run_json(capsys, "-H", "FFFFFF", "-w", "0.299 0.587 0.114", "-t", "1e-12")
    assert data["model"]["tolerance"] == 1e-12
    assert data["luma"] == pytest.approx(255.0)


def test_missing_color_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-p", "bt709"])
    assert exc.value.code == 2
    assert "required" in capsys.readouterr().err


def test_bad_preset_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-H", "FFFFFF", "-p", "srgb"])
    assert exc.value.code == 2
    assert "invalid preset" in capsys.readouterr().err


def test_list_presets(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--list-presets"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "bt601" in out and "bt709" in out and "bt2020" in out
    assert "(default)" in out


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_overflowing_weights_and_tolerance_exit_cleanly(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-H", "000000", "-w", "1e309 0 0", "-t", "1e400"])
    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "finite" in err or "invalid tolerance" in err


def test_weight_above_one_with_tolerance_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-H", "000000", "-w", "1.1 0 0", "-t", "0.2"])
    assert exc.value.code == 2
    assert "at most 1.0" in capsys.readouterr().err
