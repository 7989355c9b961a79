import re

import pytest

from statline.power import battery_perc, battery_remaining, battery_state


@pytest.fixture
def battery(tmp_path):
    bat = tmp_path / "BAT0"
    bat.mkdir()
    return bat


def test_perc_reads_capacity(tmp_path, battery):
    (battery / "capacity").write_text("87\n")
    assert battery_perc("BAT0", root=str(tmp_path)) == "87"


def test_perc_missing_file(tmp_path, battery, capsys):
    assert battery_perc("BAT0", root=str(tmp_path)) is None
    assert "fopen" in capsys.readouterr().err


@pytest.mark.parametrize(
    "status, symbol",
    [
        ("Charging", "+"),
        ("Discharging", "-"),
        ("Full", "o"),
        ("Not charging", "o"),
        ("Unknown", "?"),
    ],
)
def test_state_symbols(tmp_path, battery, status, symbol):
    (battery / "status").write_text(status + "\n")
    assert battery_state("BAT0", root=str(tmp_path)) == symbol


def test_state_missing(tmp_path, battery):
    assert battery_state("BAT0", root=str(tmp_path)) is None


def test_remaining_empty_when_charging(tmp_path, battery):
    (battery / "status").write_text("Charging\n")
    (battery / "charge_now").write_text("5000\n")
    assert battery_remaining("BAT0", root=str(tmp_path)) == ""


def test_remaining_discharging(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "charge_now").write_text("5000\n")
    (battery / "current_now").write_text("2000\n")
    assert battery_remaining("BAT0", root=str(tmp_path)) == "2h 30m"


def test_remaining_uses_energy_and_power(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "energy_now").write_text("9000\n")
    (battery / "power_now").write_text("3000\n")
    result = battery_remaining("BAT0", root=str(tmp_path))
    match = re.fullmatch(r"(\d+)h (\d+)m", result)
    assert match is not None
    assert int(match.group(1)) * 60 + int(match.group(2)) == 9000 * 60 // 3000


def test_remaining_zero_current(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    (battery / "charge_now").write_text("5000\n")
    (battery / "current_now").write_text("0\n")
    assert battery_remaining("BAT0", root=str(tmp_path)) is None


def test_remaining_without_charge(tmp_path, battery):
    (battery / "status").write_text("Discharging\n")
    assert battery_remaining("BAT0", root=str(tmp_path)) is None


def test_remaining_without_status(tmp_path, battery):
    (battery / "charge_now").write_text("5000\n")
    assert battery_remaining("BAT0", root=str(tmp_path)) is None