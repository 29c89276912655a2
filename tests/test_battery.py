import pytest

from statline import battery


@pytest.fixture
def bat(tmp_path, monkeypatch):
    monkeypatch.setattr(battery, "POWER_SUPPLY", str(tmp_path))
    directory = tmp_path / "BAT0"
    directory.mkdir()
    return directory


def test_perc(bat):
    (bat / "capacity").write_text("87\n")
    assert battery.battery_perc("BAT0") == "87"


def test_perc_missing(bat, capsys):
    assert battery.battery_perc("BAT0") is None
    assert "fopen" in capsys.readouterr().err


def test_perc_garbage(bat):
    (bat / "capacity").write_text("unknown\n")
    assert battery.battery_perc("BAT0") is None


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
def test_state(bat, status, symbol):
    (bat / "status").write_text(status + "\n")
    assert battery.battery_state("BAT0") == symbol


def test_state_missing(bat):
    assert battery.battery_state("BAT0") is None


def test_remaining_discharging_charge(bat):
    (bat / "status").write_text("Discharging\n")
    (bat / "charge_now").write_text("3000000\n")
    (bat / "current_now").write_text("2000000\n")
    assert battery.battery_remaining("BAT0") == "1h 30m"


def test_remaining_discharging_energy(bat):
    (bat / "status").write_text("Discharging\n")
    (bat / "energy_now").write_text("5000\n")
    (bat / "power_now").write_text("2000\n")
    assert battery.battery_remaining("BAT0") == "2h 30m"


def test_remaining_charging_is_empty(bat):
    (bat / "status").write_text("Charging\n")
    (bat / "charge_now").write_text("3000000\n")
    assert battery.battery_remaining("BAT0") == ""


def test_remaining_zero_current(bat):
    (bat / "status").write_text("Discharging\n")
    (bat / "charge_now").write_text("3000000\n")
    (bat / "current_now").write_text("0\n")
    assert battery.battery_remaining("BAT0") is None


def test_remaining_without_charge_file(bat):
    (bat / "status").write_text("Discharging\n")
    assert battery.battery_remaining("BAT0") is None