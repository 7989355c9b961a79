import pytest

from statline.cpu import CpuMeter, cpu_freq


def _stat(user, nice, system, idle, iowait=0, irq=0, softirq=0):
    return f"cpu  {user} {nice} {system} {idle} {iowait} {irq} {softirq} 0 0 0\ncpu0 1 2 3\n"


@pytest.fixture
def stat_file(tmp_path):
    return tmp_path / "stat"


def test_first_call_has_no_value(stat_file):
    stat_file.write_text(_stat(100, 0, 100, 800))
    meter = CpuMeter(str(stat_file))
    assert meter() is None


def test_usage_between_calls(stat_file):
    stat_file.write_text(_stat(100, 0, 100, 800))
    meter = CpuMeter(str(stat_file))
    meter()
    stat_file.write_text(_stat(200, 0, 200, 1400))
    assert meter() == "25"


def test_fully_busy(stat_file):
    stat_file.write_text(_stat(100, 0, 100, 800))
    meter = CpuMeter(str(stat_file))
    meter()
    stat_file.write_text(_stat(150, 10, 140, 800))
    assert meter() == "100"


def test_usage_is_a_percentage(stat_file):
    stat_file.write_text(_stat(10, 5, 20, 300, 7, 1, 2))
    meter = CpuMeter(str(stat_file))
    meter()
    stat_file.write_text(_stat(47, 9, 61, 555, 30, 4, 9))
    value = int(meter())
    assert 0 <= value <= 100


def test_no_change_gives_none(stat_file):
    stat_file.write_text(_stat(100, 0, 100, 800))
    meter = CpuMeter(str(stat_file))
    meter()
    assert meter() is None


def test_unreadable_stat(tmp_path):
    meter = CpuMeter(str(tmp_path / "missing"))
    assert meter() is None


def test_malformed_stat(stat_file):
    stat_file.write_text("cpu 1 2\n")
    assert CpuMeter(str(stat_file))() is None


def test_cpu_freq(tmp_path):
    path = tmp_path / "scaling_cur_freq"
    path.write_text("2400000\n")
    assert cpu_freq(None, str(path)) == "2.4 G"


def test_cpu_freq_missing(tmp_path):
    assert cpu_freq(None, str(tmp_path / "missing")) is None