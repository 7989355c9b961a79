import os
import platform
import pwd
import re

from statline import basic

HUMAN = re.compile(r"^\d+\.\d (Ki|Mi|Gi|Ti|Pi|Ei|Zi|Yi)?$")


def test_cat_first_line(tmp_path):
    path = tmp_path / "f"
    path.write_text("hello\nworld\n")
    assert basic.cat(str(path)) == "hello"


def test_cat_without_newline(tmp_path):
    path = tmp_path / "f"
    path.write_text("single")
    assert basic.cat(str(path)) == "single"


def test_cat_empty_file(tmp_path):
    path = tmp_path / "f"
    path.write_text("")
    assert basic.cat(str(path)) is None


def test_cat_missing(tmp_path, capsys):
    assert basic.cat(str(tmp_path / "missing")) is None
    assert "fopen" in capsys.readouterr().err


def test_datetime_year():
    result = basic.datetime("%Y")
    assert len(result) == 4 and result.isdigit()


def test_datetime_empty_format():
    assert basic.datetime("") is None


def test_disk_values(tmp_path):
    for func in (basic.disk_free, basic.disk_total, basic.disk_used):
        assert HUMAN.match(func(str(tmp_path)))
    assert 0 <= int(basic.disk_perc(str(tmp_path))) <= 100


def test_disk_missing(tmp_path):
    missing = str(tmp_path / "missing")
    assert basic.disk_free(missing) is None
    assert basic.disk_perc(missing) is None
    assert basic.disk_total(missing) is None
    assert basic.disk_used(missing) is None


def test_entropy_from_file(tmp_path):
    path = tmp_path / "entropy_avail"
    path.write_text("256\n")
    assert basic.entropy(None, str(path)) == "256"


def test_entropy_missing(tmp_path):
    assert basic.entropy(None, str(tmp_path / "missing")) is None


def test_hostname_matches_node():
    assert basic.hostname(None) == platform.node()


def test_kernel_release_matches_platform():
    assert basic.kernel_release(None) == platform.release()


def test_load_avg_format():
    parts = basic.load_avg(None).split(" ")
    assert len(parts) == 3
    assert all(re.fullmatch(r"\d+\.\d\d", part) for part in parts)


def test_num_files(tmp_path):
    for name in ("a", "b", "c"):
        (tmp_path / name).write_text("x")
    (tmp_path / "sub").mkdir()
    assert basic.num_files(str(tmp_path)) == "4"


def test_num_files_missing(tmp_path):
    assert basic.num_files(str(tmp_path / "missing")) is None


def test_run_command_output():
    assert basic.run_command("echo hello") == "hello"


def test_run_command_first_line_only():
    assert basic.run_command("printf 'first\\nsecond\\n'") == "first"


def test_run_command_no_output():
    assert basic.run_command("true") is None


def test_temp(tmp_path):
    path = tmp_path / "temp"
    path.write_text("45000\n")
    assert basic.temp(str(path)) == "45"


def test_temp_missing(tmp_path):
    assert basic.temp(str(tmp_path / "missing")) is None


def test_uptime_format():
    match = re.fullmatch(r"(\d+)h (\d+)m", basic.uptime(None))
    assert match is not None
    assert int(match.group(2)) < 60


def test_ids():
    assert basic.uid(None) == str(os.geteuid())
    assert basic.gid(None) == str(os.getgid())


def test_username_resolves_to_current_user():
    name = basic.username(None)
    assert pwd.getpwnam(name).pw_uid == os.geteuid()