import pytest

from statline.util import fmt_human, read_int, read_text, warn


def test_warn_plain_message(capsys):
    warn("something happened")
    assert capsys.readouterr().err == "something happened\n"


def test_warn_appends_current_error(capsys, tmp_path):
    missing = tmp_path / "missing"
    try:
        open(missing)
    except OSError as exc:
        warn("fopen 'x':")
        expected = f"fopen 'x': {exc.strerror}\n"
    assert capsys.readouterr().err == expected


def test_warn_colon_without_error(capsys):
    warn("nothing:")
    assert capsys.readouterr().err == "nothing:\n"


def test_fmt_human_zero():
    assert fmt_human(0, 1000) == "0.0 "


@pytest.mark.parametrize(
    "power,prefix",
    [(1, "Ki"), (2, "Mi"), (3, "Gi"), (4, "Ti"), (8, "Yi")],
)
def test_fmt_human_binary_prefixes(power, prefix):
    result = fmt_human(1024**power, 1024)
    assert result.endswith(" " + prefix)
    assert result.startswith("1.0")


@pytest.mark.parametrize("power,prefix", [(1, "k"), (2, "M"), (3, "G"), (6, "E")])
def test_fmt_human_decimal_prefixes(power, prefix):
    result = fmt_human(1000**power, 1000)
    assert result.split(" ") == ["1.0", prefix]


def test_fmt_human_scaled_value_below_base():
    for num in (1, 999, 1500, 123456, 10**12):
        value = float(fmt_human(num, 1000).split(" ")[0])
        assert 0 <= value < 1000


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 10)


def test_read_text_round_trip(tmp_path):
    path = tmp_path / "file"
    path.write_text("line one\nline two\n")
    assert read_text(str(path)) == "line one\nline two\n"


def test_read_text_missing(tmp_path, capsys):
    path = tmp_path / "nope"
    assert read_text(str(path)) is None
    assert str(path) in capsys.readouterr().err


def test_read_int(tmp_path):
    path = tmp_path / "num"
    path.write_text("  42\n")
    assert read_int(str(path)) == 42


def test_read_int_not_a_number(tmp_path):
    path = tmp_path / "num"
    path.write_text("abc\n")
    assert read_int(str(path)) is None


def test_read_int_missing(tmp_path):
    assert read_int(str(tmp_path / "nope")) is None