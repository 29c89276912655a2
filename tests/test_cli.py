import pytest

from statline.cli import Arg, Options, build_status, main, parse_args


def _const(value):
    return lambda arg: value


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], Options(single=False, once=False)),
        (["-s"], Options(single=True, once=False)),
        (["-1"], Options(single=True, once=True)),
        (["-s1"], Options(single=True, once=True)),
        (["--"], Options(single=False, once=False)),
        (["-s", "--"], Options(single=True, once=False)),
    ],
)
def test_parse_args(argv, expected):
    assert parse_args(argv) == expected


def test_version_exits(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["-v"])
    assert info.value.code == 1
    assert "1.0" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["-x"], ["extra"], ["-"], ["-s", "extra"], ["--", "x"]])
def test_bad_usage_exits(argv, capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 1
    assert "usage:" in capsys.readouterr().err


def test_build_status_formats_values():
    args = [Arg(_const("a"), "[%s]"), Arg(_const("50"), " %s%%")]
    assert build_status(args, "n/a", 2048) == "[a] 50%"


def test_build_status_unknown_for_missing_value():
    args = [Arg(_const(None), "<%s>")]
    assert build_status(args, "n/a", 2048) == "<n/a>"


def test_build_status_keeps_empty_value():
    args = [Arg(_const(""), "(%s)")]
    assert build_status(args, "n/a", 2048) == "()"


def test_build_status_passes_argument():
    args = [Arg(lambda arg: arg.upper(), "%s", "bat0")]
    assert build_status(args, "n/a", 2048) == "BAT0"


def test_build_status_truncates(capsys):
    seen = []

    def later(arg):
        seen.append(arg)
        return "z"

    args = [Arg(_const("ab"), "%s"), Arg(_const("cdefgh"), "%s"), Arg(later, "%s")]
    result = build_status(args, "n/a", 5)
    assert result == "abcd"
    assert len(result) == 4
    assert seen == []
    assert "truncated" in capsys.readouterr().err


def test_main_version_exits():
    with pytest.raises(SystemExit) as info:
        main(["-v"])
    assert info.value.code == 1


def test_main_once_prints_one_line(capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert out.endswith("]\n")


def test_main_without_display_fails(monkeypatch, capsys):
    monkeypatch.delenv("DISPLAY", raising=False)
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1
    assert "XOpenDisplay" in capsys.readouterr().err