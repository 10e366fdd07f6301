from myshell.log import resolve_level


def test_known_level_is_kept(capsys) -> None:
    assert resolve_level("debug") == "DEBUG"
    assert capsys.readouterr().err == ""


def test_unknown_level_falls_back_to_warning(capsys) -> None:
    assert resolve_level("foo") == "WARNING"
    assert "unknown log level 'FOO'" in capsys.readouterr().err
