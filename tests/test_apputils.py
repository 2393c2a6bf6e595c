import stat

import pytest

from bentochains import apputils


def _write_script(path, body, mode=0o755):
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(mode)
    return str(path)


def test_execute_shell_command_captures_stdout(tmp_path):
    script = _write_script(tmp_path / "getkey.sh", "echo placeholder\n")
    output = apputils.execute_shell_command(script)
    assert apputils.trim(output) == "placeholder"
    assert output.startswith("placeholder")


def test_execute_shell_command_missing_file(tmp_path):
    missing = str(tmp_path / "nothing.sh")
    with pytest.raises(ValueError, match="not found"):
        apputils.execute_shell_command(missing)


def test_execute_shell_command_not_executable(tmp_path):
    script = _write_script(tmp_path / "getkey.sh", "echo placeholder\n", mode=0o644)
    assert not (tmp_path / "getkey.sh").stat().st_mode & stat.S_IXUSR
    with pytest.raises(RuntimeError, match="lacking executable flags"):
        apputils.execute_shell_command(script)


def test_execute_shell_command_nonzero_exit(tmp_path):
    script = _write_script(tmp_path / "fail.sh", "echo partial\nexit 3\n")
    with pytest.raises(RuntimeError, match="exited with 3") as info:
        apputils.execute_shell_command(script)
    assert "partial" in str(info.value)


@pytest.mark.parametrize("text", ["abc", "abc \t\n\r\f\v", "abc\n\n"])
def test_trim_removes_trailing_whitespace(text):
    assert apputils.trim(text) == "abc"


def test_trim_keeps_leading_whitespace():
    assert apputils.trim("  abc  ") == "  abc"


def test_trim_all_whitespace_gives_empty():
    assert apputils.trim(" \t\n") == ""


def test_split_str_default_separator_round_trip():
    parts = ["SPY", "QQQ", "IWM"]
    joined = ",".join(parts)
    assert apputils.split_str(joined) == parts


def test_split_str_custom_delimiter():
    assert apputils.split_str("a|b|c", "|") == ["a", "b", "c"]


def test_split_by_linefeed_round_trip():
    lines = ["Symbol,Date", "SPY,2025-04-02"]
    assert apputils.split_by_linefeed("\n".join(lines)) == lines


def test_key_script_in_bin_dir():
    assert (
        apputils.key_script_in_bin_dir("/opt/app/bin/bentohistchains")
        == "/opt/app/bin/../scripts/getkey.sh"
    )


def test_key_script_without_directory():
    assert apputils.key_script_in_bin_dir("bentohistchains") == "/../scripts/getkey.sh"


def test_get_key_script_prefers_argument():
    assert apputils.get_key_script(["/bin/app", "/tmp/key.sh"]) == "/tmp/key.sh"


def test_get_key_script_falls_back_to_bin_dir():
    assert apputils.get_key_script(["/bin/app"]) == apputils.key_script_in_bin_dir(
        "/bin/app"
    )


def test_executable_name():
    assert apputils.executable_name("/usr/local/bin/bentohistchains") == "bentohistchains"


def test_case_conversion_round_trip():
    text = "spy,qqq,iwm"
    upper = apputils.to_upper(text)
    assert upper.isupper()
    assert apputils.to_lower(upper) == text


def test_case_conversion_leaves_non_ascii():
    assert apputils.to_upper("é1,") == "é1,"
    assert apputils.to_lower("É") == "É"