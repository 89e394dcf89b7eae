import io
import sys

import pytest

from pipex.commands import (
    CommandNotFoundError,
    check_access,
    find_executable,
    read_file,
    read_here_doc,
    report_not_found,
    search_path,
)


def _make_tool(directory, name, executable=True):
    path = directory / name
    path.write_text(f"#!{sys.executable}\nimport sys\n")
    path.chmod(0o755 if executable else 0o644)
    return path


def test_search_path_skips_empty_entries():
    assert search_path({"PATH": "/a::/b:"}) == ["/a", "/b"]


def test_search_path_without_path():
    assert search_path({"HOME": "/tmp"}) == []


def test_find_executable_through_path(tmp_path):
    _make_tool(tmp_path, "tool")
    env = {"PATH": f"/nonexistent-dir:{tmp_path}"}
    assert find_executable("tool", env) == f"{tmp_path}/tool"


def test_find_executable_first_directory_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_tool(first, "tool")
    _make_tool(second, "tool")
    env = {"PATH": f"{first}:{second}"}
    assert find_executable("tool", env) == f"{first}/tool"


def test_find_executable_absolute(tmp_path):
    tool = _make_tool(tmp_path, "tool")
    assert find_executable(str(tool), {"PATH": "/nonexistent-dir"}) == str(tool)


def test_find_executable_empty_env_checks_name_as_given(tmp_path):
    tool = _make_tool(tmp_path, "tool")
    assert find_executable(str(tool), {}) == str(tool)
    assert find_executable("tool-that-is-missing", {}) is None


def test_find_executable_ignores_non_executable(tmp_path):
    _make_tool(tmp_path, "plain", executable=False)
    assert find_executable("plain", {"PATH": str(tmp_path)}) is None


def test_find_executable_empty_name():
    assert find_executable("", {"PATH": "/bin"}) is None


def test_check_access_resolves_all(tmp_path):
    _make_tool(tmp_path, "tool")
    env = {"PATH": str(tmp_path)}
    result = check_access(["tool -x", "tool 'a b'"], env)
    assert result == [
        (f"{tmp_path}/tool", ["tool", "-x"]),
        (f"{tmp_path}/tool", ["tool", "a b"]),
    ]


def test_check_access_reports_missing(tmp_path, capsys):
    _make_tool(tmp_path, "tool")
    env = {"PATH": str(tmp_path)}
    with pytest.raises(CommandNotFoundError) as info:
        check_access(["tool", "nosuch -v", "tool"], env)
    assert info.value.command == "nosuch"
    assert capsys.readouterr().err == "command not found: nosuch\n"


def test_check_access_blank_command(tmp_path):
    with pytest.raises(CommandNotFoundError):
        check_access(["   "], {"PATH": str(tmp_path)})


def test_read_file_round_trip(tmp_path):
    data = b"first line\nsecond\x00line\n"
    target = tmp_path / "input"
    target.write_bytes(data)
    assert read_file(target) == data


def test_read_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "absent")


def test_read_here_doc_stops_at_limiter():
    stream = io.StringIO("one\ntwo\nEOF\nthree\n")
    assert read_here_doc("EOF", stream) == "one\ntwo\n"
    assert stream.read() == "three\n"


def test_read_here_doc_limiter_must_be_whole_line():
    stream = io.StringIO("EOFX\nEO\nEOF\n")
    assert read_here_doc("EOF", stream) == "EOFX\nEO\n"


def test_read_here_doc_ends_at_eof():
    assert read_here_doc("END", io.StringIO("a\nb")) == "a\nb"


def test_report_not_found():
    stream = io.StringIO()
    report_not_found("frobnicate", stream)
    assert stream.getvalue() == "command not found: frobnicate\n"