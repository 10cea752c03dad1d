import io

import pytest

from claudeauth.auth.sink import GitHubActionsSink


def test_register_secret_issues_add_mask_command(tmp_path) -> None:
    stream = io.StringIO()
    sink = GitHubActionsSink(stream=stream, output_path=tmp_path / "out")

    sink.register_secret("sk-ant-abc")

    assert stream.getvalue() == "::add-mask::sk-ant-abc\n"


def test_register_secret_escapes_newlines_and_percent() -> None:
    stream = io.StringIO()
    sink = GitHubActionsSink(stream=stream)

    sink.register_secret("50%\nnext")

    assert stream.getvalue() == "::add-mask::50%25%0Anext\n"


def test_set_output_appends_delimited_block(tmp_path) -> None:
    output_file = tmp_path / "github_output"
    output_file.write_text("existing<<EOF\nx\nEOF\n", encoding="utf-8")
    stream = io.StringIO()
    sink = GitHubActionsSink(stream=stream, output_path=output_file)

    sink.set_output("new_access_token", "a2")
    sink.set_output("new_expires_at", "4600")

    lines = output_file.read_text(encoding="utf-8").splitlines()
    assert lines[:3] == ["existing<<EOF", "x", "EOF"]
    key, delimiter = lines[3].split("<<")
    assert key == "new_access_token"
    assert delimiter.startswith("ghadelimiter_")
    assert lines[4:6] == ["a2", delimiter]
    assert lines[6].startswith("new_expires_at<<ghadelimiter_")
    assert lines[7] == "4600"
    assert stream.getvalue() == ""


def test_set_output_uses_github_output_env(tmp_path, monkeypatch) -> None:
    output_file = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    sink = GitHubActionsSink(stream=io.StringIO())

    sink.set_output("new_refresh_token", "r2")

    assert output_file.read_text(encoding="utf-8").splitlines()[1] == "r2"


def test_set_output_falls_back_to_set_output_command(monkeypatch) -> None:
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    stream = io.StringIO()
    sink = GitHubActionsSink(stream=stream)

    sink.set_output("new_access_token", "a2")

    assert stream.getvalue() == "\n::set-output name=new_access_token::a2\n"


def test_set_output_rejects_delimiter_in_value(tmp_path, monkeypatch) -> None:
    import claudeauth.auth.sink as sink_module

    class FixedUUID:
        @staticmethod
        def uuid4() -> str:
            return "fixed"

    monkeypatch.setattr(sink_module, "uuid", FixedUUID)
    sink = GitHubActionsSink(stream=io.StringIO(), output_path=tmp_path / "out")

    with pytest.raises(ValueError):
        sink.set_output("key", "before ghadelimiter_fixed after")
