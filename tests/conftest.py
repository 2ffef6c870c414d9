"""Shared fixtures for the stylesheet synchronizer tests."""

import os

# Keep the app's import-time stylesheet sync out of the repo's static folder.
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402


class RecordingCompiler:
    """Stands in for libsass and remembers every call."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def __call__(self, source, import_path, output_style):
        from scss_compiler import StylesheetCompileError

        self.calls.append((source, import_path, output_style))
        if self.fail_on is not None and self.fail_on in source:
            raise StylesheetCompileError("<string>", "Invalid CSS after \"a {\"")
        return f"/* {output_style} */\n{source}"


@pytest.fixture
def compiler():
    return RecordingCompiler()


@pytest.fixture
def failing_compiler():
    return RecordingCompiler(fail_on="broken")


@pytest.fixture
def dirs(tmp_path):
    """Source and destination directories, both existing and empty."""
    source = tmp_path / "scss"
    dest = tmp_path / "css"
    source.mkdir()
    dest.mkdir()
    return source, dest


@pytest.fixture
def site(dirs):
    """main.scss importing _vars.scss, with fixed timestamps."""
    source, dest = dirs
    (source / "_vars.scss").write_text("$color: red;\n")
    (source / "main.scss").write_text("@import 'vars';\nbody { color: $color; }\n")
    os.utime(source / "_vars.scss", (1_000_000, 1_000_000))
    os.utime(source / "main.scss", (1_000_000, 1_000_000))
    return source, dest
