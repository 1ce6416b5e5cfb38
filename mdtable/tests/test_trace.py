"""Tests for file-based trace logging."""

from mdtable.trace import TRACE_ENV_VAR, resolve_trace_path, trace, trace_write


class TestResolveTracePath:
    """Tests for resolve_trace_path()."""

    def test_unset_means_disabled(self, monkeypatch):
        monkeypatch.delenv(TRACE_ENV_VAR, raising=False)
        assert resolve_trace_path() is None

    def test_empty_means_disabled(self, monkeypatch):
        monkeypatch.setenv(TRACE_ENV_VAR, "")
        assert resolve_trace_path() is None

    def test_path_from_env(self, monkeypatch):
        monkeypatch.setenv(TRACE_ENV_VAR, "/tmp/mdtable-trace.log")
        assert resolve_trace_path() == "/tmp/mdtable-trace.log"


class TestTrace:
    """Tests for trace() and trace_write()."""

    def test_writes_line_and_creates_dirs(self, tmp_path, monkeypatch):
        log = tmp_path / "nested" / "trace.log"
        monkeypatch.setenv(TRACE_ENV_VAR, str(log))

        trace("TableRepair", "hello")
        trace("TableRepair", "again")

        lines = log.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("[TableRepair] hello")

    def test_disabled_writes_nothing(self, tmp_path, monkeypatch):
        monkeypatch.delenv(TRACE_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)

        trace("TableRepair", "hello")

        assert list(tmp_path.iterdir()) == []

    def test_unwritable_path_does_not_raise(self, tmp_path):
        # A directory cannot be opened for appending
        trace_write("TableRepair", "hello", str(tmp_path))

    def test_nul_in_path_does_not_raise(self, tmp_path):
        trace_write("TableRepair", "hello", str(tmp_path / "bad\0name.log"))

        assert list(tmp_path.iterdir()) == []
