"""
Tests for settings, options normalization, errors and diagnostics.

Run: python -m pytest tests/test_config.py -v
"""

import errno
import logging
import os
import pytest

from to_vfile import VFile, read_sync, ReadOptions, WriteOptions, VFileIOError, InvalidPathError
from to_vfile.backend import InMemoryBackend
from to_vfile.config.config import VFileSettings, get_config, load_config
from to_vfile.options import read_options, write_options


class TestSettings:

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for key in list(os.environ):
            if key.startswith("TO_VFILE_"):
                monkeypatch.delenv(key)
        config = load_config()
        assert config.encoding == "utf-8"
        assert config.callback_workers == 4
        assert config.log_io is True

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TO_VFILE_ENCODING", "latin-1")
        monkeypatch.setenv("TO_VFILE_CALLBACK_WORKERS", "2")
        config = load_config()
        assert config.encoding == "latin-1"
        assert config.callback_workers == 2

    def test_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("TO_VFILE_LOG_IO", raising=False)
        (tmp_path / ".env").write_text("TO_VFILE_LOG_IO=false\n", encoding="utf-8")
        assert load_config().log_io is False
        assert "TO_VFILE_LOG_IO" not in os.environ

    def test_dotenv_does_not_leak_into_environ(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("UNRELATED_APP_SECRET", raising=False)
        (tmp_path / ".env").write_text("UNRELATED_APP_SECRET=leaked\n", encoding="utf-8")
        (tmp_path / "a.txt").write_text("hello", encoding="utf-8")

        get_config.cache_clear()
        try:
            assert read_sync("a.txt", "utf-8").value == "hello"
            assert "UNRELATED_APP_SECRET" not in os.environ
        finally:
            get_config.cache_clear()

    def test_settings_class(self):
        assert VFileSettings(encoding="utf-16").encoding == "utf-16"


class TestOptions:

    def test_read_options(self):
        assert read_options(None) == ReadOptions()
        assert read_options("utf8") == ReadOptions(encoding="utf8")
        assert read_options({"encoding": "utf-8"}).encoding == "utf-8"
        opts = ReadOptions(encoding="ascii")
        assert read_options(opts) is opts

    def test_write_options(self):
        assert write_options(None) == WriteOptions()
        assert write_options("latin-1").encoding == "latin-1"
        assert write_options({"mode": 0o600, "flag": "a"}) == WriteOptions(mode=0o600, flag="a")

    def test_rejects_unknown(self):
        with pytest.raises(TypeError, match="Unknown ReadOptions fields"):
            read_options({"encoding": "utf-8", "bogus": 1})
        with pytest.raises(ValueError, match="Unknown read flag"):
            read_options({"flag": "w"})
        with pytest.raises(LookupError):
            write_options("klingon")
        with pytest.raises(TypeError):
            write_options(42)


class TestErrors:

    def test_io_error_keeps_native_details(self):
        native = FileNotFoundError(errno.ENOENT, "No such file or directory", "/x/missing.md")
        err = VFileIOError(native)

        assert err.errno == errno.ENOENT
        assert err.filename == "/x/missing.md"
        assert str(err) == str(native)
        assert err.native is native
        assert err.kind == "FileNotFoundError"
        assert VFileIOError.wrap(err) is err

    def test_invalid_path_message(self):
        assert "path" in str(InvalidPathError())


class TestDiagnostics:

    def test_io_is_logged(self, caplog):
        mem = InMemoryBackend("/project")
        mem.seed({"a.md": "x"})
        with caplog.at_level(logging.DEBUG, logger="to_vfile"):
            read_sync(VFile(path="a.md", cwd="/project"), backend=mem)

        messages = [r.getMessage() for r in caplog.records if r.name == "to_vfile"]
        assert any("read start: path=/project/a.md" in m for m in messages)
        assert any("read done: path=/project/a.md" in m for m in messages)

    def test_failure_is_logged(self, caplog):
        mem = InMemoryBackend("/project")
        with caplog.at_level(logging.DEBUG, logger="to_vfile"):
            with pytest.raises(VFileIOError):
                read_sync(VFile(path="gone.md", cwd="/project"), backend=mem)

        assert any("read failed" in r.getMessage() for r in caplog.records)
