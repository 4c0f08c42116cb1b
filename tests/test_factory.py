"""
Tests for to_vfile(): every accepted input shape, identity, duck typing,
and file: URLs.

Run: python -m pytest tests/test_factory.py -v
"""

import os
import sys
import pytest
from pathlib import Path
from urllib.parse import urlparse, urlsplit

from to_vfile import VFile, to_vfile, is_vfile, file_url_to_path, InvalidURLError


join = os.path.join

posix_only = pytest.mark.skipif(os.name == "nt", reason="POSIX file URLs")


class TestToVFile:

    def test_string_is_path(self):
        file = to_vfile(join("foo", "bar", "baz.qux"))

        assert isinstance(file, VFile)
        assert file.path == join("foo", "bar", "baz.qux")
        assert file.basename == "baz.qux"
        assert file.stem == "baz"
        assert file.extname == ".qux"
        assert file.dirname == join("foo", "bar")
        assert file.value is None

    def test_buffer_is_path(self):
        file = to_vfile(b"readme.md")
        assert file.path == "readme.md"
        assert file.value is None

    def test_bytearray_and_memoryview(self):
        assert to_vfile(bytearray(b"a.md")).path == "a.md"
        assert to_vfile(memoryview(b"b.md")).path == "b.md"

    def test_path_like(self):
        file = to_vfile(Path("lib") / "core.py")
        assert file.path == join("lib", "core.py")

    def test_mapping(self):
        file = to_vfile({
            "dirname": join("foo", "bar"),
            "stem": "baz",
            "extname": ".qux",
        })

        assert file.path == join("foo", "bar", "baz.qux")
        assert file.basename == "baz.qux"
        assert file.value is None

    def test_mapping_with_value_and_cwd(self):
        file = to_vfile({"path": "a.txt", "cwd": "/tmp", "value": "hi", "data": {"k": 1}})
        assert file.cwd == "/tmp"
        assert file.value == "hi"
        assert file.data == {"k": 1}

    def test_mapping_unknown_field(self):
        with pytest.raises(TypeError):
            to_vfile({"path": "a.txt", "contents": "old name"})

    def test_nothing(self):
        file = to_vfile()
        assert file.path is None
        assert file.value is None
        assert to_vfile(None).path is None

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Cannot create a VFile"):
            to_vfile(42)

    def test_empty_string(self):
        with pytest.raises(ValueError, match="`path` cannot be empty"):
            to_vfile("")


class TestIdentity:

    def test_vfile_returned_unchanged(self):
        file = VFile(path="a.md")
        assert to_vfile(file) is file

    def test_rewrap_is_noop(self):
        for description in ["a.md", b"a.md", {"path": "a.md"}, None]:
            once = to_vfile(description)
            assert to_vfile(to_vfile(once)) is once

    def test_duck_typed_file_passes_through(self):
        class OtherFile:
            def __init__(self):
                self.path = "other.md"
                self.cwd = os.getcwd()
                self.value = None
                self.messages = []

            def message(self, reason):
                raise NotImplementedError

        other = OtherFile()
        assert is_vfile(other)
        assert to_vfile(other) is other

    def test_is_vfile(self):
        assert is_vfile(VFile())
        assert not is_vfile(None)
        assert not is_vfile("a.md")
        assert not is_vfile(b"a.md")
        assert not is_vfile({"message": 1, "messages": []})
        assert not is_vfile(object())


@posix_only
class TestFileURLs:

    def test_parsed_url(self):
        file = to_vfile(urlparse("file:///tmp/readme.md"))
        assert file.path == "/tmp/readme.md"

    def test_split_url(self):
        assert to_vfile(urlsplit("file:///tmp/a%20b.md")).path == "/tmp/a b.md"

    def test_localhost(self):
        assert file_url_to_path("file://localhost/etc/hosts") == "/etc/hosts"

    def test_url_as_path_field(self):
        file = VFile(path=urlparse("file:///tmp/x.md"))
        assert file.path == "/tmp/x.md"

    def test_wrong_scheme(self):
        with pytest.raises(InvalidURLError, match="scheme file"):
            to_vfile(urlparse("https://example.com/readme.md"))

    def test_remote_host(self):
        with pytest.raises(InvalidURLError, match="host"):
            file_url_to_path("file://example.com/readme.md")

    def test_encoded_slash(self):
        with pytest.raises(InvalidURLError, match="encoded"):
            file_url_to_path("file:///tmp/a%2Fb.md")

    def test_invalid_url_is_value_error(self):
        with pytest.raises(ValueError):
            file_url_to_path("ftp:///x")
