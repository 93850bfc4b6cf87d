"""
Tests for data models and parameter validation.
"""
import pytest

from dedupe.core.models import (
    FileRecord, FileCatalog, DeduplicationParams, DeduplicationResult, HashAlgorithmName,
    normalize_extension, extension_of)


class TestExtensionHelpers:

    @pytest.mark.parametrize("raw, expected", [
        ("txt", ".txt"),
        (".txt", ".txt"),
        ("  doc ", ".doc"),
        ("JPG", ".JPG"),
        ("", ""),
        (None, ""),
        ("   ", ""),
    ])
    def test_normalize_extension(self, raw, expected):
        assert normalize_extension(raw) == expected

    @pytest.mark.parametrize("path, expected", [
        ("/a/b/c.txt", ".txt"),
        ("/a/b/archive.tar.gz", ".gz"),
        ("/a/b.dir/noext", ""),
        ("relative.DOC", ".DOC"),
    ])
    def test_extension_of(self, path, expected):
        assert extension_of(path) == expected


class TestFileRecord:

    def test_extension_derived_from_path(self):
        assert FileRecord(path="/x/y.doc", size=1, digest="d").extension == ".doc"

    def test_is_immutable(self):
        record = FileRecord(path="/x/y.doc", size=1, digest="d")
        with pytest.raises(AttributeError):
            record.size = 2

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            FileRecord(path="/x", size=-1, digest="d")


class TestFileCatalog:

    def test_paths_are_unique(self):
        catalog = FileCatalog()
        catalog.add(FileRecord(path="/a.txt", size=1, digest="d"))
        with pytest.raises(ValueError, match="already cataloged"):
            catalog.add(FileRecord(path="/a.txt", size=1, digest="d"))

    def test_keeps_insertion_order_and_totals(self):
        catalog = FileCatalog()
        catalog.add(FileRecord(path="/b.txt", size=3, digest="d1"))
        catalog.add(FileRecord(path="/a.txt", size=4, digest="d2"))

        assert [r.path for r in catalog] == ["/b.txt", "/a.txt"]
        assert len(catalog) == 2
        assert "/a.txt" in catalog
        assert catalog.size_of("/a.txt") == 4
        assert catalog.total_bytes == 7


class TestDeduplicationResult:

    def test_duplicate_paths_are_ordered(self):
        result = DeduplicationResult(
            duplicates={"bb": {"/z.txt", "/y.txt"}, "aa": {"/q.txt"}},
            counts={"aa": 2, "bb": 3},
            duplicate_bytes=10,
        )
        assert result.duplicate_paths() == ["/q.txt", "/y.txt", "/z.txt"]
        assert result.group_count == 2
        assert not result.is_empty


class TestDeduplicationParams:

    def test_normalizes_extensions_and_preferred(self):
        params = DeduplicationParams(root_dir="/data", extensions=[" txt", ".doc", "txt", ""], preferred="doc")

        assert params.extensions == [".txt", ".doc"]
        assert params.preferred == ".doc"
        assert params.algorithm is HashAlgorithmName.SHA1
        assert params.workers == 1
        assert params.clean is False

    def test_empty_preferred_means_no_preference(self):
        params = DeduplicationParams(root_dir="/data", extensions=["txt"], preferred="  ")
        assert params.preferred is None

    def test_from_human_readable(self):
        params = DeduplicationParams.from_human_readable("/data", "txt, doc ,,pdf", preferred="pdf")
        assert params.extensions == [".txt", ".doc", ".pdf"]
        assert params.preferred == ".pdf"

    @pytest.mark.parametrize("kwargs, message", [
        (dict(root_dir="", extensions=["txt"]), "Root directory"),
        (dict(root_dir="/data", extensions=[]), "extension"),
        (dict(root_dir="/data", extensions=[" ", ""]), "extension"),
        (dict(root_dir="/data", extensions=["txt"], workers=0), "workers"),
        (dict(root_dir="/data", extensions=["txt"], use_trash=True), "Trash"),
    ])
    def test_validation(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            DeduplicationParams(**kwargs)

    def test_algorithm_display_name(self):
        assert HashAlgorithmName.XXH128.display_name == "xxHash128"
        assert repr(HashAlgorithmName.SHA1) == "sha1"
