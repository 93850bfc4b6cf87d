"""
Integration tests for DeduplicationCommand: scanner -> engine wiring.
"""
import hashlib

import pytest
import xxhash

from dedupe import DeduplicationCommand, DeduplicationParams, HashAlgorithmName, ScanError


class TestDeduplicationCommand:

    def test_execute_returns_result(self, test_files, temp_dir):
        params = DeduplicationParams.from_human_readable(str(temp_dir), "txt,doc", preferred="doc")

        result = DeduplicationCommand().execute(params)

        assert result.group_count == 2
        assert result.duplicate_bytes == 103
        assert str(test_files["c"]) not in result.duplicate_paths()
        assert str(test_files["f"]) not in result.duplicate_paths()

    def test_algorithm_selects_digest(self, three_copies, temp_dir):
        params = DeduplicationParams.from_human_readable(
            str(temp_dir), "txt,doc", algorithm=HashAlgorithmName.XXH128)

        result = DeduplicationCommand().execute(params)

        assert list(result.counts) == [xxhash.xxh128(b"X").hexdigest()]
        assert hashlib.sha1(b"X").hexdigest() not in result.counts

    def test_parallel_workers_give_same_result(self, test_files, temp_dir):
        sequential = DeduplicationCommand().execute(
            DeduplicationParams.from_human_readable(str(temp_dir), "txt,doc", preferred="doc"))
        parallel = DeduplicationCommand().execute(
            DeduplicationParams.from_human_readable(str(temp_dir), "txt,doc", preferred="doc", workers=4))

        assert parallel == sequential

    def test_empty_scan_is_not_an_error(self, temp_dir):
        result = DeduplicationCommand().execute(DeduplicationParams.from_human_readable(str(temp_dir), "txt"))
        assert result.is_empty
        assert result.duplicate_bytes == 0

    def test_missing_directory_raises_scan_error(self, temp_dir):
        params = DeduplicationParams.from_human_readable(str(temp_dir / "missing"), "txt")
        with pytest.raises(ScanError):
            DeduplicationCommand().execute(params)

    def test_get_catalog_after_execute(self, test_files, temp_dir):
        command = DeduplicationCommand()
        command.execute(DeduplicationParams.from_human_readable(str(temp_dir), "doc"))

        catalog = command.get_catalog()
        assert {r.path for r in catalog} == {str(test_files["c"]), str(test_files["f"])}

    def test_invokes_progress_callback(self, test_files, temp_dir):
        stages = []
        DeduplicationCommand().execute(
            DeduplicationParams.from_human_readable(str(temp_dir), "txt"),
            progress_callback=lambda stage, current, total: stages.append(stage),
        )
        assert "scanning" in stages
        assert "hashing" in stages
