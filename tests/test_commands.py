"""
Tests for DeduplicationCommand, the single orchestration point for scans.
"""
from unittest import mock

import pytest

from dupfinder import DeduplicationCommand, ScanParams, HashAlgorithmName
from dupfinder.core.hasher import XXHashAlgorithmImpl


def membership(report):
    return sorted(sorted(s.paths) for s in report.duplicate_sets)


class TestDeduplicationCommand:

    def test_execute_returns_report_and_stats(self, abc_dir):
        report, stats = DeduplicationCommand().execute(ScanParams(roots=[str(abc_dir)]))
        assert membership(report) == [sorted([str(abc_dir / "a"), str(abc_dir / "b")])]
        assert "size" in stats.stage_stats

    def test_duplicates_across_roots(self, temp_dir):
        left = temp_dir / "left"
        right = temp_dir / "right"
        left.mkdir()
        right.mkdir()
        (left / "photo.jpg").write_bytes(b"pixels" * 100)
        (right / "copy.jpg").write_bytes(b"pixels" * 100)

        report, _ = DeduplicationCommand().execute(ScanParams(roots=[str(left), str(right)]))

        assert membership(report) == [sorted([str(left / "photo.jpg"), str(right / "copy.jpg")])]

    def test_unreadable_root_does_not_abort_other_roots(self, abc_dir, temp_dir):
        missing = str(temp_dir / "missing")
        report, _ = DeduplicationCommand().execute(ScanParams(roots=[missing, str(abc_dir)]))
        assert len(report.duplicate_sets) == 1

    def test_overlapping_roots_count_each_file_once(self, abc_dir):
        """The same file reached through two roots is not its own duplicate."""
        command = DeduplicationCommand()
        report, _ = command.execute(ScanParams(roots=[str(abc_dir), str(abc_dir / "a")]))

        assert command.files_found == 3
        assert membership(report) == [sorted([str(abc_dir / "a"), str(abc_dir / "b")])]

    def test_symlinked_root_counts_each_file_once(self, temp_dir):
        """A root that links to another root reaches the same files, not copies."""
        real = temp_dir / "real"
        real.mkdir()
        (real / "only.txt").write_bytes(b"single content")
        link = temp_dir / "link"
        try:
            link.symlink_to(real, target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")

        command = DeduplicationCommand()
        report, _ = command.execute(ScanParams(roots=[str(real), str(link)]))

        assert command.files_found == 1
        assert report.is_empty
        assert report.total_reclaimable == 0

    def test_no_files_is_not_an_error(self, temp_dir):
        report, _ = DeduplicationCommand().execute(ScanParams(roots=[str(temp_dir)]))
        assert report.is_empty
        assert report.total_reclaimable == 0

    def test_params_reach_scanner(self, test_files, temp_dir):
        params = ScanParams(roots=[str(temp_dir)], max_depth=1, exclude_hidden=True)
        report, _ = DeduplicationCommand().execute(params)

        assert membership(report) == sorted([
            sorted(str(test_files[k]) for k in ("dup1_a", "dup1_b")),
            sorted(str(test_files[k]) for k in ("dup2_a", "dup2_b")),
        ])

    def test_algorithm_is_configurable(self, abc_dir):
        params = ScanParams(roots=[str(abc_dir)], algorithm=HashAlgorithmName.XXH128, workers=1)
        with mock.patch("dupfinder.commands.get_algorithm", wraps=lambda name: XXHashAlgorithmImpl()) as spy:
            report, _ = DeduplicationCommand().execute(params)

        spy.assert_called_once_with(HashAlgorithmName.XXH128)
        assert len(report.duplicate_sets[0].digest) == 16


class TestScanParams:

    def test_defaults(self):
        params = ScanParams(roots=["."])
        assert params.max_depth is None
        assert params.exclude_hidden is False
        assert params.workers is None
        assert params.algorithm is HashAlgorithmName.BLAKE2B

    @pytest.mark.parametrize("kwargs", [
        {"roots": []},
        {"roots": [""]},
        {"roots": ["."], "max_depth": -1},
        {"roots": ["."], "workers": 0},
        {"roots": ["."], "min_size_bytes": -5},
        {"roots": ["."], "min_size_bytes": 10, "max_size_bytes": 5},
        {"roots": ["."], "algorithm": "md5"},
    ])
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            ScanParams(**kwargs)

    def test_algorithm_string_is_normalized(self):
        assert ScanParams(roots=["."], algorithm="sha256").algorithm is HashAlgorithmName.SHA256

    def test_from_human_readable(self):
        params = ScanParams.from_human_readable(
            roots=["/data"], min_size_str="1K", max_size_str="2MiB", max_depth=3)
        assert params.min_size_bytes == 1024
        assert params.max_size_bytes == 2 * 1024 * 1024
        assert params.max_depth == 3

    def test_from_human_readable_without_sizes(self):
        params = ScanParams.from_human_readable(roots=["/data"])
        assert params.min_size_bytes is None
        assert params.max_size_bytes is None
