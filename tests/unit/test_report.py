"""Unit tests for component report export."""

from pathlib import Path

import polars as pl

from drush_make_parser.core.models import Component, Manifest
from drush_make_parser.report import REPORT_SCHEMA, export_manifest_report, manifest_to_frame


def _manifest() -> Manifest:
    return Manifest(
        components=[
            Component(name="drupal", version="7.x", kind="core"),
            Component(
                name="nodequeue",
                version="2.0-alpha1",
                subdir="contrib",
                patches=["http://example.com/1.patch", "http://example.com/2.patch"],
            ),
            Component(name="ns_core", version="7.x-2.x", kind="module", download_type="git", download_branch="7.x-2.x"),
        ]
    )


class TestManifestToFrame:
    def test_columns_and_order(self) -> None:
        df = manifest_to_frame(_manifest())

        assert df.columns == list(REPORT_SCHEMA)
        assert df["name"].to_list() == ["drupal", "nodequeue", "ns_core"]

    def test_patches_flattened(self) -> None:
        """パッチが件数と連結文字列になること."""
        df = manifest_to_frame(_manifest())

        assert df["patch_count"].to_list() == [0, 2, 0]
        assert df["patches"][1] == "http://example.com/1.patch http://example.com/2.patch"

    def test_missing_values_are_null(self) -> None:
        df = manifest_to_frame(_manifest())

        assert df["revision"].null_count() == 3
        assert df["download_type"].to_list() == [None, None, "git"]


class TestExportManifestReport:
    def test_write_csv(self, tmp_path: Path) -> None:
        output_dir = tmp_path / "reports"

        path = export_manifest_report(_manifest(), output_dir, filename="site.csv")

        assert path == output_dir / "site.csv"
        assert path.exists()
        df = pl.read_csv(path)
        assert df["name"].to_list() == ["drupal", "nodequeue", "ns_core"]
        assert df["patch_count"].to_list() == [0, 2, 0]
