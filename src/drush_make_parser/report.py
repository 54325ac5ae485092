"""Manifest の表形式レポート出力.

コンポーネント1件を1行として Polars DataFrame / CSV に書き出します。
makefile 形式への書き戻しではありません。
"""

from __future__ import annotations

from pathlib import Path

import polars as pl
from loguru import logger

from .core.models import Manifest

REPORT_SCHEMA = {
    "name": pl.Utf8,
    "version": pl.Utf8,
    "kind": pl.Utf8,
    "download_type": pl.Utf8,
    "download_branch": pl.Utf8,
    "revision": pl.Utf8,
    "subdir": pl.Utf8,
    "patch_count": pl.Int64,
    "patches": pl.Utf8,
}


def manifest_to_frame(manifest: Manifest) -> pl.DataFrame:
    """Manifest を DataFrame に変換する（行順は Manifest 順）.

    patches は CSV に書けるよう半角スペース区切りの1文字列にまとめます。
    """
    rows = []
    for component in manifest:
        row = component.as_dict()
        patches = row.pop("patches")
        row["patch_count"] = len(patches)
        row["patches"] = " ".join(patches)
        rows.append(row)
    return pl.DataFrame(rows, schema=REPORT_SCHEMA)


def export_manifest_report(
    manifest: Manifest,
    output_dir: Path | str,
    filename: str = "components.csv",
) -> Path:
    """Manifest を CSV レポートとして出力する.

    Args:
        manifest: パース結果
        output_dir: 出力ディレクトリ（無ければ作成）
        filename: 出力ファイル名

    Returns:
        出力した CSV のパス
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = output_dir / filename
    manifest_to_frame(manifest).write_csv(output_path)

    logger.info(f"Component report written to {output_path}")
    return output_path
