"""バッチ設定（makefiles.yml）の読み込み."""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger


def load_makefiles_config(config_yml: Path | str) -> list[dict]:
    """makefiles.yml を読み込んで有効な makefile エントリのリストを返す.

    YAML形式:
        makefiles:
          - id: mysite
            path: sites/mysite.make
            enabled: true

    相対パスは YAML ファイルのディレクトリ基準で解決し、`path` を Path に置き換えます。
    `id` が無いエントリはファイル名（拡張子なし）を id にします。

    Args:
        config_yml: 設定ファイルのパス

    Returns:
        enabled=true（省略時 true）のエントリの辞書リスト

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: YAML のルートがマッピングでない、または path が無いエントリがある場合
    """
    config_yml = Path(config_yml)
    if not config_yml.exists():
        raise FileNotFoundError(f"Config file not found: {config_yml}")

    with open(config_yml, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        msg = f"Config file must contain a mapping, got {type(config)}"
        raise ValueError(msg)

    entries = []
    for entry in config.get("makefiles", []) or []:
        if not entry.get("enabled", True):
            continue
        if "path" not in entry:
            msg = f"Makefile entry without 'path' in {config_yml}: {entry}"
            raise ValueError(msg)

        path = Path(entry["path"])
        if not path.is_absolute():
            path = config_yml.parent / path
        entries.append({**entry, "id": entry.get("id") or path.stem, "path": path})

    logger.info(f"Loaded {len(entries)} enabled makefiles from {config_yml}")
    return entries
