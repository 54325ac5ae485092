"""drush makefile のパース（ファイル → Manifest）.

core はトップレベルのキー・値から直接読み、その他のコンポーネントは
行走査で抽出します。Manifest の先頭は常に core です。

使用例:
    >>> manifest = parse(Path("mysite.make"))
    >>> manifest.lookup_by_name("views").version
    '3.1'
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from .adapters.makefile_adapter import API_KEY, CORE_KEY, MakefileAdapter
from .core.extractor import extract_components
from .core.models import CORE_KIND, CORE_NAME, Component, Manifest


def build_core_component(top_level: dict[str, str]) -> Component:
    """トップレベルの `core` から core コンポーネントを組み立てる."""
    return Component(name=CORE_NAME, version=top_level.get(CORE_KEY) or None, kind=CORE_KIND)


def parse_text(text: str, top_level: dict[str, str] | None = None) -> Manifest:
    """読み込み済みの全文とトップレベルのキー・値から Manifest を組み立てる.

    Args:
        text: makefile の全文（行走査用）
        top_level: トップレベルのキー・値（`core`, `api`）

    Returns:
        core を先頭に、初出順のコンポーネントを並べた Manifest
    """
    top_level = top_level or {}
    components = [build_core_component(top_level)]
    components.extend(extract_components(text))
    return Manifest(components=components, api=top_level.get(API_KEY) or None)


def parse(path: Path | str) -> Manifest:
    """makefile を読み込んで Manifest を返す.

    Args:
        path: makefile のパス

    Returns:
        パース結果

    Raises:
        ManifestLoadError: ファイルを読めない、またはキー・値構造として解釈できない場合
    """
    adapter = MakefileAdapter(path)
    source = adapter.read()
    has_core = adapter.validate(source)

    manifest = parse_text(source.text, source.top_level)
    core_version = manifest.components[0].version if has_core else "undeclared"
    logger.info(f"Parsed {len(manifest) - 1} components from {source.path} (core={core_version})")
    return manifest
