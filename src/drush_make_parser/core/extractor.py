"""コンポーネント抽出（Component Extractor）.

makefile 全文から `projects[<name>]` のコンポーネント名を発見し、
名前ごとに該当行（ブロック）を集めて Component に畳み込みます。

処理の流れ:
    1. 全文を1回走査し、名前 → 行リスト にグルーピング（初出順を保持）
    2. 各グループを classify_line() で分類し、Component へ畳み込む
"""

from __future__ import annotations

from loguru import logger

from .classifier import PROJECT_PREFIX, LineShape, classify_line
from .models import CORE_NAME, Component

_KEY_OPEN = f"{PROJECT_PREFIX}["


def extract_component_name(line: str) -> str:
    """行頭の `projects[<name>]` から name を取り出す（該当しなければ空文字）."""
    s = line.strip()
    if not s.startswith(_KEY_OPEN):
        return ""
    end = s.find("]", len(_KEY_OPEN))
    if end < 0:
        return ""
    return s[len(_KEY_OPEN) : end]


def component_list(text: str) -> list[str]:
    """全文から重複なしのコンポーネント名リストを初出順で返す.

    空の名前（不正行・空行）と core の予約名は除外します。
    """
    names: dict[str, None] = {}
    for line in text.splitlines():
        name = extract_component_name(line)
        if not name or name == CORE_NAME:
            continue
        names.setdefault(name, None)
    return list(names)


def find_block(name: str, text: str) -> list[str]:
    """name を参照する行だけを元の順序で返す."""
    return [line for line in text.splitlines() if extract_component_name(line) == name]


def group_blocks(text: str) -> dict[str, list[str]]:
    """全文を1回だけ走査して 名前 → ブロック（行リスト）に分ける.

    component_list() + find_block() を名前ごとに繰り返すのと同じ結果を、
    行数に対して線形で得ます。dict の挿入順がそのまま初出順になります。
    """
    blocks: dict[str, list[str]] = {}
    for line in text.splitlines():
        name = extract_component_name(line)
        if not name or name == CORE_NAME:
            continue
        blocks.setdefault(name, []).append(line)
    return blocks


def fold_component(name: str, lines: list[str]) -> Component:
    """ブロックを1つの Component に畳み込む.

    - スカラー項目は後勝ち（後の行が前の行を上書き）
    - 直接代入 / [version] / [download][branch] はいずれも version を設定し、後勝ち
    - [patch][] は出現順に追記
    - 分類結果の name が対象と食い違う行は捨てる
    """
    component = Component(name=name)
    for line in lines:
        classified = classify_line(line)
        if not classified.recognized:
            logger.debug(f"Skipping unrecognized line for '{name}': {line.strip()!r}")
            continue
        if classified.name != name:
            logger.debug(f"Discarding line for '{classified.name}' found in block '{name}'")
            continue

        shape = classified.shape
        value = classified.value
        if shape in (LineShape.DIRECT, LineShape.VERSION):
            component.version = value
        elif shape == LineShape.BRANCH:
            component.download_branch = value
            component.version = value
        elif shape == LineShape.TYPE:
            component.kind = value
        elif shape == LineShape.DOWNLOAD_TYPE:
            component.download_type = value
        elif shape == LineShape.REVISION:
            component.revision = value
        elif shape == LineShape.PATCH:
            component.patches.append(value)
        elif shape == LineShape.SUBDIR:
            component.subdir = value

    return component


def extract_components(text: str) -> list[Component]:
    """全文から core 以外の Component を初出順で抽出する."""
    blocks = group_blocks(text)
    components = [fold_component(name, lines) for name, lines in blocks.items()]
    logger.debug(f"Extracted {len(components)} components")
    return components
