"""makefile 1行の分類（Line Classifier）.

`projects[<name>]...[<attr>] = <value>` 形式の1行を判定し、
参照しているコンポーネント名・対象フィールド（LineShape）・値を取り出します。

設計方針:
    - 行全体にアンカーした正規表現を1本だけ使い、属性パスは明示的なテーブルで振り分ける
    - `=` 前後の空白、行頭/行末の空白は許容する
    - 形に合わない行は例外にせず UNRECOGNIZED として返す（寛容なベストエフォート解析）
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

PROJECT_PREFIX = "projects"

# projects[views][download][type] = git
#   name="views", path="[download][type]", value="git"
_KEY_PATH_LINE = re.compile(
    rf"^{PROJECT_PREFIX}\[(?P<name>\w+)\]"
    r"(?P<path>(?:\[\w*\])*)"
    r"\s*=\s*"
    r"(?P<value>\"[^\"]*\"|\S+)$"
)


class LineShape(str, Enum):
    """1行が対象とするフィールドの種類."""

    DIRECT = "direct"  # projects[x] = 1.2
    VERSION = "version"  # projects[x][version] = 1.2
    BRANCH = "branch"  # projects[x][download][branch] = 7.x-2.x
    TYPE = "type"  # projects[x][type] = module
    DOWNLOAD_TYPE = "download_type"  # projects[x][download][type] = git
    REVISION = "revision"  # projects[x][download][revision] = <hash>
    PATCH = "patch"  # projects[x][patch][] = "<url>"
    SUBDIR = "subdir"  # projects[x][subdir] = contrib
    UNRECOGNIZED = "unrecognized"


# 属性パス → LineShape（完全一致のみ。部分一致で緩く拾わない）
_SHAPES_BY_PATH: dict[str, LineShape] = {
    "": LineShape.DIRECT,
    "[version]": LineShape.VERSION,
    "[download][branch]": LineShape.BRANCH,
    "[type]": LineShape.TYPE,
    "[download][type]": LineShape.DOWNLOAD_TYPE,
    "[download][revision]": LineShape.REVISION,
    "[patch][]": LineShape.PATCH,
    "[subdir]": LineShape.SUBDIR,
}


@dataclass(frozen=True)
class ClassifiedLine:
    shape: LineShape
    name: str = ""
    value: str = ""

    @property
    def recognized(self) -> bool:
        return self.shape is not LineShape.UNRECOGNIZED


UNRECOGNIZED = ClassifiedLine(LineShape.UNRECOGNIZED)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def classify_line(line: str) -> ClassifiedLine:
    """1行を分類する.

    Args:
        line: makefile の生の1行

    Returns:
        分類結果。認識できない行は `UNRECOGNIZED`（name/value は空文字）

    Examples:
        >>> classify_line("projects[views] = 3.1")
        ClassifiedLine(shape=<LineShape.DIRECT: 'direct'>, name='views', value='3.1')
        >>> classify_line("projects[]=").shape
        <LineShape.UNRECOGNIZED: 'unrecognized'>
    """
    match = _KEY_PATH_LINE.match(line.strip())
    if match is None:
        return UNRECOGNIZED

    shape = _SHAPES_BY_PATH.get(match.group("path"))
    if shape is None:
        return UNRECOGNIZED

    return ClassifiedLine(shape, match.group("name"), _unquote(match.group("value")))
