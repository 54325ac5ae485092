"""パース結果のデータモデル（Component / Manifest）."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

CORE_NAME = "drupal"
CORE_KIND = "core"


@dataclass
class Component:
    """配布単位1つ分（core / module / theme など）.

    Attributes:
        name: コンポーネント名（Manifest 内で一意）
        version: バージョン（直接代入 / [version] / [download][branch] 由来）
        kind: 宣言されたタイプ（未宣言なら空文字）
        download_type: [download][type]（例: "git"）
        download_branch: [download][branch] の値そのもの
        revision: [download][revision]
        subdir: [subdir]（レポート用。解析結果には影響しない）
        patches: [patch][] の URL（出現順、重複除去なし）
    """

    name: str
    version: str | None = None
    kind: str = ""
    download_type: str | None = None
    download_branch: str | None = None
    revision: str | None = None
    subdir: str | None = None
    patches: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "version": self.version,
            "kind": self.kind,
            "download_type": self.download_type,
            "download_branch": self.download_branch,
            "revision": self.revision,
            "subdir": self.subdir,
            "patches": list(self.patches),
        }


@dataclass
class Manifest:
    """makefile 全体のパース結果.

    `components` は発見順（先頭は常に core）。
    """

    components: list[Component] = field(default_factory=list)
    api: str | None = None

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    @property
    def core(self) -> Component | None:
        for component in self.components:
            if component.kind == CORE_KIND and component.name == CORE_NAME:
                return component
        return None

    def names(self) -> list[str]:
        return [c.name for c in self.components]

    def lookup_by_name(self, name: str) -> Component | None:
        """名前の完全一致でコンポーネントを取得する.

        Args:
            name: コンポーネント名

        Returns:
            一致したコンポーネント（Manifest が保持するオブジェクトそのもの）。
            見つからない場合は None
        """
        for component in self.components:
            if component.name == name:
                return component
        return None

    def list_by_prefix(self, prefix: str) -> list[Component]:
        """名前が prefix で始まるコンポーネントを Manifest 順に返す（無ければ空リスト）."""
        return [c for c in self.components if c.name.startswith(prefix)]


def lookup_by_name(manifest: Manifest, name: str) -> Component | None:
    return manifest.lookup_by_name(name)


def list_by_prefix(manifest: Manifest, prefix: str) -> list[Component]:
    return manifest.list_by_prefix(prefix)
