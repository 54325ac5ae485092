"""drush makefile を読み込み、コンポーネント一覧を表示する。"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from .config import load_makefiles_config
from .core.exceptions import ManifestLoadError
from .core.models import Component, Manifest
from .parser import parse
from .report import export_manifest_report


def _format_component(component: Component) -> str:
    parts = [component.name, component.version or "-"]
    if component.kind:
        parts.append(f"type={component.kind}")
    if component.download_type:
        parts.append(f"download={component.download_type}")
    if component.revision:
        parts.append(f"revision={component.revision}")
    if component.patches:
        parts.append(f"patches={len(component.patches)}")
    return "  ".join(parts)


def _show(manifest: Manifest, name: str | None, prefix: str | None) -> None:
    if name is not None:
        component = manifest.lookup_by_name(name)
        if component is None:
            print(f"{name}: not found")
        else:
            print(_format_component(component))
        return

    components = manifest.list_by_prefix(prefix) if prefix is not None else list(manifest)
    for component in components:
        print(_format_component(component))


def _collect_makefiles(paths: list[Path], config: Path | None) -> list[tuple[str, Path]]:
    makefiles = [(p.stem, p) for p in paths]
    if config is not None:
        for entry in load_makefiles_config(config):
            makefiles.append((entry["id"], entry["path"]))
    return makefiles


def run(
    paths: list[Path],
    config: Path | None = None,
    name: str | None = None,
    prefix: str | None = None,
    report_dir: Path | None = None,
) -> int:
    """makefile 群をパースして表示し、終了コードを返す（読み込み失敗があれば 1）."""
    makefiles = _collect_makefiles(paths, config)
    if not makefiles:
        logger.warning("No makefiles given")
        return 1

    exit_code = 0
    for makefile_id, path in makefiles:
        try:
            manifest = parse(path)
        except ManifestLoadError as e:
            logger.error(str(e))
            exit_code = 1
            continue

        if len(makefiles) > 1:
            print(f"# {makefile_id} ({path})")
        _show(manifest, name, prefix)

        if report_dir is not None:
            export_manifest_report(manifest, report_dir, filename=f"{makefile_id}.csv")

    return exit_code


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Parse drush makefiles and list their components.")
    p.add_argument("makefiles", nargs="*", type=Path, help="makefile paths")
    p.add_argument("--config", type=Path, default=None, help="makefiles.yml listing makefiles to parse")
    p.add_argument("--name", default=None, help="Show only the component with this exact name")
    p.add_argument("--prefix", default=None, help="Show only components whose name starts with this prefix")
    p.add_argument("--report-dir", type=Path, default=None, help="Write a CSV report per makefile here")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    sys.exit(
        run(
            args.makefiles,
            config=args.config,
            name=args.name,
            prefix=args.prefix,
            report_dir=args.report_dir,
        )
    )


if __name__ == "__main__":
    main()
