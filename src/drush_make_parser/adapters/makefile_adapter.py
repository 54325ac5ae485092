"""MakefileAdapter for reading drush makefiles from disk.

The full text is used for line scanning, and the same text is loaded with
configparser to read the top-level keys (``core``, ``api``).
"""

from __future__ import annotations

import configparser
from pathlib import Path

from loguru import logger

from ..core.exceptions import ManifestLoadError
from .base_adapter import BaseAdapter, MakefileSource

CORE_KEY = "core"
API_KEY = "api"

# makefiles have no section header before the top-level keys
_ROOT_SECTION = "__root__"


def load_top_level(text: str) -> dict[str, str]:
    """Load the top-level key/value pairs of a makefile.

    Args:
        text: Full makefile text

    Returns:
        Keys declared before any ``[section]`` header, with surrounding double
        quotes and inline ``;`` comments stripped from values. Keys without a
        value are omitted. Indentation is ignored, so no line continues another.

    Raises:
        configparser.Error: The text cannot be loaded as key/value pairs
    """
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        allow_no_value=True,
        delimiters=("=",),
        comment_prefixes=(";", "#"),
        inline_comment_prefixes=(";",),
        default_section=configparser.DEFAULTSECT,
    )
    parser.optionxform = str  # keep key case
    # indented lines would otherwise be read as continuations of the previous key
    lines = "\n".join(line.strip() for line in text.splitlines())
    parser.read_string(f"[{_ROOT_SECTION}]\n{lines}")

    top_level: dict[str, str] = {}
    for key, value in parser.items(_ROOT_SECTION):
        if value is None:
            continue
        value = value.strip()
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
        top_level[key] = value
    return top_level


class MakefileAdapter(BaseAdapter):
    """Adapter for makefiles on the local filesystem.

    Args:
        file_path: Path to the makefile
    """

    def __init__(self, file_path: Path | str) -> None:
        self.file_path = Path(file_path)

    def read(self) -> MakefileSource:
        """Read the makefile.

        Returns:
            MakefileSource holding the full text and top-level keys

        Raises:
            ManifestLoadError: The file is missing, unreadable or cannot be loaded
        """
        if not self.file_path.exists():
            raise ManifestLoadError(str(self.file_path), "file not found")

        try:
            with open(self.file_path, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestLoadError(str(self.file_path), str(e)) from e

        try:
            top_level = load_top_level(text)
        except configparser.Error as e:
            raise ManifestLoadError(str(self.file_path), f"invalid key/value structure: {e}") from e

        logger.info(f"Loaded makefile {self.file_path} ({len(text.splitlines())} lines)")
        return MakefileSource(path=self.file_path, text=text, top_level=top_level)

    def validate(self, source: MakefileSource) -> bool:
        """Check that the makefile declares a core version."""
        if not source.top_level.get(CORE_KEY):
            logger.warning(f"No '{CORE_KEY}' declared in {source.path}")
            return False
        return True
