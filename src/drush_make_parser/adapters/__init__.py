"""makefile 読み込み用のアダプタ群."""

from .base_adapter import BaseAdapter, MakefileSource
from .makefile_adapter import API_KEY, CORE_KEY, MakefileAdapter, load_top_level

__all__ = [
    "BaseAdapter",
    "MakefileSource",
    "MakefileAdapter",
    "load_top_level",
    "CORE_KEY",
    "API_KEY",
]
