from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = False  # reject tokens other than ' ', '>', '+', '~'
    json_indent: int | None = None
