"""Runtime configuration for the metadata generator.

Command line flags and environment variables are read here, once, and
handed to the rest of the program as a :class:`Settings` instance.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

DEFAULT_GLOB = "**/*.html"
API_URL = "https://api.openai.com/v1/chat/completions"
MODEL = "gpt-4o-mini"
TEMPERATURE = 0.3
API_KEY_ENV = "OPENAI_API_KEY"

_RECOGNIZED_PREFIXES = ("--glob=", "--apply=")


@dataclass(frozen=True)
class Settings:
    """Configuration parsed from CLI arguments and the environment."""

    glob: str
    apply: bool
    root: Path
    api_key: str | None
    api_url: str = API_URL
    model: str = MODEL
    temperature: float = TEMPERATURE

    @property
    def metadata_dir(self) -> Path:
        return self.root / "metadata"

    @property
    def overrides_path(self) -> Path:
        return self.metadata_dir / "overrides.json"

    @property
    def report_path(self) -> Path:
        return self.metadata_dir / "suggestions.json"


def _parse_bool(value: str) -> bool:
    return value == "true"


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    """Return the ``glob`` and ``apply`` options found in *argv*.

    Only ``--glob=<pattern>`` and ``--apply=<true|false>`` are recognized.
    Every other token is ignored rather than rejected.
    """

    tokens = [t for t in (argv or []) if t.startswith(_RECOGNIZED_PREFIXES)]
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument("--glob", default=DEFAULT_GLOB)
    parser.add_argument("--apply", type=_parse_bool, default=False)
    return parser.parse_args(tokens)


def load_settings(
    argv: Iterable[str] | None = None,
    environ: Mapping[str, str] | None = None,
    root: str | Path | None = None,
) -> Settings:
    """Build :class:`Settings` from *argv*, *environ* and the working directory."""

    args = parse_args(argv)
    env = os.environ if environ is None else environ
    base = Path(root) if root is not None else Path.cwd()
    return Settings(
        glob=args.glob,
        apply=args.apply,
        root=base,
        api_key=env.get(API_KEY_ENV) or None,
    )
