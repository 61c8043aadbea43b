from __future__ import annotations

from pathlib import Path
from typing import Sequence

import yaml

from urlpinger.models import TargetsFile


def parse_targets(urls: str | Sequence[str]) -> list[str]:
    """
    Build the ordered target list. A string is split on commas with no
    trimming or filtering, so "a,,b" keeps its empty middle target.
    """
    if isinstance(urls, str):
        return urls.split(",")
    return list(urls)


def load_targets_file(path: Path | str) -> list[str]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing targets file at {path}")

    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Targets file {path} must be a mapping with a 'urls' list")

    return parse_targets(TargetsFile.model_validate(data).urls)
