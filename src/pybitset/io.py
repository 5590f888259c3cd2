"""Input/output helpers for the pybitset CLI."""
from __future__ import annotations

import csv
import json
import logging
import os
import re
import sys
from collections.abc import Iterable
from typing import TextIO

from .engine.errors import InvalidElement

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")


def _to_int(token: object) -> object:
    # strings from text/csv sources are parsed; JSON values are passed through
    # untouched so Bitset validation sees the original type
    if isinstance(token, str):
        try:
            return int(token)
        except ValueError:
            raise InvalidElement(token) from None
    return token


def parse_elements(text: str) -> list[object]:
    """Split ``text`` on commas/whitespace and parse each token as an integer."""
    return [_to_int(token) for token in _SEPARATORS.split(text.strip()) if token]


def _read_text(handle: TextIO) -> list[object]:
    elements: list[object] = []
    for line in handle:
        if line.strip():
            elements.extend(parse_elements(line))
    return elements


def _read_json(handle: TextIO) -> list[object]:
    data = json.load(handle)
    if isinstance(data, dict) and "elements" in data:
        data = data["elements"]
    if not isinstance(data, list):
        raise ValueError("JSON input must be a list or an object with an 'elements' key")
    return data


def _read_jsonl(handle: TextIO) -> list[object]:
    elements: list[object] = []
    for raw in handle:
        raw = raw.strip()
        if not raw:
            continue
        obj = json.loads(raw)
        if isinstance(obj, dict) and "element" in obj:
            obj = obj["element"]
        elements.append(obj)
    return elements


def _read_csv(handle: TextIO, column: str = "element") -> list[object]:
    reader = csv.DictReader(handle)
    fieldnames = reader.fieldnames or []
    if column not in fieldnames:
        raise ValueError(f"CSV missing required column '{column}'")
    return [_to_int(row[column]) for row in reader if row.get(column)]


def _open_path(path: str) -> Iterable[object]:
    _, ext = os.path.splitext(path)
    ext = ext.lower()
    if ext == ".json":
        with open(path, encoding="utf-8") as handle:
            yield from _read_json(handle)
    elif ext == ".jsonl":
        with open(path, encoding="utf-8") as handle:
            yield from _read_jsonl(handle)
    elif ext == ".csv":
        with open(path, encoding="utf-8", newline="") as handle:
            yield from _read_csv(handle)
    else:
        with open(path, encoding="utf-8") as handle:
            yield from _read_text(handle)


def read_elements(path: str) -> list[object]:
    elements = list(_open_path(path))
    logger.debug("read %d elements from %s", len(elements), path)
    return elements


def write_json(obj: object, path: str) -> None:
    if path == "-":
        json.dump(obj, sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(obj, handle, indent=2, sort_keys=True)
        handle.write("\n")


def write_text(text: str, path: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
