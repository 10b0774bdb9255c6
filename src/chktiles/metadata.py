from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from .errors import TileParseError

TEXT_ELEMENTS = {"text", "tspan"}


@dataclass(frozen=True)
class TileDocument:
    width: str = ""
    height: str = ""
    view_box: str = ""
    keywords: tuple[str, ...] = ()
    identifier: str = ""
    text_runs: tuple[str, ...] = ()


def local_name(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def _find_first(root: ET.Element, name: str) -> ET.Element | None:
    for node in root.iter():
        if isinstance(node.tag, str) and local_name(node.tag) == name:
            return node
    return None


def _children_named(node: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in node if local_name(child.tag) == name]


def _svg_element(root: ET.Element) -> ET.Element | None:
    if local_name(root.tag) == "svg":
        return root
    return _find_first(root, "svg")


def _keywords(work: ET.Element) -> tuple[str, ...]:
    items: list[str] = []
    for subject in _children_named(work, "subject"):
        for bag in _children_named(subject, "Bag"):
            for item in _children_named(bag, "li"):
                items.append("".join(item.itertext()).strip())
    return tuple(items)


def _identifier(work: ET.Element) -> str:
    for node in _children_named(work, "identifier"):
        return "".join(node.itertext()).strip()
    return ""


def _text_runs(root: ET.Element) -> tuple[str, ...]:
    runs: list[str] = []
    for node in root.iter():
        if not isinstance(node.tag, str) or local_name(node.tag) not in TEXT_ELEMENTS:
            continue
        # Each fragment belongs to exactly one text/tspan: its own text plus
        # the tails of its children.
        fragments = [node.text] + [child.tail for child in node]
        for fragment in fragments:
            if fragment and fragment.strip():
                runs.append(fragment.strip())
    return tuple(runs)


def parse_tile(content: bytes | str) -> TileDocument:
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise TileParseError(f"could not parse svg: {exc}") from exc

    svg = _svg_element(root)
    work = _find_first(root, "Work")
    return TileDocument(
        width=svg.get("width", "") if svg is not None else "",
        height=svg.get("height", "") if svg is not None else "",
        view_box=svg.get("viewBox", "") if svg is not None else "",
        keywords=_keywords(work) if work is not None else (),
        identifier=_identifier(work) if work is not None else "",
        text_runs=_text_runs(root),
    )


def load_tile(path: Path | str) -> TileDocument:
    """Read and parse one tile. ``OSError`` from reading is left to the caller."""
    with open(path, "rb") as handle:
        content = handle.read()
    try:
        return parse_tile(content)
    except TileParseError as exc:
        exc.path = path
        raise
