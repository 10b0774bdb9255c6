from __future__ import annotations

from pathlib import Path

from chktiles.report import Diagnostic


def build_tile(
    width: str = "100",
    height: str = "100",
    keywords: list[str] | None = None,
    identifier: str | None = "tile-001",
    text: str = "",
    wrap_in_group: bool = False,
) -> str:
    bag = ""
    if keywords is not None:
        items = "".join(f"<rdf:li>{item}</rdf:li>" for item in keywords)
        bag = f"<dc:subject><rdf:Bag>{items}</rdf:Bag></dc:subject>"
    ident = f"<dc:identifier>{identifier}</dc:identifier>" if identifier is not None else ""
    metadata = ""
    if bag or ident:
        metadata = f"""<metadata id="metadata1">
    <rdf:RDF>
      <cc:Work rdf:about="">
        <dc:format>image/svg+xml</dc:format>
        {bag}
        {ident}
      </cc:Work>
    </rdf:RDF>
  </metadata>"""
    body = f"<g id=\"layer1\">{text}</g>" if wrap_in_group else text
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:cc="http://creativecommons.org/ns#"
     xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
     width="{width}" height="{height}" viewBox="0 0 100 100">
  {metadata}
  <rect x="0" y="0" width="100" height="100" fill="#ccc" />
  {body}
</svg>
"""


def write_tile(directory: Path, name: str, svg_text: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(svg_text)
    return path


class WordListSpeller:
    def __init__(self, words: set[str]) -> None:
        self.words = words
        self.checked: list[str] = []

    def check(self, word: str) -> bool:
        self.checked.append(word)
        return word.lower() in self.words


class CollectingSink:
    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    @property
    def codes(self) -> list[str]:
        return [item.code for item in self.diagnostics]
