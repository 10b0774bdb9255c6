from __future__ import annotations

import logging
from typing import Iterable, Protocol

logger = logging.getLogger(__name__)


class Speller(Protocol):
    def check(self, word: str) -> bool: ...


def _enchant_module():
    try:
        import enchant
    except ImportError:
        return None
    return enchant


def has_dictionary(language: str = "en_US") -> bool:
    enchant = _enchant_module()
    if enchant is None:
        return False
    return bool(enchant.dict_exists(language))


def create_speller(language: str = "en_US") -> Speller | None:
    """Return a dictionary speller, or None when no dictionary can be loaded."""
    enchant = _enchant_module()
    if enchant is None:
        logger.warning("create_speller: pyenchant or the enchant C library is not installed")
        return None
    if not has_dictionary(language):
        logger.warning("create_speller: no %s dictionary is installed", language)
        return None
    try:
        return enchant.Dict(language)
    except enchant.errors.Error as exc:
        logger.warning("create_speller: unable to load %s dictionary: %s", language, exc)
        return None


def misspelled_words(
    speller: Speller, phrases: Iterable[str], strip_chars: str = ""
) -> list[str]:
    """Split each phrase on single spaces and return the tokens the speller rejects."""
    rejected: list[str] = []
    for phrase in phrases:
        if not phrase:
            continue
        for token in phrase.split(" "):
            word = token.strip()
            for char in strip_chars:
                word = word.replace(char, "")
            if word and not speller.check(word):
                rejected.append(word)
    return rejected
