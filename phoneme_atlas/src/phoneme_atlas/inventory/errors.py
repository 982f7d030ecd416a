"""Exception taxonomy for inventory validation."""

from __future__ import annotations


class InventoryError(ValueError):
    """Base class for all inventory validation failures."""


class ClassificationError(InventoryError):
    """A phoneme record is neither a consonant nor a vowel, or is both."""


class InventoryConsistencyError(InventoryError):
    """A language's phonemes and rules do not agree with each other.

    All problems found in one language are collected and reported together.
    """

    def __init__(self, language_id: str, problems: list[str]) -> None:
        self.language_id = language_id
        self.problems = list(problems)
        summary = "; ".join(self.problems)
        super().__init__(f"Language {language_id!r} is inconsistent: {summary}")


class UnknownPhonemeError(InventoryError, KeyError):
    """A realization was requested for an ipa value not in the inventory."""

    def __init__(self, language_id: str, ipa: str) -> None:
        self.language_id = language_id
        self.ipa = ipa
        super().__init__(f"Language {language_id!r} has no phoneme /{ipa}/")

    def __str__(self) -> str:
        return self.args[0]


class CatalogError(InventoryError):
    """A catalog source could not be read or holds conflicting languages."""
