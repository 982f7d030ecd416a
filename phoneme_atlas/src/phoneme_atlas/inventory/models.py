"""Data models for a language's phoneme inventory and contextual rules."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from phoneme_atlas.inventory.classification import (
    ConsonantPhoneme,
    Phoneme,
    VowelPhoneme,
    is_consonant,
    is_vowel,
    phoneme_from_dict,
)
from phoneme_atlas.inventory.errors import (
    ClassificationError,
    InventoryConsistencyError,
    InventoryError,
    UnknownPhonemeError,
)

# (realization environment label, requested environment) -> match?
EnvironmentMatcher = Callable[[str, str], bool]


class RuleType(str, Enum):
    ALLOPHONE = "allophone"
    DISTRIBUTION = "distribution"
    PHONOTACTIC = "phonotactic"


def exact_environment_match(label: str, environment: str) -> bool:
    return label == environment


def _check_record(d: Any, what: str, required: tuple[str, ...]) -> None:
    """Raise InventoryError unless ``d`` is a mapping with string ``required`` fields."""
    if not isinstance(d, dict):
        raise InventoryError(f"{what} must be a mapping, got {type(d).__name__}")
    bad = [k for k in required if not isinstance(d.get(k), str)]
    if bad:
        raise InventoryError(f"{what} has no valid {', '.join(bad)}")


def _as_list(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InventoryError(f"{what} must be a list, got {type(value).__name__}")
    return list(value)


@dataclass(frozen=True)
class LanguageRuleRealization:
    """A surface realization and the (free-text) environment it occurs in."""

    ipa: str
    environment: str

    def to_dict(self) -> dict[str, Any]:
        return {"ipa": self.ipa, "environment": self.environment}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> LanguageRuleRealization:
        _check_record(d, "Realization", ("ipa", "environment"))
        return cls(ipa=d["ipa"], environment=d["environment"])


@dataclass(frozen=True)
class LanguageRule:
    """A flat environment -> realization lookup for one underlying phoneme.

    Realization order is documentation order only; it carries no priority.
    """

    name: str
    type: RuleType
    phoneme: str
    realizations: tuple[LanguageRuleRealization, ...] = ()

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "type", RuleType(self.type))
        except ValueError:
            raise InventoryError(
                f"Rule {self.name!r} has unknown type {self.type!r}"
            ) from None
        object.__setattr__(self, "realizations", tuple(self.realizations))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "phoneme": self.phoneme,
            "realizations": [r.to_dict() for r in self.realizations],
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> LanguageRule:
        _check_record(d, "Rule", ("name", "type", "phoneme"))
        realizations = []
        raw_realizations = _as_list(d.get("realizations"), f"Rule {d['name']!r} realizations")
        for idx, raw in enumerate(raw_realizations):
            try:
                realizations.append(LanguageRuleRealization.from_dict(raw))
            except InventoryError as exc:
                raise InventoryError(f"Rule {d['name']!r}, realization #{idx}: {exc}") from exc
        return cls(
            name=d["name"],
            type=d["type"],
            phoneme=d["phoneme"],
            realizations=tuple(realizations),
        )


@dataclass(frozen=True)
class Language:
    """One language's phoneme inventory plus its contextual rules.

    Construction validates the inventory and raises
    ``InventoryConsistencyError`` listing every problem found:

    - duplicate ``ipa`` values within ``phonemes``
    - a rule whose ``phoneme`` is not in the inventory
    - duplicate rule names
    - a rule with no realizations, or two realizations sharing an environment
    """

    id: str
    name: str
    variety: str
    script: str
    phonemes: tuple[Phoneme, ...]
    rules: tuple[LanguageRule, ...] = ()
    notes: str | None = None
    _by_ipa: dict[str, Phoneme] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "phonemes", tuple(self.phonemes))
        object.__setattr__(self, "rules", tuple(self.rules))
        for p in self.phonemes:
            if not isinstance(p, (ConsonantPhoneme, VowelPhoneme)):
                raise ClassificationError(
                    f"Language {self.id!r}: {p!r} is not a classified phoneme"
                )
        problems = self._find_problems()
        if problems:
            raise InventoryConsistencyError(self.id, problems)
        self._by_ipa.update((p.ipa, p) for p in self.phonemes)

    def _find_problems(self) -> list[str]:
        problems: list[str] = []
        if not self.id:
            problems.append("language id is empty")

        ipa_counts = Counter(p.ipa for p in self.phonemes)
        for ipa, n in ipa_counts.items():
            if n > 1:
                problems.append(f"phoneme /{ipa}/ is listed {n} times")

        name_counts = Counter(r.name for r in self.rules)
        for name, n in name_counts.items():
            if n > 1:
                problems.append(f"rule name {name!r} is used {n} times")

        for rule in self.rules:
            if rule.phoneme not in ipa_counts:
                problems.append(
                    f"rule {rule.name!r} refers to /{rule.phoneme}/, which is not in the inventory"
                )
            if not rule.realizations:
                problems.append(f"rule {rule.name!r} has no realizations")
            env_counts = Counter(r.environment for r in rule.realizations)
            for env, n in env_counts.items():
                if n > 1:
                    problems.append(
                        f"rule {rule.name!r} lists environment {env!r} {n} times"
                    )
        return problems

    # --- Inventory queries ---

    @property
    def consonants(self) -> list[ConsonantPhoneme]:
        return [p for p in self.phonemes if is_consonant(p)]

    @property
    def vowels(self) -> list[VowelPhoneme]:
        return [p for p in self.phonemes if is_vowel(p)]

    def phoneme(self, ipa: str) -> Phoneme | None:
        return self._by_ipa.get(ipa)

    def rules_for(self, ipa: str) -> list[LanguageRule]:
        return [r for r in self.rules if r.phoneme == ipa]

    def phonemes_for_grapheme(self, grapheme: str) -> list[Phoneme]:
        """Phonemes listing ``grapheme`` verbatim among their spellings."""
        return [p for p in self.phonemes if grapheme in p.graphemes]

    def realize(
        self,
        ipa: str,
        environment: str,
        matcher: EnvironmentMatcher | None = None,
    ) -> str:
        """Surface realization of base phoneme ``ipa`` in ``environment``.

        Realizations of every rule about ``ipa`` are scanned in declaration
        order and the first one whose environment label matches wins. With
        no match (or no rules) the phoneme realizes as itself. Environment
        labels are opaque text; ``matcher`` decides what "matches" means and
        defaults to exact string equality.

        Raises:
            UnknownPhonemeError: if ``ipa`` is not in this inventory.
        """
        if ipa not in self._by_ipa:
            raise UnknownPhonemeError(self.id, ipa)
        match = matcher or exact_environment_match
        for rule in self.rules_for(ipa):
            for realization in rule.realizations:
                if match(realization.environment, environment):
                    return realization.ipa
        return ipa

    # --- Serialisation ---

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "variety": self.variety,
            "script": self.script,
            "phonemes": [p.to_dict() for p in self.phonemes],
        }
        if self.rules:
            d["rules"] = [r.to_dict() for r in self.rules]
        if self.notes is not None:
            d["notes"] = self.notes
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Language:
        if not isinstance(d, dict):
            raise InventoryError(f"Language record must be a mapping, got {type(d).__name__}")
        for key in ("id", "name", "variety", "script"):
            if not isinstance(d.get(key, ""), str):
                raise InventoryError(f"Language record field {key!r} must be a string")
        language_id = d.get("id", "")
        phonemes = []
        raw_phonemes = _as_list(d.get("phonemes"), f"Language {language_id!r} phonemes")
        for idx, raw in enumerate(raw_phonemes):
            try:
                phonemes.append(phoneme_from_dict(raw))
            except ClassificationError as exc:
                raise ClassificationError(
                    f"Language {language_id!r}, phoneme #{idx}: {exc}"
                ) from exc
        rules = []
        for idx, raw in enumerate(_as_list(d.get("rules"), f"Language {language_id!r} rules")):
            try:
                rules.append(LanguageRule.from_dict(raw))
            except InventoryError as exc:
                raise InventoryError(f"Language {language_id!r}, rule #{idx}: {exc}") from exc
        return cls(
            id=language_id,
            name=d.get("name", ""),
            variety=d.get("variety", ""),
            script=d.get("script", ""),
            phonemes=tuple(phonemes),
            rules=tuple(rules),
            notes=d.get("notes"),
        )
