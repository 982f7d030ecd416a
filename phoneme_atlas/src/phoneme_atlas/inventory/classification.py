"""Classification schema for consonant and vowel phonemes.

Consonants are classified on a place x manner grid (plus optional
voicing); vowels on a height x backness x rounding grid. A raw record is
assigned to one of the two shapes exactly once, by ``phoneme_from_dict``,
and carries an explicit ``kind`` tag from then on so downstream code never
has to sniff fields again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from phoneme_atlas.inventory.errors import ClassificationError


class PhonemeKind(str, Enum):
    CONSONANT = "consonant"
    VOWEL = "vowel"


class ConsonantPlace(str, Enum):
    BILABIAL = "bilabial"
    LABIODENTAL = "labiodental"
    DENTAL = "dental"
    ALVEOLAR = "alveolar"
    POSTALVEOLAR = "postalveolar"
    RETROFLEX = "retroflex"
    PALATAL = "palatal"
    VELAR = "velar"
    UVULAR = "uvular"
    PHARYNGEAL = "pharyngeal"
    GLOTTAL = "glottal"
    LABIAL_VELAR = "labial-velar"


class ConsonantManner(str, Enum):
    PLOSIVE = "plosive"
    NASAL = "nasal"
    TRILL = "trill"
    TAP_FLAP = "tap_flap"
    FRICATIVE = "fricative"
    LATERAL_FRICATIVE = "lateral_fricative"
    APPROXIMANT = "approximant"
    LATERAL_APPROXIMANT = "lateral_approximant"
    AFFRICATE = "affricate"


class ConsonantVoicing(str, Enum):
    VOICELESS = "voiceless"
    VOICED = "voiced"
    ASPIRATED = "aspirated"
    EJECTIVE = "ejective"


class VowelHeight(str, Enum):
    CLOSE = "close"
    NEAR_CLOSE = "near-close"
    CLOSE_MID = "close-mid"
    MID = "mid"
    OPEN_MID = "open-mid"
    NEAR_OPEN = "near-open"
    OPEN = "open"


class VowelBackness(str, Enum):
    FRONT = "front"
    NEAR_FRONT = "near-front"
    CENTRAL = "central"
    NEAR_BACK = "near-back"
    BACK = "back"


class VowelRounding(str, Enum):
    UNROUNDED = "unrounded"
    ROUNDED = "rounded"


# Chart order (columns left to right, rows top to bottom)
CONSONANT_PLACES: tuple[ConsonantPlace, ...] = tuple(ConsonantPlace)
CONSONANT_MANNERS: tuple[ConsonantManner, ...] = tuple(ConsonantManner)
VOWEL_HEIGHTS: tuple[VowelHeight, ...] = tuple(VowelHeight)
VOWEL_BACKNESSES: tuple[VowelBackness, ...] = tuple(VowelBackness)
VOWEL_ROUNDINGS: tuple[VowelRounding, ...] = tuple(VowelRounding)

PLACE_LABELS: dict[ConsonantPlace, str] = {
    ConsonantPlace.BILABIAL: "Bilabial",
    ConsonantPlace.LABIODENTAL: "Labiodental",
    ConsonantPlace.DENTAL: "Dental",
    ConsonantPlace.ALVEOLAR: "Alveolar",
    ConsonantPlace.POSTALVEOLAR: "Postalveolar",
    ConsonantPlace.RETROFLEX: "Retroflex",
    ConsonantPlace.PALATAL: "Palatal",
    ConsonantPlace.VELAR: "Velar",
    ConsonantPlace.UVULAR: "Uvular",
    ConsonantPlace.PHARYNGEAL: "Pharyngeal",
    ConsonantPlace.GLOTTAL: "Glottal",
    ConsonantPlace.LABIAL_VELAR: "Labial-velar",
}

MANNER_LABELS: dict[ConsonantManner, str] = {
    ConsonantManner.PLOSIVE: "Plosive",
    ConsonantManner.NASAL: "Nasal",
    ConsonantManner.TRILL: "Trill",
    ConsonantManner.TAP_FLAP: "Tap/Flap",
    ConsonantManner.FRICATIVE: "Fricative",
    ConsonantManner.LATERAL_FRICATIVE: "Lateral fricative",
    ConsonantManner.APPROXIMANT: "Approximant",
    ConsonantManner.LATERAL_APPROXIMANT: "Lateral approximant",
    ConsonantManner.AFFRICATE: "Affricate",
}

HEIGHT_LABELS: dict[VowelHeight, str] = {
    VowelHeight.CLOSE: "Close",
    VowelHeight.NEAR_CLOSE: "Near-close",
    VowelHeight.CLOSE_MID: "Close-mid",
    VowelHeight.MID: "Mid",
    VowelHeight.OPEN_MID: "Open-mid",
    VowelHeight.NEAR_OPEN: "Near-open",
    VowelHeight.OPEN: "Open",
}

BACKNESS_LABELS: dict[VowelBackness, str] = {
    VowelBackness.FRONT: "Front",
    VowelBackness.NEAR_FRONT: "Near-front",
    VowelBackness.CENTRAL: "Central",
    VowelBackness.NEAR_BACK: "Near-back",
    VowelBackness.BACK: "Back",
}

_CONSONANT_FIELDS = ("place", "manner")
_VOWEL_FIELDS = ("height", "backness", "rounding")


def _coerce(enum_cls: type[Enum], value: Any, field_name: str, ipa: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise ClassificationError(
            f"/{ipa}/: {value!r} is not a valid {field_name}"
        ) from None


@dataclass(frozen=True, kw_only=True)
class PhonemeBase:
    """Fields shared by every phoneme record.

    ``graphemes`` and ``contexts`` are free-form metadata passed through
    untouched; they are stored as tuples so records stay immutable.
    """

    ipa: str
    graphemes: tuple[str, ...] = ()
    contexts: tuple[str, ...] = ()
    notes: str | None = None

    def __post_init__(self) -> None:
        if not self.ipa or not isinstance(self.ipa, str):
            raise ClassificationError(f"Phoneme record has no ipa value (got {self.ipa!r})")
        for name in ("graphemes", "contexts"):
            value = getattr(self, name)
            # a bare string would otherwise be split into characters
            if not isinstance(value, (list, tuple)) or not all(
                isinstance(v, str) for v in value
            ):
                raise ClassificationError(
                    f"/{self.ipa}/: {name} must be a list of strings, got {value!r}"
                )
            object.__setattr__(self, name, tuple(value))

    def _base_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"ipa": self.ipa}
        if self.graphemes:
            d["graphemes"] = list(self.graphemes)
        if self.contexts:
            d["contexts"] = list(self.contexts)
        if self.notes is not None:
            d["notes"] = self.notes
        return d


@dataclass(frozen=True, kw_only=True)
class ConsonantPhoneme(PhonemeBase):
    place: ConsonantPlace
    manner: ConsonantManner
    voicing: ConsonantVoicing | None = None
    kind: PhonemeKind = field(default=PhonemeKind.CONSONANT, init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "place", _coerce(ConsonantPlace, self.place, "place", self.ipa))
        object.__setattr__(
            self, "manner", _coerce(ConsonantManner, self.manner, "manner", self.ipa)
        )
        if self.voicing is not None:
            object.__setattr__(
                self, "voicing", _coerce(ConsonantVoicing, self.voicing, "voicing", self.ipa)
            )

    def to_dict(self) -> dict[str, Any]:
        d = self._base_dict()
        d["kind"] = self.kind.value
        d["place"] = self.place.value
        d["manner"] = self.manner.value
        if self.voicing is not None:
            d["voicing"] = self.voicing.value
        return d


@dataclass(frozen=True, kw_only=True)
class VowelPhoneme(PhonemeBase):
    height: VowelHeight
    backness: VowelBackness
    rounding: VowelRounding
    kind: PhonemeKind = field(default=PhonemeKind.VOWEL, init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "height", _coerce(VowelHeight, self.height, "height", self.ipa))
        object.__setattr__(
            self, "backness", _coerce(VowelBackness, self.backness, "backness", self.ipa)
        )
        object.__setattr__(
            self, "rounding", _coerce(VowelRounding, self.rounding, "rounding", self.ipa)
        )

    def to_dict(self) -> dict[str, Any]:
        d = self._base_dict()
        d["kind"] = self.kind.value
        d["height"] = self.height.value
        d["backness"] = self.backness.value
        d["rounding"] = self.rounding.value
        return d


Phoneme = ConsonantPhoneme | VowelPhoneme


def is_consonant(phoneme: Phoneme) -> bool:
    return phoneme.kind is PhonemeKind.CONSONANT


def is_vowel(phoneme: Phoneme) -> bool:
    return phoneme.kind is PhonemeKind.VOWEL


def phoneme_from_dict(d: dict[str, Any]) -> Phoneme:
    """Classify a raw phoneme record and build the matching dataclass.

    A record is a consonant iff it carries both ``place`` and ``manner``,
    and a vowel iff it carries ``height``, ``backness`` and ``rounding``.
    Records matching neither shape, both shapes, or one shape plus stray
    fields of the other are rejected. An explicit ``kind`` key, when
    present, must agree with the detected shape.

    Raises:
        ClassificationError: if the record cannot be classified.
    """
    if not isinstance(d, dict):
        raise ClassificationError(
            f"Phoneme record must be a mapping, got {type(d).__name__}"
        )
    ipa = d.get("ipa") or ""
    consonant_fields = [k for k in _CONSONANT_FIELDS if d.get(k) is not None]
    vowel_fields = [k for k in _VOWEL_FIELDS if d.get(k) is not None]
    consonant_shape = len(consonant_fields) == len(_CONSONANT_FIELDS)
    vowel_shape = len(vowel_fields) == len(_VOWEL_FIELDS)

    if consonant_shape and vowel_shape:
        raise ClassificationError(f"/{ipa}/ has both consonant and vowel dimensions")
    if not consonant_shape and not vowel_shape:
        present = consonant_fields + vowel_fields
        raise ClassificationError(
            f"/{ipa}/ is neither a consonant nor a vowel (dimensions present: {present})"
        )
    if consonant_shape and vowel_fields:
        raise ClassificationError(f"/{ipa}/ is a consonant with vowel fields {vowel_fields}")
    if vowel_shape and consonant_fields:
        raise ClassificationError(f"/{ipa}/ is a vowel with consonant fields {consonant_fields}")

    detected = PhonemeKind.CONSONANT if consonant_shape else PhonemeKind.VOWEL
    declared = d.get("kind")
    if declared is not None and declared != detected.value:
        raise ClassificationError(
            f"/{ipa}/ is declared {declared!r} but has the shape of a {detected.value}"
        )

    common: dict[str, Any] = {
        "ipa": ipa,
        "graphemes": d.get("graphemes") or (),
        "contexts": d.get("contexts") or (),
        "notes": d.get("notes"),
    }
    if detected is PhonemeKind.CONSONANT:
        return ConsonantPhoneme(
            **common, place=d["place"], manner=d["manner"], voicing=d.get("voicing")
        )
    return VowelPhoneme(
        **common, height=d["height"], backness=d["backness"], rounding=d["rounding"]
    )
