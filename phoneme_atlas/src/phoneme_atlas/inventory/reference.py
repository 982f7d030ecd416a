"""Canonical IPA reference grids.

Two immutable grids map classification coordinates to the symbols IPA
reserves there:

- consonants: manner -> place -> symbols (voiceless first, then voiced)
- vowels: height -> backness -> rounding -> symbols

A coordinate missing from a grid is *not defined* (an articulation judged
impossible, shaded on the IPA chart); lookups return ``None`` for it. A
coordinate present with an empty tuple is *vacant*: possible, but with no
dedicated IPA letter. Callers must keep the two apart.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from types import MappingProxyType

from phoneme_atlas.inventory.classification import (
    ConsonantManner as M,
    ConsonantPlace as P,
    Phoneme,
    VowelBackness as B,
    VowelHeight as H,
    VowelRounding as R,
    is_consonant,
)

ConsonantGrid = Mapping[M, Mapping[P, tuple[str, ...]]]
VowelGrid = Mapping[H, Mapping[B, Mapping[R, tuple[str, ...]]]]

_CONSONANTS: dict[M, dict[P, tuple[str, ...]]] = {
    M.PLOSIVE: {
        P.BILABIAL: ("p", "b"),
        P.LABIODENTAL: ("p̪", "b̪"),
        P.DENTAL: ("t̪", "d̪"),
        P.ALVEOLAR: ("t", "d"),
        P.POSTALVEOLAR: ("t̠", "d̠"),
        P.RETROFLEX: ("ʈ", "ɖ"),
        P.PALATAL: ("c", "ɟ"),
        P.VELAR: ("k", "ɡ"),
        P.UVULAR: ("q", "ɢ"),
        # no pharyngeal plosive: not a possible articulation
        P.GLOTTAL: ("ʔ",),
        P.LABIAL_VELAR: ("k͡p", "ɡ͡b"),
    },
    M.NASAL: {
        P.BILABIAL: ("m",),
        P.LABIODENTAL: ("ɱ",),
        P.DENTAL: ("n̪",),
        P.ALVEOLAR: ("n",),
        P.POSTALVEOLAR: ("n̠",),
        P.RETROFLEX: ("ɳ",),
        P.PALATAL: ("ɲ",),
        P.VELAR: ("ŋ",),
        P.UVULAR: ("ɴ",),
        P.GLOTTAL: ("ŋ̈",),
        P.LABIAL_VELAR: ("ŋ͡m",),
    },
    M.TRILL: {
        P.BILABIAL: ("ʙ",),
        P.ALVEOLAR: ("r",),
        P.UVULAR: ("ʀ",),
        P.PHARYNGEAL: (),
    },
    M.TAP_FLAP: {
        P.BILABIAL: ("ⱱ",),
        P.ALVEOLAR: ("ɾ",),
        P.RETROFLEX: ("ɽ",),
        P.UVULAR: ("ɢ̆",),
        P.PHARYNGEAL: (),
    },
    M.FRICATIVE: {
        P.BILABIAL: ("ɸ", "β"),
        P.LABIODENTAL: ("f", "v"),
        P.DENTAL: ("θ", "ð"),
        P.ALVEOLAR: ("s", "z"),
        P.POSTALVEOLAR: ("ʃ", "ʒ"),
        P.RETROFLEX: ("ʂ", "ʐ"),
        P.PALATAL: ("ç", "ʝ"),
        P.VELAR: ("x", "ɣ"),
        P.UVULAR: ("χ", "ʁ"),
        P.PHARYNGEAL: ("ħ", "ʕ"),
        P.GLOTTAL: ("h", "ɦ"),
        P.LABIAL_VELAR: ("ʍ", "w̥"),
    },
    M.LATERAL_FRICATIVE: {
        P.ALVEOLAR: ("ɬ", "ɮ"),
        P.RETROFLEX: (),
        P.PALATAL: (),
        P.VELAR: ("ʟ̝",),
        P.UVULAR: ("ʟ̝˔",),
    },
    M.APPROXIMANT: {
        P.BILABIAL: ("β̞",),
        P.LABIODENTAL: ("ʋ",),
        P.ALVEOLAR: ("ɹ",),
        P.RETROFLEX: ("ɻ",),
        P.PALATAL: ("j",),
        P.VELAR: ("ɰ",),
        P.LABIAL_VELAR: ("w",),
    },
    M.LATERAL_APPROXIMANT: {
        P.ALVEOLAR: ("l",),
        P.RETROFLEX: ("ɭ",),
        P.PALATAL: ("ʎ",),
        P.VELAR: ("ʟ",),
    },
    M.AFFRICATE: {
        P.LABIODENTAL: ("t͡f", "d͡v"),
        P.DENTAL: ("t̪͡θ", "d̪͡ð"),
        P.ALVEOLAR: ("t͡s", "d͡z"),
        P.POSTALVEOLAR: ("t͡ʃ", "d͡ʒ"),
        P.RETROFLEX: ("ʈ͡ʂ", "ɖ͡ʐ"),
        P.PALATAL: ("c͡ç", "ɟ͡ʝ"),
        P.VELAR: ("k͡x", "ɡ͡ɣ"),
        P.UVULAR: ("q͡χ", "ɢ͡ʁ"),
        P.LABIAL_VELAR: ("k͡pʷ",),
    },
}

_VOWELS: dict[H, dict[B, dict[R, tuple[str, ...]]]] = {
    H.CLOSE: {
        B.FRONT: {R.UNROUNDED: ("i",), R.ROUNDED: ("y",)},
        B.NEAR_FRONT: {R.UNROUNDED: ("ɪ",), R.ROUNDED: ("ʏ",)},
        B.CENTRAL: {R.UNROUNDED: ("ɨ",), R.ROUNDED: ("ʉ",)},
        B.NEAR_BACK: {R.ROUNDED: ("ʊ",)},
        B.BACK: {R.UNROUNDED: ("ɯ",), R.ROUNDED: ("u",)},
    },
    H.NEAR_CLOSE: {
        B.FRONT: {R.UNROUNDED: ("ɪ",), R.ROUNDED: ("ʏ",)},
        B.CENTRAL: {R.UNROUNDED: ("ɪ̈",)},
        B.NEAR_BACK: {R.ROUNDED: ("ʊ̟",)},
    },
    H.CLOSE_MID: {
        B.FRONT: {R.UNROUNDED: ("e",), R.ROUNDED: ("ø",)},
        B.CENTRAL: {R.UNROUNDED: ("ɘ",), R.ROUNDED: ("ɵ",)},
        B.BACK: {R.UNROUNDED: ("ɤ",), R.ROUNDED: ("o",)},
    },
    H.MID: {
        B.CENTRAL: {R.UNROUNDED: ("ə",), R.ROUNDED: ("ɚ",)},
    },
    H.OPEN_MID: {
        B.FRONT: {R.UNROUNDED: ("ɛ",), R.ROUNDED: ("œ",)},
        B.CENTRAL: {R.UNROUNDED: ("ɜ",), R.ROUNDED: ("ɞ",)},
        B.BACK: {R.UNROUNDED: ("ʌ",), R.ROUNDED: ("ɔ",)},
    },
    H.NEAR_OPEN: {
        B.FRONT: {R.UNROUNDED: ("æ",)},
        B.CENTRAL: {R.UNROUNDED: ("ɐ",)},
    },
    H.OPEN: {
        B.FRONT: {R.UNROUNDED: ("a",), R.ROUNDED: ("ɶ",)},
        B.CENTRAL: {R.UNROUNDED: ("ä",), R.ROUNDED: ("ɒ̈",)},
        B.BACK: {R.UNROUNDED: ("ɑ",), R.ROUNDED: ("ɒ",)},
    },
}


def _freeze_consonants(grid: dict[M, dict[P, tuple[str, ...]]]) -> ConsonantGrid:
    return MappingProxyType({m: MappingProxyType(row) for m, row in grid.items()})


def _freeze_vowels(grid: dict[H, dict[B, dict[R, tuple[str, ...]]]]) -> VowelGrid:
    return MappingProxyType({
        h: MappingProxyType({b: MappingProxyType(cell) for b, cell in row.items()})
        for h, row in grid.items()
    })


CONSONANT_REFERENCE: ConsonantGrid = _freeze_consonants(_CONSONANTS)
VOWEL_REFERENCE: VowelGrid = _freeze_vowels(_VOWELS)


def consonant_symbols(manner: M | str, place: P | str) -> tuple[str, ...] | None:
    """Return the reference symbols at (manner, place), or None if not defined."""
    try:
        row = CONSONANT_REFERENCE.get(M(manner))
        if row is None:
            return None
        return row.get(P(place))
    except ValueError:
        return None


def vowel_symbols(
    height: H | str, backness: B | str, rounding: R | str
) -> tuple[str, ...] | None:
    """Return the reference symbols at (height, backness, rounding), or None."""
    try:
        row = VOWEL_REFERENCE.get(H(height))
        if row is None:
            return None
        cell = row.get(B(backness))
        if cell is None:
            return None
        return cell.get(R(rounding))
    except ValueError:
        return None


def expected_symbols(phoneme: Phoneme) -> tuple[str, ...] | None:
    """Reference symbols at the phoneme's own coordinates."""
    if is_consonant(phoneme):
        return consonant_symbols(phoneme.manner, phoneme.place)
    return vowel_symbols(phoneme.height, phoneme.backness, phoneme.rounding)


def base_symbol(ipa: str) -> str:
    """Strip diacritics, tie bars and modifier letters from an IPA string.

    ``pʰ -> p``, ``t͡ʃ -> tʃ``, ``iː -> i``, ``t̪ -> t``.
    """
    decomposed = unicodedata.normalize("NFD", ipa)
    kept = [
        ch for ch in decomposed
        if unicodedata.category(ch) not in ("Mn", "Me", "Lm", "Sk")
    ]
    return unicodedata.normalize("NFC", "".join(kept))
