"""
Sandhi at the stem-ending junction

Rules are checked in a fixed order and the first rule whose condition
holds is the only one applied. A rule returns every form it licenses:
optional (vA) rules return the unchanged form first, then the changed
one; a blocking rule returns no form at all.

The finite tables never put a consonant-initial ending after a bare
consonant stem, so nasal and cluster assimilation are reached only by
calling `combine` directly, for example with the participle suffixes ta
and Da.
"""

from typing import Callable, List, NamedTuple, Tuple, Union

from affix_tables import E_ENDINGS
from phonemes import (
    ANUSVARA, DEASPIRATE, STOPS, ends_with_vowel, homorganic_nasal,
    is_consonant, is_long, is_nasal, is_short, is_vowel, lengthen,
    same_quality, shorten, starts_with_conjunct,
)


class Stem(NamedTuple):
    """A conjugational stem; `thematic` marks a final thematic a/e, `imperative` an imperative stem"""

    value: str
    thematic: bool = False
    imperative: bool = False


class Rule(NamedTuple):
    name: str
    applies: Callable[[Stem, str], bool]
    apply: Callable[[Stem, str], Tuple[str, ...]]


def _vowel_meets_vowel(stem: Stem, affix: str) -> bool:
    return ends_with_vowel(stem.value) and bool(affix) and is_vowel(affix[0])


def _vowel_meets_consonant(stem: Stem, affix: str) -> bool:
    return ends_with_vowel(stem.value) and bool(affix) and is_consonant(affix[0])


def _consonant_final(stem: Stem, affix: str) -> bool:
    return bool(stem.value) and bool(affix) and not ends_with_vowel(stem.value)


# 0. Admissibility

def _blocked_e_ending(stem, affix):
    return affix in E_ENDINGS and not (stem.thematic and stem.value.endswith('a'))


def _block(stem, affix):
    return ()


# 1. Vowel + vowel

def _thematic_elision_applies(stem, affix):
    return (_vowel_meets_vowel(stem, affix) and stem.thematic
            and stem.value[-1] in 'ae' and affix[0] == 'i' and len(affix) > 1)


def _thematic_elision(stem, affix):
    return (stem.value[:-1] + affix,)


def _coalescence_applies(stem, affix):
    return _vowel_meets_vowel(stem, affix) and same_quality(stem.value[-1], affix[0])


def _coalescence(stem, affix):
    last = stem.value[-1]
    merged = lengthen(last) if is_short(last) else last
    return (stem.value[:-1] + merged + affix[1:],)


def _hiatus(stem, affix):
    return (stem.value + affix,)


# 2. Vowel + consonant

def _a_before_m_applies(stem, affix):
    # indicative endings only; the imperative mu and mo attach unchanged
    return (_vowel_meets_consonant(stem, affix) and stem.thematic and not stem.imperative
            and stem.value.endswith('a') and affix.startswith('m'))


def _a_before_m(stem, affix):
    # a -> A before m-endings (HC 3.154), a -> i before mo mu ma (HC 3.155)
    base = stem.value[:-1]
    forms = [base + 'a' + affix, base + 'A' + affix]
    if affix != 'mi':
        forms.append(base + 'i' + affix)
    return tuple(forms)


def _shortening_applies(stem, affix):
    return (_vowel_meets_consonant(stem, affix) and is_long(stem.value[-1])
            and starts_with_conjunct(affix))


def _shortening(stem, affix):
    # hrasvaH saMyoge (HC 1.84), optional in verbal forms
    last = stem.value[-1]
    return (stem.value + affix, stem.value[:-1] + shorten(last) + affix)


# 3. Consonant-final stem

def _anusvara_before_vowel_applies(stem, affix):
    return _consonant_final(stem, affix) and stem.value.endswith(ANUSVARA) and is_vowel(affix[0])


def _anusvara_before_vowel(stem, affix):
    return (stem.value[:-1] + 'm' + affix,)


def _nasal_assimilation_applies(stem, affix):
    return _consonant_final(stem, affix) and is_nasal(stem.value[-1]) and affix[0] in STOPS


def _nasal_assimilation(stem, affix):
    return (stem.value[:-1] + homorganic_nasal(affix[0]) + affix,)


def _cluster_assimilation_applies(stem, affix):
    return _consonant_final(stem, affix) and stem.value[-1] in STOPS and is_consonant(affix[0])


def _cluster_assimilation(stem, affix):
    # The first stop takes the shape of the second: kt -> tt, bdh -> ddh
    return (stem.value[:-1] + DEASPIRATE.get(affix[0], affix[0]) + affix,)


# 4. Default

def _always(stem, affix):
    return True


def _concatenate(stem, affix):
    return (stem.value + affix,)


SANDHI_RULES: Tuple[Rule, ...] = (
    Rule('thematic-only ending', _blocked_e_ending, _block),
    Rule('thematic elision', _thematic_elision_applies, _thematic_elision),
    Rule('vowel coalescence', _coalescence_applies, _coalescence),
    Rule('hiatus', _vowel_meets_vowel, _hiatus),
    Rule('a before m-ending', _a_before_m_applies, _a_before_m),
    Rule('shortening before conjunct', _shortening_applies, _shortening),
    Rule('anusvara before vowel', _anusvara_before_vowel_applies, _anusvara_before_vowel),
    Rule('nasal assimilation', _nasal_assimilation_applies, _nasal_assimilation),
    Rule('cluster assimilation', _cluster_assimilation_applies, _cluster_assimilation),
    Rule('concatenation', _always, _concatenate),
)


def _as_stem(stem: Union[Stem, str]) -> Stem:
    if isinstance(stem, Stem):
        return stem
    return Stem(stem, False)


def find_rule(stem: Union[Stem, str], affix: str) -> Rule:
    """First rule whose condition holds for this junction"""
    stem = _as_stem(stem)
    for rule in SANDHI_RULES:
        if rule.applies(stem, affix):
            return rule
    # Unreachable: the last rule always applies
    return SANDHI_RULES[-1]


def combine(stem: Union[Stem, str], affix: str) -> Tuple[str, ...]:
    """
    Join a stem and an ending

    Args:
        stem: Stem, or a plain string for a non-thematic stem
        affix: Ending in the canonical encoding ('' for a zero ending)

    Returns:
        Surface forms licensed by the single rule that fires, in order;
        empty when the junction is not admissible
    """
    stem = _as_stem(stem)
    return find_rule(stem, affix).apply(stem, affix)


def combine_all(stems, affixes) -> List[str]:
    """Every form of stems x affixes (stems outer), first occurrence kept"""
    seen = set()
    forms = []
    for stem in stems:
        for affix in affixes:
            for form in combine(stem, affix):
                if form not in seen:
                    seen.add(form)
                    forms.append(form)
    return forms
