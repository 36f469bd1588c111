"""
Stem formation for Prakrit verbs

Given a root and a category, produce every stem the endings attach to.
Several stems per category are normal: optional grammatical rules each
contribute their own stem, and the dispatcher combines all of them with
all endings.
"""

from typing import Callable, Dict, Iterable, List, Tuple

from affix_tables import PASSIVE_AUGMENTS, PAST_CONSONANT_SUFFIXES, PAST_VOWEL_SUFFIXES
from errors import MissingRuleError
from models import Dialect, Tense, Voice
from phonemes import ends_with_vowel, validate_root
from sandhi import Stem, combine

THEMATIC_VOWEL = 'a'
SOFTENED_VOWEL = 'e'
FUTURE_CONNECTIVES = ('i', 'e')

# Magadhi sound law: rasor lazau (HC 4.288)
MAGADHI_SUBSTITUTIONS = {'r': 'l', 's': 'S'}


def _unique(stems: Iterable) -> List:
    seen = set()
    result = []
    for stem in stems:
        if stem not in seen:
            seen.add(stem)
            result.append(stem)
    return result


def sound_law(text: str, dialect: Dialect) -> str:
    """Apply the dialect's consonant substitutions (Magadhi only)"""
    if dialect is Dialect.MAGADHI:
        return ''.join(MAGADHI_SUBSTITUTIONS.get(ch, ch) for ch in text)
    return text


def prepare_root(root: str, dialect: Dialect) -> str:
    """
    Validate a root and apply the dialect's sound laws to it

    A final short a is the citation form of the thematic stem (gama for
    gam) and is removed. Magadhi replaces r with l and s with S.
    """
    root = validate_root(root)
    if len(root) > 1 and root.endswith(THEMATIC_VOWEL):
        root = root[:-1]
    return sound_law(root, dialect)


def guna_bases(root: str) -> Tuple[str, ...]:
    """
    Final i/I becomes e and u/U becomes o; the unchanged root stays as
    the rarer alternative (HC 4.237-238).
    """
    last = root[-1]
    if last in 'iI':
        return (root[:-1] + 'e', root)
    if last in 'uU':
        return (root[:-1] + 'o', root)
    return (root,)


def _core(stem: Stem) -> str:
    """Stem without its thematic vowel"""
    return stem.value[:-1] if stem.thematic else stem.value


def base_stems(root: str, voice: Voice) -> List[Stem]:
    """
    Present stems before softening

    A vowel-final root is used bare or with the thematic a; a
    consonant-final root always takes the a (vyaJjanAd adante, HC 4.239).
    The passive augments replace the thematic vowel.
    """
    stems = []
    for base in guna_bases(root):
        if ends_with_vowel(base):
            candidates = [Stem(base, False), Stem(base + THEMATIC_VOWEL, True)]
        else:
            candidates = [Stem(base + THEMATIC_VOWEL, True)]

        if voice is Voice.PASSIVE:
            candidates = [Stem(_core(stem) + augment, True)
                          for stem in candidates for augment in PASSIVE_AUGMENTS]
        stems.extend(candidates)
    return _unique(stems)


def soften(stems: Iterable[Stem]) -> List[Stem]:
    """Add the e-grade of every thematic a-stem right after it (gama, game)"""
    result = []
    for stem in stems:
        result.append(stem)
        if stem.thematic and stem.value.endswith(THEMATIC_VOWEL):
            result.append(Stem(stem.value[:-1] + SOFTENED_VOWEL, True))
    return _unique(result)


def present_stems(root: str, dialect: Dialect, voice: Voice) -> List[Stem]:
    return soften(base_stems(root, voice))


def imperative_stems(root: str, dialect: Dialect, voice: Voice) -> List[Stem]:
    # Same stems as the present, marked so that a stays a before mu and mo
    return [stem._replace(imperative=True) for stem in present_stems(root, dialect, voice)]


def future_stems(root: str, dialect: Dialect, voice: Voice) -> List[Stem]:
    """
    Active thematic stems exchange the a for the future connectives i and
    e (gama -> gami, game); bare and passive stems are kept as they are.
    """
    stems = []
    for stem in base_stems(root, voice):
        if voice is Voice.ACTIVE and stem.thematic:
            stems.extend(Stem(_core(stem) + vowel, False) for vowel in FUTURE_CONNECTIVES)
        else:
            stems.append(stem)
    return _unique(stems)


def si_hi_hia(base: str) -> Tuple[str, ...]:
    """sI-hI-hIa bhUtArthasya (HC 3.162): only for a vowel-final base"""
    if not ends_with_vowel(base):
        return ()
    return tuple(form for suffix in PAST_VOWEL_SUFFIXES for form in combine(base, suffix))


def vyanjanad_ia(base: str) -> Tuple[str, ...]:
    """vyaJjanAd IaH (HC 3.163): only for a consonant-final base"""
    if not base or ends_with_vowel(base):
        return ()
    return tuple(form for suffix in PAST_CONSONANT_SUFFIXES for form in combine(base, suffix))


PAST_RULES: Tuple[Callable[[str], Tuple[str, ...]], ...] = (si_hi_hia, vyanjanad_ia)


def past_bases(root: str, voice: Voice) -> List[str]:
    """
    Bases the past-tense rules are tried on

    In the active a consonant-final root is offered both bare and
    thematised, so both sUtras can apply to it. The passive works on the
    bare bases only: its augment stands where the thematic a would.
    """
    bases = []
    for base in guna_bases(root):
        bases.append(base)
        if voice is Voice.ACTIVE and not ends_with_vowel(base):
            bases.append(base + THEMATIC_VOWEL)
    return _unique(bases)


def passive_past(base: str) -> List[str]:
    """
    Passive of the active past forms of one base

    The Ia of a consonant base gives way to the augment (gamIa: gamijja,
    gamIa). A sI/hI/hIa suffix follows the augment (hosI: hoijjasI, hoIasI).
    """
    forms = []
    for augment in PASSIVE_AUGMENTS:
        if vyanjanad_ia(base):
            forms.append(base + augment)
        if si_hi_hia(base):
            forms.extend(si_hi_hia(base + augment))
    return forms


def past_stems(root: str, dialect: Dialect, voice: Voice) -> List[Stem]:
    """Forms of both past rules on every base; Magadhi also turns the s of sI into S"""
    forms = []
    for base in past_bases(root, voice):
        if voice is Voice.PASSIVE:
            produced = passive_past(base)
        else:
            produced = [form for rule in PAST_RULES for form in rule(base)]
        forms.extend(sound_law(form, dialect) for form in produced)
    return [Stem(form, False) for form in _unique(forms)]


STEM_BUILDERS: Dict[Tense, Callable[[str, Dialect, Voice], List[Stem]]] = {
    Tense.PRESENT: present_stems,
    Tense.PAST: past_stems,
    Tense.FUTURE: future_stems,
    Tense.IMPERATIVE: imperative_stems,
}


def form_stems(root: str, tense: Tense, dialect: Dialect, voice: Voice) -> Tuple[Stem, ...]:
    """
    Stems of a root for one category

    Raises:
        InvalidRootError: empty root or unsupported character
        MissingRuleError: no stem rule for the tense
    """
    builder = STEM_BUILDERS.get(tense)
    if builder is None:
        raise MissingRuleError(f"stem formation of {tense}")
    prepared = prepare_root(root, dialect)
    return tuple(builder(prepared, dialect, voice))
