"""
Prakrit verbal endings by tense, dialect, voice and person/number

Sources: Hemacandra, Prakrit grammar (Siddhahema 8.3-8.4); Pischel,
Grammatik der Prakrit-Sprachen; Woolner, Introduction to Prakrit.

All strings are in the canonical encoding (SLP1). A slot holds every
ending the grammarians admit for it, in the order they list them. The
passive is formed in the stem, so both voices share one set of endings.
"""

from types import MappingProxyType
from typing import Dict, Tuple

from errors import MissingRuleError
from models import Dialect, PersonNumber, Tense, Voice

P = PersonNumber

# Passive augments inserted before the thematic vowel (ijja / Ia, HC 3.160)
PASSIVE_AUGMENTS = ('ijja', 'Ia')

# sI-hI-hIa bhUtArthasya (HC 3.162): past of vowel-final stems
PAST_VOWEL_SUFFIXES = ('sI', 'hI', 'hIa')

# vyaJjanAd IaH (HC 3.163): past of consonant-final roots
PAST_CONSONANT_SUFFIXES = ('Ia',)

# Endings that only follow the thematic vowel a
E_ENDINGS = frozenset(('e', 'se', 'Se'))

PRESENT_ENDINGS = {
    Dialect.MAHARASHTRI: {
        P.THIRD_SINGULAR: ('i', 'e'),
        P.THIRD_PLURAL: ('nti', 'nte', 'ire'),
        P.SECOND_SINGULAR: ('si', 'se'),
        P.SECOND_PLURAL: ('ha', 'itTA'),
        P.FIRST_SINGULAR: ('mi',),
        P.FIRST_PLURAL: ('mo', 'mu', 'ma'),
    },
    # Shauraseni voices intervocalic t to d (HC 4.273)
    Dialect.SHAURASENI: {
        P.THIRD_SINGULAR: ('di', 'de'),
        P.THIRD_PLURAL: ('nti', 'nte', 'ire'),
        P.SECOND_SINGULAR: ('si', 'se'),
        P.SECOND_PLURAL: ('ha', 'itTA'),
        P.FIRST_SINGULAR: ('mi',),
        P.FIRST_PLURAL: ('mo', 'mu', 'ma'),
    },
    # Magadhi: s becomes palatal S (HC 4.288), otherwise as Shauraseni
    Dialect.MAGADHI: {
        P.THIRD_SINGULAR: ('di', 'de'),
        P.THIRD_PLURAL: ('nti', 'nte', 'ire'),
        P.SECOND_SINGULAR: ('Si', 'Se'),
        P.SECOND_PLURAL: ('ha', 'itTA'),
        P.FIRST_SINGULAR: ('mi',),
        P.FIRST_PLURAL: ('mo', 'mu', 'ma'),
    },
}

# du su mu vidhyAdiSu (HC 3.173); plural ntu ha mo
IMPERATIVE_ENDINGS = {
    Dialect.MAHARASHTRI: {
        P.THIRD_SINGULAR: ('u',),
        P.THIRD_PLURAL: ('ntu',),
        P.SECOND_SINGULAR: ('hi', 'su'),
        P.SECOND_PLURAL: ('ha',),
        P.FIRST_SINGULAR: ('mu',),
        P.FIRST_PLURAL: ('mo',),
    },
    Dialect.SHAURASENI: {
        P.THIRD_SINGULAR: ('du',),
        P.THIRD_PLURAL: ('ntu',),
        P.SECOND_SINGULAR: ('hi', 'su'),
        P.SECOND_PLURAL: ('ha',),
        P.FIRST_SINGULAR: ('mu',),
        P.FIRST_PLURAL: ('mo',),
    },
    Dialect.MAGADHI: {
        P.THIRD_SINGULAR: ('du',),
        P.THIRD_PLURAL: ('ntu',),
        P.SECOND_SINGULAR: ('hi', 'Su'),
        P.SECOND_PLURAL: ('ha',),
        P.FIRST_SINGULAR: ('mu',),
        P.FIRST_PLURAL: ('mo',),
    },
}

_FIRST_PLURAL_FUTURE = ('himo', 'himu', 'hima', 'hAmo', 'hAmu', 'hAma',
                        'ssAmo', 'ssAmu', 'ssAma', 'hissA', 'hitTA')

FUTURE_ENDINGS = {
    Dialect.MAHARASHTRI: {
        P.THIRD_SINGULAR: ('hii', 'hie'),
        P.THIRD_PLURAL: ('hinti', 'hinte', 'hiire'),
        P.SECOND_SINGULAR: ('hisi', 'hise'),
        P.SECOND_PLURAL: ('hitTA', 'hiha'),
        P.FIRST_SINGULAR: ('himi', 'hAmi', 'ssaM', 'ssAmi'),
        P.FIRST_PLURAL: _FIRST_PLURAL_FUTURE,
    },
    # bhaviSyati ssiH (HC 4.275): Shauraseni also builds the future with ssi
    Dialect.SHAURASENI: {
        P.THIRD_SINGULAR: ('hidi', 'hide', 'ssidi'),
        P.THIRD_PLURAL: ('hinti', 'hinte', 'hiire', 'ssinti'),
        P.SECOND_SINGULAR: ('hisi', 'hise', 'ssisi'),
        P.SECOND_PLURAL: ('hitTA', 'hiha', 'ssiha'),
        P.FIRST_SINGULAR: ('himi', 'hAmi', 'ssaM', 'ssAmi'),
        P.FIRST_PLURAL: _FIRST_PLURAL_FUTURE,
    },
    Dialect.MAGADHI: {
        P.THIRD_SINGULAR: ('hidi', 'hide', 'SSidi'),
        P.THIRD_PLURAL: ('hinti', 'hinte', 'hiire', 'SSinti'),
        P.SECOND_SINGULAR: ('hiSi', 'hiSe', 'SSiSi'),
        P.SECOND_PLURAL: ('hitTA', 'hiha', 'SSiha'),
        P.FIRST_SINGULAR: ('himi', 'hAmi', 'SSaM', 'SSAmi'),
        P.FIRST_PLURAL: ('himo', 'himu', 'hima', 'hAmo', 'hAmu', 'hAma',
                         'SSAmo', 'SSAmu', 'SSAma', 'hiSSA', 'hitTA'),
    },
}

# Past forms are the same for every person and number: the sUtra suffixes
# live in the stem, and the slot ending is zero.
PAST_ENDINGS = {
    dialect: {slot: ('',) for slot in PersonNumber}
    for dialect in Dialect
}

_ENDINGS_BY_TENSE = {
    Tense.PRESENT: PRESENT_ENDINGS,
    Tense.PAST: PAST_ENDINGS,
    Tense.FUTURE: FUTURE_ENDINGS,
    Tense.IMPERATIVE: IMPERATIVE_ENDINGS,
}


def _build_table() -> Dict[Tuple[Tense, Dialect, Voice, PersonNumber], Tuple[str, ...]]:
    table = {}
    for tense, by_dialect in _ENDINGS_BY_TENSE.items():
        for dialect, by_slot in by_dialect.items():
            for voice in Voice:
                for slot, endings in by_slot.items():
                    table[(tense, dialect, voice, slot)] = tuple(endings)
    return table


AFFIX_TABLE = MappingProxyType(_build_table())


def get_affixes(tense: Tense, dialect: Dialect, voice: Voice, slot: PersonNumber) -> Tuple[str, ...]:
    """
    Candidate endings for one grammatical slot

    Raises:
        MissingRuleError: the table has no entry for the combination
    """
    try:
        affixes = AFFIX_TABLE[(tense, dialect, voice, slot)]
    except KeyError:
        raise MissingRuleError(f"affixes of {tense}/{dialect}/{voice} {slot}") from None
    if not affixes:
        raise MissingRuleError(f"affixes of {tense}/{dialect}/{voice} {slot} (empty entry)")
    return affixes


def check_tables(table=AFFIX_TABLE):
    """Verify every category and slot has at least one ending"""
    for tense in Tense:
        for dialect in Dialect:
            for voice in Voice:
                for slot in PersonNumber:
                    key = (tense, dialect, voice, slot)
                    if not table.get(key):
                        raise MissingRuleError(f"affixes of {tense}/{dialect}/{voice} {slot}")


check_tables()
