"""
Prakrit phoneme inventory and sound classification

The engine works in a single canonical encoding: SLP1 restricted to the
sounds Prakrit actually has. Every phoneme is exactly one ASCII character,
so the last character of a string is always its last sound.
"""

from errors import InvalidRootError

SHORT_VOWELS = frozenset('aiu')
LONG_VOWELS = frozenset('AIUeo')
VOWELS = SHORT_VOWELS | LONG_VOWELS

# Stops by place of articulation, unaspirated/aspirated, voiceless then voiced
VELARS = frozenset('kKgG')
PALATALS = frozenset('cCjJ')
RETROFLEXES = frozenset('wWqQ')
DENTALS = frozenset('tTdD')
LABIALS = frozenset('pPbB')
STOPS = VELARS | PALATALS | RETROFLEXES | DENTALS | LABIALS

NASALS = frozenset('NYRnm')
SEMIVOWELS = frozenset('yrlv')
SIBILANTS = frozenset('Ss')  # S = palatal sibilant, Magadhi only
CONSONANTS = STOPS | NASALS | SEMIVOWELS | SIBILANTS | frozenset('h')

ANUSVARA = 'M'
CANDRABINDU = '~'
NASALIZATION_MARKS = frozenset(ANUSVARA + CANDRABINDU)

INVENTORY = VOWELS | CONSONANTS | NASALIZATION_MARKS

# Sanskrit sounds that do not survive into Prakrit (SLP1 spelling)
FORBIDDEN = {
    'f': 'vocalic r',
    'F': 'long vocalic r',
    'x': 'vocalic l',
    'X': 'long vocalic l',
    'E': 'diphthong ai',
    'O': 'diphthong au',
    'H': 'visarga',
    'z': 'retroflex s',
}

_LENGTHEN = {'a': 'A', 'i': 'I', 'u': 'U'}
_SHORTEN = {'A': 'a', 'I': 'i', 'U': 'u', 'e': 'i', 'o': 'u'}
_QUALITY = {'a': 'a', 'A': 'a', 'i': 'i', 'I': 'i', 'u': 'u', 'U': 'u', 'e': 'e', 'o': 'o'}

_HOMORGANIC_NASAL = {}
for _group, _nasal in ((VELARS, 'N'), (PALATALS, 'Y'), (RETROFLEXES, 'R'),
                       (DENTALS, 'n'), (LABIALS, 'm')):
    for _stop in _group:
        _HOMORGANIC_NASAL[_stop] = _nasal

# Aspirated stop -> its unaspirated partner (kh -> k, dh -> d, ...)
DEASPIRATE = {'K': 'k', 'G': 'g', 'C': 'c', 'J': 'j', 'W': 'w',
              'Q': 'q', 'T': 't', 'D': 'd', 'P': 'p', 'B': 'b'}


def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def is_consonant(ch: str) -> bool:
    return ch in CONSONANTS


def is_long(ch: str) -> bool:
    return ch in LONG_VOWELS


def is_short(ch: str) -> bool:
    return ch in SHORT_VOWELS


def is_nasal(ch: str) -> bool:
    return ch in NASALS or ch in NASALIZATION_MARKS


def shorten(vowel: str) -> str:
    """Short counterpart used before a conjunct (A->a, I/e->i, U/o->u)"""
    return _SHORTEN.get(vowel, vowel)


def lengthen(vowel: str) -> str:
    return _LENGTHEN.get(vowel, vowel)


def same_quality(first: str, second: str) -> bool:
    """True for two vowels differing at most in length (a/A, i/I, u/U)"""
    if not (is_vowel(first) and is_vowel(second)):
        return False
    return _QUALITY[first] == _QUALITY[second]


def final_sound(text: str) -> str:
    return text[-1] if text else ''


def ends_with_vowel(text: str) -> bool:
    return bool(text) and is_vowel(text[-1])


def ends_with_consonant(text: str) -> bool:
    return bool(text) and is_consonant(text[-1])


def starts_with_conjunct(text: str) -> bool:
    """True when text opens with two consonants (nti, ntu, ssaM ...)"""
    return len(text) >= 2 and is_consonant(text[0]) and is_consonant(text[1])


def homorganic_nasal(consonant: str):
    """Nasal of the same place of articulation as a stop, or None"""
    return _HOMORGANIC_NASAL.get(consonant)


def validate_root(root: str) -> str:
    """
    Check that a verb root is a non-empty string over the Prakrit inventory

    Args:
        root: Verb root in the canonical encoding

    Returns:
        The root with surrounding whitespace removed

    Raises:
        InvalidRootError: empty root, or a character Prakrit does not use
    """
    if root is None:
        raise InvalidRootError('', 'root is empty')

    cleaned = root.strip()
    if not cleaned:
        raise InvalidRootError(root, 'root is empty')

    for position, ch in enumerate(cleaned, 1):
        if ch in FORBIDDEN:
            raise InvalidRootError(
                cleaned, f"'{ch}' ({FORBIDDEN[ch]}) at position {position} is not found in Prakrit")
        if ch not in INVENTORY:
            raise InvalidRootError(
                cleaned, f"unsupported character '{ch}' at position {position}")
        if ch in NASALIZATION_MARKS and (position == 1 or not is_vowel(cleaned[position - 2])):
            raise InvalidRootError(
                cleaned, f"nasalisation mark '{ch}' at position {position} must follow a vowel")

    return cleaned
