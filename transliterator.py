"""
Transliteration between Harvard-Kyoto, SLP1 and Devanagari

The engine works in SLP1. HK and SLP1 are converted with the tables below;
Devanagari input is read with the consonant/matra table and Devanagari
output is rendered with aksharamukha.
"""

from aksharamukha import transliterate as aksh_transliterate

from errors import EncodingError
from models import Encoding
from phonemes import FORBIDDEN, INVENTORY

# HK token -> SLP1 character
HK_TO_SLP1 = {
    # Vowels
    'a': 'a', 'A': 'A', 'i': 'i', 'I': 'I', 'u': 'u', 'U': 'U',
    'e': 'e', 'o': 'o',
    # Sanskrit-only vowels; read so that validation can name them
    'R': 'f', 'RR': 'F', 'lR': 'x', 'lRR': 'X',
    # Velars
    'k': 'k', 'kh': 'K', 'g': 'g', 'gh': 'G', 'G': 'N',
    # Palatals
    'c': 'c', 'ch': 'C', 'j': 'j', 'jh': 'J', 'J': 'Y',
    # Retroflexes
    'T': 'w', 'Th': 'W', 'D': 'q', 'Dh': 'Q', 'N': 'R',
    # Dentals
    't': 't', 'th': 'T', 'd': 'd', 'dh': 'D', 'n': 'n',
    # Labials
    'p': 'p', 'ph': 'P', 'b': 'b', 'bh': 'B', 'm': 'm',
    # Semivowels
    'y': 'y', 'r': 'r', 'l': 'l', 'v': 'v',
    # Sibilants and aspirate
    'z': 'S', 'S': 'z', 's': 's', 'h': 'h',
    # Anusvara, candrabindu, visarga
    'M': 'M', '~': '~', 'H': 'H',
}

SLP1_TO_HK = {slp1: hk for hk, slp1 in HK_TO_SLP1.items()}

SLP1_LETTERS = frozenset(INVENTORY) | frozenset(FORBIDDEN)

_HK_TOKEN_LENGTHS = sorted({len(token) for token in HK_TO_SLP1}, reverse=True)

# Devanagari vowels to SLP1
DEVANAGARI_VOWELS = {
    'अ': 'a', 'आ': 'A', 'इ': 'i', 'ई': 'I', 'उ': 'u', 'ऊ': 'U',
    'ऋ': 'f', 'ॠ': 'F', 'ऌ': 'x', 'ॡ': 'X',
    'ए': 'e', 'ऐ': 'E', 'ओ': 'o', 'औ': 'O'
}

# Devanagari vowel signs (matra) to SLP1
DEVANAGARI_VOWEL_SIGNS = {
    'ा': 'A', 'ि': 'i', 'ी': 'I', 'ु': 'u', 'ू': 'U',
    'ृ': 'f', 'ॄ': 'F', 'ॢ': 'x', 'ॣ': 'X',
    'े': 'e', 'ै': 'E', 'ो': 'o', 'ौ': 'O'
}

# Devanagari consonants to SLP1
DEVANAGARI_CONSONANTS = {
    # Velars
    'क': 'k', 'ख': 'K', 'ग': 'g', 'घ': 'G', 'ङ': 'N',
    # Palatals
    'च': 'c', 'छ': 'C', 'ज': 'j', 'झ': 'J', 'ञ': 'Y',
    # Retroflexes
    'ट': 'w', 'ठ': 'W', 'ड': 'q', 'ढ': 'Q', 'ण': 'R',
    # Dentals
    'त': 't', 'थ': 'T', 'द': 'd', 'ध': 'D', 'न': 'n',
    # Labials
    'प': 'p', 'फ': 'P', 'ब': 'b', 'भ': 'B', 'म': 'm',
    # Semivowels
    'य': 'y', 'र': 'r', 'ल': 'l', 'व': 'v',
    # Sibilants
    'श': 'S', 'ष': 'z', 'स': 's',
    # Aspirate
    'ह': 'h'
}

DEVANAGARI_MARKS = {
    'ं': 'M',   # Anusvara
    'ँ': '~',   # Candrabindu
    'ः': 'H',   # Visarga
}

VIRAMA = '्'


def _encoding_error(text, encoding, ch, position):
    return EncodingError(text, encoding.value, f"unmappable character '{ch}' at position {position}")


def hk_to_slp1(text: str) -> str:
    """Convert Harvard-Kyoto to SLP1, longest token first (kh before k)"""
    result = []
    i = 0
    while i < len(text):
        if text[i].isspace():
            result.append(text[i])
            i += 1
            continue
        for length in _HK_TOKEN_LENGTHS:
            token = text[i:i + length]
            if len(token) == length and token in HK_TO_SLP1:
                result.append(HK_TO_SLP1[token])
                i += length
                break
        else:
            raise _encoding_error(text, Encoding.HK, text[i], i + 1)
    return ''.join(result)


def slp1_to_hk(text: str) -> str:
    result = []
    for position, ch in enumerate(text, 1):
        if ch.isspace():
            result.append(ch)
        elif ch in SLP1_TO_HK:
            result.append(SLP1_TO_HK[ch])
        else:
            raise _encoding_error(text, Encoding.HK, ch, position)
    return ''.join(result)


def check_slp1(text: str) -> str:
    for position, ch in enumerate(text, 1):
        if not ch.isspace() and ch not in SLP1_LETTERS:
            raise _encoding_error(text, Encoding.SLP1, ch, position)
    return text


def devanagari_to_slp1(text: str) -> str:
    """
    Convert Devanagari text to SLP1

    A consonant carries the inherent a unless a virama or a matra follows.
    """
    result = []
    i = 0

    while i < len(text):
        char = text[i]

        if char.isspace():
            result.append(char)
            i += 1
            continue

        if char in DEVANAGARI_VOWELS:
            result.append(DEVANAGARI_VOWELS[char])
            i += 1
            continue

        if char in DEVANAGARI_CONSONANTS:
            result.append(DEVANAGARI_CONSONANTS[char])
            next_char = text[i + 1] if i + 1 < len(text) else ''

            if next_char == VIRAMA:
                i += 2
            elif next_char in DEVANAGARI_VOWEL_SIGNS:
                result.append(DEVANAGARI_VOWEL_SIGNS[next_char])
                i += 2
            else:
                # Inherent 'a'
                result.append('a')
                i += 1
            continue

        if char in DEVANAGARI_MARKS:
            result.append(DEVANAGARI_MARKS[char])
            i += 1
            continue

        raise _encoding_error(text, Encoding.DEVANAGARI, char, i + 1)

    return ''.join(result)


def slp1_to_devanagari(text: str) -> str:
    check_slp1(text)
    return aksh_transliterate.process('SLP1', 'Devanagari', text)


_TO_CANONICAL = {
    Encoding.SLP1: check_slp1,
    Encoding.HK: hk_to_slp1,
    Encoding.DEVANAGARI: devanagari_to_slp1,
}

_FROM_CANONICAL = {
    Encoding.SLP1: check_slp1,
    Encoding.HK: slp1_to_hk,
    Encoding.DEVANAGARI: slp1_to_devanagari,
}


def to_canonical(text: str, encoding) -> str:
    """
    Convert user input in a named encoding to the canonical encoding

    Args:
        text: Input text
        encoding: Encoding member or name ('hk', 'slp1', 'devanagari')

    Raises:
        EncodingError: a character has no mapping in the encoding
    """
    encoding = Encoding.parse(encoding)
    return _TO_CANONICAL[encoding](text)


def from_canonical(text: str, encoding) -> str:
    """Render canonical text in a display encoding"""
    encoding = Encoding.parse(encoding)
    return _FROM_CANONICAL[encoding](text)

