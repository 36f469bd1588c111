"""
Grammatical categories and the conjugation table returned by the engine
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

# Sanskrit grammatical terminology (HK), used for labelling output
SANSKRIT_TERMS = {
    # Tense/mood
    'present': 'vartamAna-kAla',
    'past': 'bhUta-kAla',
    'future': 'bhaviSya-kAla',
    'imperative': 'AjJA-artha',
    'indicative': 'nirdeza',

    # Voice
    'active': 'kartari-prayoga',
    'passive': 'karmaNi-prayoga',

    # Number
    'singular': 'eka-vacana',
    'plural': 'bahu-vacana',

    # Person
    'first': 'uttama-puruSa',
    'second': 'madhyama-puruSa',
    'third': 'prathama-puruSa',

    # Dialect
    'maharashtri': 'mahArASTrI',
    'shauraseni': 'zaurasenI',
    'magadhi': 'mAgadhI',
}


class _NamedEnum(str, Enum):
    """String enum parsed case-insensitively from its value"""

    @classmethod
    def parse(cls, name):
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = cls._aliases().get(key, key)
        for member in cls:
            if member.value == key:
                return member
        choices = ', '.join(member.value for member in cls)
        raise ValueError(f"Unknown {cls.__name__.lower()} '{name}' (expected one of: {choices})")

    @classmethod
    def _aliases(cls) -> Dict[str, str]:
        return {}

    def __str__(self):
        return self.value


class Tense(_NamedEnum):
    PRESENT = 'present'
    PAST = 'past'
    FUTURE = 'future'
    IMPERATIVE = 'imperative'

    @property
    def mood(self) -> str:
        return 'imperative' if self is Tense.IMPERATIVE else 'indicative'


class Dialect(_NamedEnum):
    MAHARASHTRI = 'maharashtri'
    SHAURASENI = 'shauraseni'
    MAGADHI = 'magadhi'

    @classmethod
    def _aliases(cls):
        return {'maharastri': 'maharashtri'}


class Voice(_NamedEnum):
    ACTIVE = 'active'
    PASSIVE = 'passive'


class Encoding(_NamedEnum):
    SLP1 = 'slp1'
    HK = 'hk'
    DEVANAGARI = 'devanagari'

    @classmethod
    def _aliases(cls):
        return {'harvard-kyoto': 'hk', 'deva': 'devanagari'}


class PersonNumber(str, Enum):
    """Person/number slot; declaration order is the presentation order"""

    THIRD_SINGULAR = 'third_singular'
    THIRD_PLURAL = 'third_plural'
    SECOND_SINGULAR = 'second_singular'
    SECOND_PLURAL = 'second_plural'
    FIRST_SINGULAR = 'first_singular'
    FIRST_PLURAL = 'first_plural'

    @property
    def person(self) -> str:
        return self.value.split('_')[0]

    @property
    def number(self) -> str:
        return self.value.split('_')[1]

    def __str__(self):
        return self.value


SLOT_ORDER: Tuple[PersonNumber, ...] = tuple(PersonNumber)


@dataclass(frozen=True)
class Category:
    """One of the 24 (tense, dialect, voice) combinations"""

    tense: Tense
    dialect: Dialect = Dialect.MAHARASHTRI
    voice: Voice = Voice.ACTIVE

    @classmethod
    def parse(cls, tense=Tense.PRESENT, dialect=Dialect.MAHARASHTRI, voice=Voice.ACTIVE) -> 'Category':
        return cls(Tense.parse(tense), Dialect.parse(dialect), Voice.parse(voice))

    @property
    def mood(self) -> str:
        return self.tense.mood

    def as_dict(self) -> Dict[str, str]:
        return {
            'tense': self.tense.value,
            'mood': self.mood,
            'voice': self.voice.value,
            'dialect': self.dialect.value,
        }

    def __str__(self):
        return f"{self.tense.value}/{self.dialect.value}/{self.voice.value}"


@dataclass(frozen=True)
class ConjugationTable:
    """
    All admissible forms of one root in one category.

    `forms` maps every PersonNumber slot to an ordered tuple of distinct
    surface forms. The mapping is read-only and always iterates in
    presentation order (third, second, first; singular before plural).
    """

    root: str
    category: Category
    forms: Mapping[PersonNumber, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        ordered = {slot: tuple(self.forms.get(slot, ())) for slot in SLOT_ORDER}
        object.__setattr__(self, 'forms', MappingProxyType(ordered))

    def get(self, slot) -> Tuple[str, ...]:
        if not isinstance(slot, PersonNumber):
            slot = PersonNumber(slot)
        return self.forms[slot]

    def items(self) -> Iterator[Tuple[PersonNumber, Tuple[str, ...]]]:
        for slot in SLOT_ORDER:
            yield slot, self.forms[slot]

    def all_forms(self) -> List[str]:
        """Every distinct form in the table, in presentation order"""
        seen = set()
        result = []
        for _, forms in self.items():
            for form in forms:
                if form not in seen:
                    seen.add(form)
                    result.append(form)
        return result

    def transliterated(self, encoding) -> 'ConjugationTable':
        """Copy of this table with root and forms rendered in a display encoding"""
        from transliterator import from_canonical

        encoding = Encoding.parse(encoding)
        if encoding is Encoding.SLP1:
            return self
        return ConjugationTable(
            root=from_canonical(self.root, encoding),
            category=self.category,
            forms={slot: tuple(from_canonical(form, encoding) for form in forms)
                   for slot, forms in self.items()},
        )

    def as_dict(self) -> Dict:
        result = {'verb_root': self.root}
        result.update(self.category.as_dict())
        result['forms'] = {slot.value: list(forms) for slot, forms in self.items()}
        return result
