"""
Prakrit Verb Conjugator
Combines stem formation, affix tables and sandhi into full conjugation tables
"""

from itertools import product
from typing import List, Union

from affix_tables import get_affixes
from models import SLOT_ORDER, Category, ConjugationTable, Dialect, Tense, Voice
from phonemes import validate_root
from sandhi import combine_all
from stems import form_stems


def conjugate(root: str, category: Category) -> ConjugationTable:
    """
    Generate every admissible form of a root in one category

    Args:
        root: Verb root in the canonical encoding (SLP1)
        category: Tense, dialect and voice to conjugate for

    Returns:
        ConjugationTable with an ordered, duplicate-free form set per slot

    Raises:
        InvalidRootError: empty root or a character outside the inventory
        MissingRuleError: no stem rule or affix entry for the category
    """
    root = validate_root(root)
    stems = form_stems(root, category.tense, category.dialect, category.voice)

    forms = {}
    for slot in SLOT_ORDER:
        affixes = get_affixes(category.tense, category.dialect, category.voice, slot)
        forms[slot] = tuple(combine_all(stems, affixes))

    return ConjugationTable(root=root, category=category, forms=forms)


def conjugate_verb(root: str,
                   tense: Union[Tense, str],
                   dialect: Union[Dialect, str] = Dialect.MAHARASHTRI,
                   voice: Union[Voice, str] = Voice.ACTIVE) -> ConjugationTable:
    """Conjugate with the category given as enum members or names"""
    return conjugate(root, Category.parse(tense, dialect, voice))


def all_categories() -> List[Category]:
    """The 24 categories, tense x dialect x voice"""
    return [Category(tense, dialect, voice)
            for tense, dialect, voice in product(Tense, Dialect, Voice)]
