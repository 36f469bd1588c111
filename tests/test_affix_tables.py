import pytest

from affix_tables import AFFIX_TABLE, check_tables, get_affixes
from errors import MissingRuleError
from models import Dialect, PersonNumber, Tense, Voice


def test_every_category_and_slot_has_endings():
    assert len(AFFIX_TABLE) == 4 * 3 * 2 * 6
    check_tables()


def test_lookup_keeps_listed_order():
    assert get_affixes(Tense.PRESENT, Dialect.MAHARASHTRI, Voice.ACTIVE,
                       PersonNumber.THIRD_SINGULAR) == ('i', 'e')
    assert get_affixes(Tense.PRESENT, Dialect.SHAURASENI, Voice.PASSIVE,
                       PersonNumber.THIRD_SINGULAR) == ('di', 'de')


def test_imperative_first_person():
    assert get_affixes(Tense.IMPERATIVE, Dialect.MAHARASHTRI, Voice.ACTIVE,
                       PersonNumber.FIRST_SINGULAR) == ('mu',)
    assert get_affixes(Tense.IMPERATIVE, Dialect.MAHARASHTRI, Voice.ACTIVE,
                       PersonNumber.FIRST_PLURAL) == ('mo',)


def test_dialect_endings():
    shauraseni = get_affixes(Tense.FUTURE, Dialect.SHAURASENI, Voice.ACTIVE, PersonNumber.THIRD_SINGULAR)
    assert 'ssidi' in shauraseni
    magadhi = get_affixes(Tense.PRESENT, Dialect.MAGADHI, Voice.ACTIVE, PersonNumber.SECOND_SINGULAR)
    assert magadhi == ('Si', 'Se')
    for key, endings in AFFIX_TABLE.items():
        if key[1] is Dialect.MAGADHI:
            assert not any('s' in ending for ending in endings)


def test_past_has_zero_ending():
    for slot in PersonNumber:
        assert get_affixes(Tense.PAST, Dialect.MAGADHI, Voice.PASSIVE, slot) == ('',)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        AFFIX_TABLE[(Tense.PAST, Dialect.MAGADHI, Voice.ACTIVE, PersonNumber.FIRST_PLURAL)] = ('x',)


def test_incomplete_table_is_rejected():
    table = dict(AFFIX_TABLE)
    table[(Tense.FUTURE, Dialect.MAGADHI, Voice.PASSIVE, PersonNumber.SECOND_PLURAL)] = ()
    with pytest.raises(MissingRuleError):
        check_tables(table)
    with pytest.raises(MissingRuleError):
        check_tables({})
