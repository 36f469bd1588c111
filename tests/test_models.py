import pytest

from models import (
    SLOT_ORDER, Category, ConjugationTable, Dialect, Encoding, PersonNumber, Tense, Voice,
)


class TestCategory:
    def test_parse_is_case_insensitive(self):
        category = Category.parse('Present', 'MAHARASHTRI', 'passive')
        assert category == Category(Tense.PRESENT, Dialect.MAHARASHTRI, Voice.PASSIVE)

    def test_alternate_spelling(self):
        assert Dialect.parse('maharastri') is Dialect.MAHARASHTRI
        assert Encoding.parse('harvard-kyoto') is Encoding.HK

    def test_defaults_to_present(self):
        assert Category.parse() == Category(Tense.PRESENT, Dialect.MAHARASHTRI, Voice.ACTIVE)

    def test_unknown_name(self):
        with pytest.raises(ValueError) as excinfo:
            Category.parse('aorist')
        assert 'aorist' in str(excinfo.value)

    def test_mood(self):
        assert Category(Tense.IMPERATIVE).mood == 'imperative'
        assert Category(Tense.PAST).mood == 'indicative'
        assert str(Category(Tense.FUTURE, Dialect.MAGADHI)) == 'future/magadhi/active'


class TestConjugationTable:
    def make_table(self):
        return ConjugationTable('gam', Category(Tense.PRESENT), {
            PersonNumber.FIRST_PLURAL: ['gamamo'],
            PersonNumber.THIRD_SINGULAR: ['gamai', 'gamae'],
        })

    def test_slots_follow_presentation_order(self):
        table = self.make_table()
        assert list(table.forms) == list(SLOT_ORDER)
        assert [slot for slot, _ in table.items()][0] is PersonNumber.THIRD_SINGULAR
        assert table.get('second_plural') == ()

    def test_read_only(self):
        table = self.make_table()
        with pytest.raises(TypeError):
            table.forms[PersonNumber.THIRD_SINGULAR] = ('x',)
        assert isinstance(table.get(PersonNumber.THIRD_SINGULAR), tuple)

    def test_as_dict(self):
        data = self.make_table().as_dict()
        assert data['verb_root'] == 'gam'
        assert data['tense'] == 'present'
        assert data['mood'] == 'indicative'
        assert data['forms']['third_singular'] == ['gamai', 'gamae']
        assert list(data['forms'])[0] == 'third_singular'

    def test_all_forms(self):
        assert self.make_table().all_forms() == ['gamai', 'gamae', 'gamamo']

    def test_person_number(self):
        assert PersonNumber.SECOND_PLURAL.person == 'second'
        assert PersonNumber.SECOND_PLURAL.number == 'plural'
