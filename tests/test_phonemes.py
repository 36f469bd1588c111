import pytest

from errors import InvalidRootError
from phonemes import (
    ends_with_consonant, ends_with_vowel, final_sound, homorganic_nasal, is_consonant, is_long, is_vowel,
    lengthen, same_quality, shorten, starts_with_conjunct, validate_root,
)


class TestClassification:
    def test_vowels_and_consonants(self):
        assert is_vowel('a') and is_vowel('o')
        assert not is_vowel('k')
        assert is_consonant('S') and is_consonant('h')
        assert not is_consonant('M')

    def test_length(self):
        assert is_long('e') and is_long('A')
        assert not is_long('i')
        assert shorten('e') == 'i'
        assert shorten('o') == 'u'
        assert lengthen('a') == 'A'

    def test_same_quality(self):
        assert same_quality('a', 'A')
        assert same_quality('i', 'I')
        assert not same_quality('a', 'i')
        assert not same_quality('a', 'k')

    def test_conjunct_and_nasals(self):
        assert starts_with_conjunct('nti')
        assert starts_with_conjunct('ssaM')
        assert not starts_with_conjunct('hi')
        assert homorganic_nasal('k') == 'N'
        assert homorganic_nasal('d') == 'n'
        assert homorganic_nasal('s') is None

    def test_ends_with_vowel(self):
        assert ends_with_vowel('ho')
        assert not ends_with_vowel('gam')
        assert not ends_with_vowel('')
        assert ends_with_consonant('gam')
        assert not ends_with_consonant('kaM')
        assert final_sound('gam') == 'm'
        assert final_sound('') == ''


class TestValidateRoot:
    def test_strips_whitespace(self):
        assert validate_root('  gam ') == 'gam'

    @pytest.mark.parametrize('root', ['', '   ', None])
    def test_empty_root(self, root):
        with pytest.raises(InvalidRootError) as excinfo:
            validate_root(root)
        assert 'empty' in excinfo.value.message

    def test_sanskrit_only_sound(self):
        with pytest.raises(InvalidRootError) as excinfo:
            validate_root('kft')
        assert 'vocalic r' in excinfo.value.reason
        assert 'position 2' in excinfo.value.reason

    def test_unsupported_character(self):
        with pytest.raises(InvalidRootError) as excinfo:
            validate_root('ga1')
        assert "'1'" in excinfo.value.reason

    def test_nasalisation_mark_needs_vowel(self):
        with pytest.raises(InvalidRootError):
            validate_root('Mga')
        assert validate_root('kaM') == 'kaM'
