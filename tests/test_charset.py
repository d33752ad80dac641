import string
import itertools
import pytest

from passgen.charset import (CharacterClass, Options, ConfigError,
    ConfigurationError, selected_classes, describe_classes, build_charset,
    inclusion_rules)

SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>?"

all_flag_combinations = list(itertools.product([False, True], repeat=3))


def test_character_class_constants():
    assert CharacterClass.UPPERCASE.value == string.ascii_uppercase
    assert CharacterClass.LOWERCASE.value == string.ascii_lowercase
    assert CharacterClass.DIGIT.value == "0123456789"
    assert CharacterClass.SYMBOL.value == SYMBOLS
    assert len(SYMBOLS) == 25

    for cls in CharacterClass:
        assert len(cls.value) > 0
        assert len(set(cls.value)) == len(cls.value)


def test_default_charset():
    charset = build_charset(Options())
    assert charset == string.ascii_uppercase + string.ascii_lowercase + string.digits + SYMBOLS
    assert len(charset) == 87
    assert len(set(charset)) == len(charset)


@pytest.mark.parametrize("no_numbers,no_symbols,only_letters", all_flag_combinations)
def test_build_charset_deterministic(no_numbers, no_symbols, only_letters):
    o1 = Options(16, no_numbers, no_symbols, only_letters)
    o2 = Options(16, no_numbers, no_symbols, only_letters)
    assert build_charset(o1) == build_charset(o2)


@pytest.mark.parametrize("no_numbers,no_symbols", list(itertools.product([False, True], repeat=2)))
def test_only_letters_overrides_flags(no_numbers, no_symbols):
    options = Options(length=12, no_numbers=no_numbers, no_symbols=no_symbols, only_letters=True)
    assert build_charset(options) == string.ascii_uppercase + string.ascii_lowercase
    assert selected_classes(options) == [CharacterClass.UPPERCASE, CharacterClass.LOWERCASE]


def test_no_numbers():
    charset = build_charset(Options(no_numbers=True))
    assert not any(c in string.digits for c in charset)
    assert all(c in charset for c in SYMBOLS)


def test_no_numbers_no_symbols():
    charset = build_charset(Options(no_numbers=True, no_symbols=True))
    assert charset == string.ascii_uppercase + string.ascii_lowercase


def test_no_symbols():
    charset = build_charset(Options(no_symbols=True))
    assert charset == string.ascii_uppercase + string.ascii_lowercase + string.digits


@pytest.mark.parametrize("no_numbers,no_symbols,only_letters", all_flag_combinations)
def test_letters_always_included(no_numbers, no_symbols, only_letters):
    charset = build_charset(Options(16, no_numbers, no_symbols, only_letters))
    assert charset.startswith(string.ascii_uppercase + string.ascii_lowercase)


@pytest.mark.parametrize("no_numbers,no_symbols,only_letters", all_flag_combinations)
def test_selected_classes_in_canonical_order(no_numbers, no_symbols, only_letters):
    classes = selected_classes(Options(16, no_numbers, no_symbols, only_letters))
    canonical = list(CharacterClass)
    assert classes == sorted(classes, key=canonical.index)


def test_rules_independent_of_evaluation_order():
    options = Options(no_symbols=True)
    forward = {cls for cls in CharacterClass if inclusion_rules[cls](options)}
    backward = {cls for cls in reversed(list(CharacterClass)) if inclusion_rules[cls](options)}
    assert forward == backward == {CharacterClass.UPPERCASE,
        CharacterClass.LOWERCASE, CharacterClass.DIGIT}


def test_empty_charset_raises(monkeypatch):
    monkeypatch.setitem(inclusion_rules, CharacterClass.UPPERCASE, lambda o: False)
    monkeypatch.setitem(inclusion_rules, CharacterClass.LOWERCASE, lambda o: False)
    with pytest.raises(ConfigurationError, match="Character set is empty") as excinfo:
        build_charset(Options(only_letters=True))
    assert excinfo.value.error == ConfigError.EMPTY_CHARSET


def test_describe_classes():
    assert describe_classes(selected_classes(Options())) == ["A-Z", "a-z", "0-9", "symbols"]
    assert describe_classes(selected_classes(Options(no_symbols=True))) == ["A-Z", "a-z", "0-9"]


def test_options_immutable():
    options = Options()
    with pytest.raises(AttributeError):
        options.length = 4
