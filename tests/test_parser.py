import math

import pytest

from pyinifile.ini import (
    IntegerTooLongError,
    MissingEqualsError,
    NoSectionError,
    ValueKind,
)
from pyinifile.ini.parser import (
    classify,
    is_double,
    is_int,
    parse_lines,
    remove_escapes,
    section_name,
    split_pair,
)


@pytest.mark.parametrize('value, kind, typed', [
    ('42', ValueKind.INT, 42),
    ('007', ValueKind.INT, 7),
    ('3.14', ValueKind.DOUBLE, 3.14),
    ('.5', ValueKind.DOUBLE, 0.5),
    ('true', ValueKind.BOOL, True),
    ('FALSE', ValueKind.BOOL, False),
    ('TrUe', ValueKind.BOOL, True),
    ('-1', ValueKind.STRING, '-1'),
    ('-1.5', ValueKind.STRING, '-1.5'),
    ('1.', ValueKind.STRING, '1.'),
    ('1.2.3', ValueKind.STRING, '1.2.3'),
    ('1e5', ValueKind.STRING, '1e5'),
    ('', ValueKind.STRING, ''),
    ('yes', ValueKind.STRING, 'yes'),
])
def test_classify(value, kind, typed) -> None:
    assert classify(value) == (kind, typed)


def test_non_ascii_digits_are_not_numbers() -> None:
    assert not is_int('١٢٣')
    assert not is_double('١.٢')


def test_big_numbers() -> None:
    assert classify('9' * 30) == (ValueKind.INT, int('9' * 30))
    kind, value = classify('9' * 400 + '.5')
    assert kind is ValueKind.DOUBLE
    assert math.isinf(value)


def test_remove_escapes() -> None:
    assert remove_escapes('a\tb\r\n') == 'ab'
    assert remove_escapes('it\'s "x"?\\') == 'its x'


def test_section_name() -> None:
    assert section_name('[PLAYER_DATA]') == 'PLAYER_DATA'
    assert section_name('  [ My Section ]  ') == 'MySection'
    # no '[' at all, just a trailing ']'
    assert section_name('abc]') == 'ab'


def test_split_pair() -> None:
    assert split_pair('my key = some value  ') == ('mykey', 'some value  ')
    assert split_pair('k=a=b') == ('k', 'a=b')


def test_parse_lines_tables() -> None:
    tables = parse_lines([
        '[S]', 'name = Hero', 'score = 100', 'x = 12.5', 'flag = True',
    ])
    assert tables[ValueKind.STRING] == {'S': {'name': 'Hero'}}
    assert tables[ValueKind.INT] == {'S': {'score': 100}}
    assert tables[ValueKind.DOUBLE] == {'S': {'x': 12.5}}
    assert tables[ValueKind.BOOL] == {'S': {'flag': True}}


def test_bracket_anywhere_switches_section() -> None:
    tables = parse_lines(['[A]', 'motd = [hi]', 'k = v'])
    assert tables.sections() == ['hi]']
    assert tables.find(ValueKind.STRING, 'hi]', 'k').value == 'v'


def test_last_write_wins_across_types() -> None:
    tables = parse_lines(['[A]', 'k = 1', 'k = one'])
    assert tables.find(ValueKind.STRING, 'A', 'k').value == 'one'
    assert not tables.find(ValueKind.INT, 'A', 'k').found
    assert tables[ValueKind.INT] == {}


def test_escape_only_line_is_skipped() -> None:
    tables = parse_lines(['[A]', '\t', 'k = 1'])
    assert tables.find(ValueKind.INT, 'A', 'k').value == 1


def test_no_section() -> None:
    with pytest.raises(NoSectionError) as info:
        parse_lines(['key = value', '[A]'])
    assert info.value.lineno == 1
    assert 'No section name' in str(info.value)


def test_empty_header_is_no_section() -> None:
    with pytest.raises(NoSectionError):
        parse_lines(['[]', 'k = v'])


def test_missing_equals() -> None:
    with pytest.raises(MissingEqualsError) as info:
        parse_lines(['[A]', 'name = Hero', 'score 100'])
    assert info.value.lineno == 3
    assert info.value.line == 'score 100'


def test_int_beyond_digit_limit_aborts_parse() -> None:
    digits = '1' * 5000
    with pytest.raises(ValueError):
        classify(digits)
    with pytest.raises(IntegerTooLongError) as info:
        parse_lines(['[A]', 'ok = 1', f'big = {digits}'])
    assert info.value.lineno == 3
