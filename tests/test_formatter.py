'''
Number formatter tests
'''

import math

from rpnexpr.formatter import NumberFormatter

from pytest import mark, raises


@mark.parametrize('text, expected', [
    ('3', 3),
    ('-3', -3),
    ('+3', 3),
    ('3.', 3),
    ('.5', 0.5),
    ('-.5', -0.5),
    ('1,234', 1234),
    ('1,234,567.25', 1234567.25),
    ('1234567.25', 1234567.25),
    ('  42 ', 42),
])
def test_number_from_string(text, expected):
    assert NumberFormatter().number_from_string(text) == expected


@mark.parametrize('text', [
    '',
    '.',
    '-',
    '1.2.3',
    '12,34',
    '1,2345',
    ',123',
    '1e5',
    'abc',
    '٣',
])
def test_number_from_string_malformed(text):
    assert NumberFormatter().number_from_string(text) is None


def test_number_from_string_without_grouping():
    formatter = NumberFormatter(use_grouping=False)
    assert formatter.number_from_string('1234') == 1234
    assert formatter.number_from_string('1,234') is None


@mark.parametrize('number, expected', [
    (3.0, '3'),
    (-3.0, '-3'),
    (0.5, '0.5'),
    (-0.0, '0'),
    (0.1 + 0.2, '0.3'),
    (1 / 3, '0.333333333333333'),
    (1234567.25, '1,234,567.25'),
    (-1234.5, '-1,234.5'),
    (123, '123'),
    (1e22, '10,000,000,000,000,000,000,000'),
    (1e-20, '0'),
])
def test_string_from_number(number, expected):
    assert NumberFormatter().string_from_number(number) == expected


@mark.parametrize('number', [math.inf, -math.inf, math.nan, None, 'abc'])
def test_string_from_number_unrenderable(number):
    assert NumberFormatter().string_from_number(number) is None


def test_maximum_fraction_digits():
    formatter = NumberFormatter(maximum_fraction_digits=2)
    assert formatter.string_from_number(math.pi) == '3.14'
    assert formatter.string_from_number(2.675) == '2.67'
    assert formatter.string_from_number(0.001) == '0'


def test_separators():
    formatter = NumberFormatter(decimal_separator=',',
                                grouping_separator=' ')
    assert formatter.string_from_number(1234567.5) == '1 234 567,5'
    assert formatter.number_from_string('1 234 567,5') == 1234567.5


def test_bad_configuration():
    with raises(ValueError):
        NumberFormatter(decimal_separator=',', grouping_separator=',')
    with raises(ValueError):
        NumberFormatter(maximum_fraction_digits=-1)
