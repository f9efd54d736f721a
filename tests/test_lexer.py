import pytest

from pyinireader.ini.consts import MAX_LINE_LENGTH, LineKind
from pyinireader.ini.lexer import IniLine, classify


@pytest.mark.parametrize('line', ['', '; note', '#note', ';k=v', '#[s]'])
def test_comments_and_blank_lines(line):
    assert classify(line).kind is LineKind.COMMENT


def test_too_long_line_is_skipped():
    assert classify('k=' + 'v' * (MAX_LINE_LENGTH - 1)).kind is LineKind.COMMENT
    assert classify('k=' + 'v' * (MAX_LINE_LENGTH - 2)).kind is LineKind.ITEM


def test_item_splits_at_first_equal_sign():
    assert classify('  url = a=b=c  ') == IniLine(LineKind.ITEM, 'url', 'a=b=c')
    assert classify('=') == IniLine(LineKind.ITEM, '', '')
    assert classify('key=') == IniLine(LineKind.ITEM, 'key', '')


def test_section_header():
    assert classify('[common]') == IniLine(LineKind.SECTION, 'common')
    assert classify('[ spaced ]') == IniLine(LineKind.SECTION, ' spaced ')
    assert classify('[]') == IniLine(LineKind.SECTION, '')
    assert classify('[a]b]') == IniLine(LineKind.SECTION, 'a]b')


def test_item_wins_over_header():
    assert classify('[a=b]') == IniLine(LineKind.ITEM, '[a', 'b]')


@pytest.mark.parametrize('line', ['hello', '[open', 'close]', '['])
def test_unstructured_content(line):
    assert classify(line) == IniLine(LineKind.CONTENT, value=line)


def test_line_feed_never_matches_item_or_header():
    assert classify('\na=b') == IniLine(LineKind.CONTENT, value='\na=b')
    assert classify('[s]\n').kind is LineKind.CONTENT
