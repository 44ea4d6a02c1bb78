# coding=utf-8

"""
Checks whether a page declares its character encoding.

The charset counts as declared when the ``Content-Type`` response header
carries a ``charset`` parameter, when the document starts with a
byte-order mark, or when a ``<meta>`` tag within the first 1024
characters of the markup declares it.
"""

import logging

from .http import make_headers
from .utils import to_text

log = logging.getLogger(__name__)

__all__ = ['SCAN_LIMIT', 'BOM', 'detect', 'has_charset_in_header', 'has_bom',
           'has_meta_charset', 'has_charset_param', 'iter_meta_tags']

# counted in characters of the decoded document, not in encoded bytes
SCAN_LIMIT = 1024

BOM = '\ufeff'

_SPACES = ' \t\n\r\f'
_NAME_END = _SPACES + '/>='


def _skip(s, pos, chars=_SPACES):
    while pos < len(s) and s[pos] in chars:
        pos += 1
    return pos


def _as_text(content):
    try:
        return to_text(content)
    except TypeError:
        return ''


def has_charset_param(value):
    """
    Tell whether a Content-Type value carries a non-empty ``charset`` parameter.

    Spaces are allowed around ``=``. The value after them only has to hold one
    non-space character, so ``charset=`` or ``charset=  `` alone does not count.
    """
    if not value or not isinstance(value, str):
        return False
    lower = value.lower()
    start = 0
    while True:
        i = lower.find('charset', start)
        if i < 0:
            return False
        start = i + len('charset')
        pos = _skip(value, start)
        if pos >= len(value) or value[pos] != '=':
            continue
        if _skip(value, pos + 1) < len(value):
            return True


def has_charset_in_header(headers):
    values = make_headers(headers).get_list('Content-Type')
    if not values:
        return False
    return has_charset_param(values[0])


def has_bom(content):
    return _as_text(content)[:1] == BOM


def _parse_attributes(s, pos):
    attrs = {}
    n = len(s)
    while True:
        pos = _skip(s, pos, _SPACES + '/')
        if pos >= n:
            return None, None
        if s[pos] == '>':
            return attrs, pos + 1
        start = pos
        while pos < n and s[pos] not in _NAME_END:
            pos += 1
        name = s[start:pos].lower()
        value = ''
        pos = _skip(s, pos)
        if pos < n and s[pos] == '=':
            pos = _skip(s, pos + 1)
            if pos >= n:
                return None, None
            if s[pos] in '"\'':
                end = s.find(s[pos], pos + 1)
                if end < 0:
                    return None, None
                value = s[pos + 1:end]
                pos = end + 1
            else:
                start = pos
                while pos < n and s[pos] not in _SPACES + '>':
                    pos += 1
                value = s[start:pos]
                if pos < n and s[pos] == '>':
                    value = value.rstrip('/')
        attrs.setdefault(name, value)


def iter_meta_tags(markup):
    """
    Yield the attributes of every complete ``<meta>`` tag in *markup*.

    Attribute names are lowercased and the first occurrence of a name wins.
    Scanning stops at a tag that has no closing ``>``.
    """
    lower = markup.lower()
    pos = 0
    while True:
        i = lower.find('<meta', pos)
        if i < 0:
            return
        pos = i + len('<meta')
        if pos < len(markup) and markup[pos] not in _SPACES + '/>':
            continue
        attrs, pos = _parse_attributes(markup, pos)
        if attrs is None:
            return
        yield attrs


def _declares_charset(attrs):
    charset = attrs.get('charset')
    if charset is not None and charset.strip():
        return True
    http_equiv = attrs.get('http-equiv')
    if http_equiv is not None and http_equiv.strip().lower() == 'content-type':
        return has_charset_param(attrs.get('content'))
    return False


def has_meta_charset(content):
    head = _as_text(content)[:SCAN_LIMIT]
    return any(_declares_charset(attrs) for attrs in iter_meta_tags(head))


def detect(headers, content):
    """
    Tell whether the charset of a document is properly declared.

    :param headers: response headers of the main document, as ``(name, value)``
        pairs, ``{'name': ..., 'value': ...}`` dicts or ``HttpHeaders``
    :param content: decoded document markup
    """
    content = _as_text(content)
    if has_bom(content):
        log.debug('Charset is declared by byte-order mark')
        return True
    if has_charset_in_header(headers):
        log.debug('Charset is declared in Content-Type header')
        return True
    if has_meta_charset(content):
        log.debug('Charset is declared by <meta> tag')
        return True
    return False
