# coding=utf-8

import logging

import pytest

from pageaudit.config import Config, DEFAULT_CONFIG
from pageaudit.utils import load_object, configure_logger, to_text, equal_without_fragment
from pageaudit.audits import CharsetDefinedAudit


def test_load_object():
    assert load_object('pageaudit.audits.CharsetDefinedAudit') is CharsetDefinedAudit
    assert load_object(CharsetDefinedAudit) is CharsetDefinedAudit


def test_configure_logger(tmpdir):
    logger = configure_logger('pageaudit.test', Config(DEFAULT_CONFIG, log_level='debug'))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1 and isinstance(logger.handlers[0], logging.StreamHandler)

    log_file = str(tmpdir.join('audit.log'))
    logger = configure_logger('pageaudit.test', Config(DEFAULT_CONFIG, log_file=log_file))
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1 and isinstance(logger.handlers[0], logging.FileHandler)
    logger.handlers[0].close()


def test_to_text():
    assert to_text('text') == 'text'
    assert to_text(b'text') == 'text'
    assert to_text(None) == ''
    assert to_text('中文'.encode('gbk'), 'gbk') == '中文'
    with pytest.raises(TypeError):
        to_text(1)


def test_equal_without_fragment():
    assert equal_without_fragment('https://example.com/#top', 'https://example.com/') is True
    assert equal_without_fragment('https://example.com/a', 'https://example.com/b') is False
    assert equal_without_fragment(None, 'https://example.com/') is False
