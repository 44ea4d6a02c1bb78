# coding=utf-8

import logging
from importlib import import_module
from urllib.parse import urldefrag


def load_object(path):
    if isinstance(path, str):
        dot = path.rindex(".")
        module, name = path[:dot], path[dot + 1:]
        mod = import_module(module)
        return getattr(mod, name)
    return path


def configure_logger(name, config):
    log_level = config.get('log_level').upper()
    log_format = config.get('log_format')
    log_dateformat = config.get('log_dateformat')
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    log_file = config.get('log_file')
    if log_file:
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler()
    handler.setLevel(log_level)
    formatter = logging.Formatter(log_format, log_dateformat)
    handler.setFormatter(formatter)
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def to_text(data, encoding=None):
    if data is None:
        return ''
    if isinstance(data, str):
        return data
    if isinstance(data, bytes):
        return data.decode(encoding or 'utf-8', errors='replace')
    raise TypeError("Need bytes or str, got {}".format(type(data).__name__))


def equal_without_fragment(url1, url2):
    if not url1 or not url2:
        return False
    return urldefrag(url1)[0] == urldefrag(url2)[0]
