# coding=utf-8

import logging

from tornado.ioloop import IOLoop

from .config import Config, DEFAULT_CONFIG
from .audit import AuditRunner
from .utils import configure_logger

log = logging.getLogger(__name__)


def run_audits(artifacts, **kwargs):
    """
    Run the configured audits over gathered artifacts and return their results by audit id.
    """
    config = Config(DEFAULT_CONFIG)
    config.update(kwargs)
    configure_logger('pageaudit', config)
    runner = AuditRunner.from_config(config)
    log.debug('Running %s', runner)
    io_loop = IOLoop()
    try:
        return io_loop.run_sync(lambda: runner.run(artifacts))
    finally:
        io_loop.close()
