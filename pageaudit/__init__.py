# coding=utf-8

from .http import HttpHeaders, NetworkRecord, make_headers
from .charset import detect
from .audit import Audit, AuditRunner
from .audits import CharsetDefinedAudit
from .run import run_audits

__all__ = ['HttpHeaders', 'NetworkRecord', 'make_headers',
           'detect',
           'Audit', 'AuditRunner',
           'CharsetDefinedAudit',
           'run_audits']

__version__ = '0.1.0'
