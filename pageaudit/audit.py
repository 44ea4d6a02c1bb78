# coding=utf-8

import logging

from .utils import load_object
from .errors import NotEnabled, MissingArtifact

log = logging.getLogger(__name__)

__all__ = ['Audit', 'AuditRunner']


class Audit:
    DEFAULT_PASS = 'defaultPass'

    meta = {
        'id': None,
        'title': None,
        'failure_title': None,
        'description': None,
        'required_artifacts': []
    }

    @classmethod
    def from_config(cls, config):
        if cls.meta['id'] in config.getlist('skip_audits', []):
            raise NotEnabled
        return cls

    @classmethod
    def check_required_artifacts(cls, artifacts):
        for name in cls.meta.get('required_artifacts', ()):
            if artifacts.get(name) is None:
                raise MissingArtifact(name)

    @classmethod
    async def audit(cls, artifacts, context):
        raise NotImplementedError

    @staticmethod
    def generate_audit_result(audit_cls, product):
        meta = audit_cls.meta
        score = product.get('score')
        if score == 1 or not meta.get('failure_title'):
            title = meta.get('title')
        else:
            title = meta.get('failure_title')
        return {
            'id': meta['id'],
            'title': title,
            'description': meta.get('description'),
            'score': score,
            'error_message': None
        }

    @staticmethod
    def generate_error_result(audit_cls, error):
        meta = audit_cls.meta
        return {
            'id': meta['id'],
            'title': meta.get('title'),
            'description': meta.get('description'),
            'score': None,
            'error_message': str(error)
        }


class AuditRunner:
    def __init__(self, *audits):
        self.audits = list(audits)

    def __repr__(self):
        cls_name = self.__class__.__name__
        return '{}(audits={})'.format(cls_name, repr([a.meta['id'] for a in self.audits]))

    @classmethod
    def from_config(cls, config):
        audits = []
        for cls_path in config.getlist('audits', []):
            audit_cls = load_object(cls_path)
            try:
                audit_cls = audit_cls.from_config(config)
            except NotEnabled:
                log.debug('%s is not enabled', cls_path)
            else:
                audits.append(audit_cls)
        return cls(*audits)

    async def run(self, artifacts, context=None):
        if context is None:
            context = {}
        context.setdefault('computed_cache', {})
        results = {}
        for audit_cls in self.audits:
            audit_id = audit_cls.meta['id']
            try:
                audit_cls.check_required_artifacts(artifacts)
                product = await audit_cls.audit(artifacts, context)
            except Exception as e:
                log.warning('Audit %s failed: %s', audit_id, e)
                results[audit_id] = Audit.generate_error_result(audit_cls, e)
            else:
                results[audit_id] = Audit.generate_audit_result(audit_cls, product)
        return results
