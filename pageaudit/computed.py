# coding=utf-8

import logging

from .errors import MainResourceNotFound
from .http import NetworkRecord
from .utils import equal_without_fragment

log = logging.getLogger(__name__)

__all__ = ['ComputedArtifact', 'MainResource']


class ComputedArtifact:
    """
    An artifact derived from gathered ones, cached for the length of a run.
    """

    name = None

    @classmethod
    async def request(cls, data, context):
        cache = context.setdefault('computed_cache', {})
        inputs = tuple(data.values())
        key = (cls.name or cls.__name__,) + tuple(id(v) for v in inputs)
        entry = cache.get(key)
        # the entry holds its inputs so their ids cannot be reused while cached
        if entry is None or any(a is not b for a, b in zip(entry[0], inputs)):
            entry = (inputs, await cls.compute_(data))
            cache[key] = entry
        return entry[1]

    @classmethod
    async def compute_(cls, data):
        raise NotImplementedError


class MainResource(ComputedArtifact):
    name = 'MainResource'

    @classmethod
    async def compute_(cls, data):
        final_url = data['URL'].get('final_url')
        for record in data['network_records'] or ():
            if not isinstance(record, NetworkRecord):
                record = NetworkRecord.from_dict(record)
            if equal_without_fragment(record.url, final_url):
                log.debug('Main resource: %s', record)
                return record
        raise MainResourceNotFound('Unable to identify the main resource', url=final_url)
