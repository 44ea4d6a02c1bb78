# coding=utf-8

from collections.abc import Mapping

from tornado.httputil import HTTPHeaders as _HttpHeaders, HTTPInputError

HttpHeaders = _HttpHeaders


def make_headers(headers):
    """
    Build ``HttpHeaders`` from a header list as received on the wire.

    Accepts a sequence of ``(name, value)`` pairs or ``{'name': ..., 'value': ...}``
    dicts, or an existing ``HttpHeaders``. A single such dict passed on its own
    is taken as a one-header list. Entries without a name are skipped.
    """
    if isinstance(headers, HttpHeaders):
        return headers
    res = HttpHeaders()
    if not headers:
        return res
    if isinstance(headers, Mapping):
        headers = [headers]
    try:
        headers = iter(headers)
    except TypeError:
        return res
    for h in headers:
        if isinstance(h, Mapping):
            name, value = h.get('name'), h.get('value')
        else:
            try:
                name, value = h
            except (TypeError, ValueError):
                continue
        if not name or not isinstance(name, str):
            continue
        try:
            res.add(name, '' if value is None else str(value))
        except (HTTPInputError, ValueError):
            continue
    return res


class NetworkRecord:
    def __init__(self, url, status=200, headers=None, resource_type=None):
        """
        Construct a record of a single network request made during page load.
        """
        self.url = url
        self.status = status
        self.headers = make_headers(headers)
        self.resource_type = resource_type

    def __str__(self):
        return '<{}, {}>'.format(self.status, self.url)

    __repr__ = __str__

    def copy(self):
        return self.replace()

    def replace(self, **kwargs):
        for i in ["url", "status", "headers", "resource_type"]:
            kwargs.setdefault(i, getattr(self, i))
        return type(self)(**kwargs)

    def to_dict(self):
        d = {
            'url': self.url,
            'status': self.status,
            'headers': [{'name': k, 'value': v} for k, v in self.headers.get_all()],
            'resource_type': self.resource_type
        }
        return d

    @classmethod
    def from_dict(cls, d):
        headers = d.get('headers')
        if headers is None:
            headers = d.get('responseHeaders')
        resource_type = d.get('resource_type')
        if resource_type is None:
            resource_type = d.get('resourceType')
        return cls(d['url'], status=d.get('status', 200), headers=headers,
                   resource_type=resource_type)
