# coding=utf-8

from collections.abc import MutableMapping


class Config(MutableMapping):
    """
    Audit settings; a missing setting reads as ``None``.
    """

    def __init__(self, __values=None, **kwargs):
        self.attrs = {}
        self.update(__values, **kwargs)

    def __getitem__(self, name):
        if name not in self:
            return None
        return self.attrs[name]

    def __contains__(self, name):
        return name in self.attrs

    def get(self, name, default=None):
        return self[name] if self[name] is not None else default

    def getlist(self, name, default=None):
        v = self.get(name, default)
        if v is None:
            return None
        if isinstance(v, str):
            v = [i.strip() for i in v.split(",") if i.strip()]
        elif not hasattr(v, "__iter__"):
            v = [v]
        return list(v)

    def __setitem__(self, name, value):
        self.attrs[name] = value

    def update(self, __values=None, **kwargs):
        if __values is not None:
            for name, value in __values.items():
                self[name] = value
        for k, v in kwargs.items():
            self[k] = v

    def __delitem__(self, name):
        del self.attrs[name]

    def __iter__(self):
        return iter(self.attrs)

    def __len__(self):
        return len(self.attrs)


DEFAULT_CONFIG = {
    'log_level': 'info',
    'log_format': '%(asctime)s %(name)s [%(levelname)s] %(message)s',
    'log_dateformat': '[%Y-%m-%d %H:%M:%S %z]',
    'log_file': None,
    'skip_audits': [],
    'audits': [
        'pageaudit.audits.CharsetDefinedAudit'
    ]
}
