# coding=utf-8

"""
Audits a page to ensure its charset is configured properly.

It must be declared in the Content-Type HTTP header, by a byte-order mark,
or within the first 1024 characters of the HTML document.
"""

from pageaudit.audit import Audit
from pageaudit.charset import detect
from pageaudit.computed import MainResource

__all__ = ['CharsetDefinedAudit']


class CharsetDefinedAudit(Audit):
    meta = {
        'id': 'charset',
        'title': 'Properly defines charset',
        'failure_title': 'Charset declaration is missing or occurs too late on the page',
        'description': 'A character encoding declaration is required. It can be done with a '
                       '<meta> tag in the first 1024 characters of the HTML, in the '
                       'Content-Type HTTP response header or by a byte-order mark.',
        'required_artifacts': ['MainDocumentContent', 'URL', 'network_records']
    }

    @classmethod
    async def audit(cls, artifacts, context):
        data = {
            'network_records': artifacts['network_records'][cls.DEFAULT_PASS],
            'URL': artifacts['URL']
        }
        main_resource = await MainResource.request(data, context)
        declared = detect(main_resource.headers, artifacts['MainDocumentContent'])
        return {
            'score': int(declared)
        }
