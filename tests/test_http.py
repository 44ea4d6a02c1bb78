# coding=utf-8

from pageaudit.http import NetworkRecord, HttpHeaders, make_headers


def test_make_headers_from_pairs():
    headers = make_headers([('Content-Type', 'text/html'), ('set-cookie', 'a=b'), ('Set-Cookie', 'c=d')])
    assert headers['content-type'] == 'text/html'
    assert headers.get_list('Set-Cookie') == ['a=b', 'c=d']


def test_make_headers_from_dicts():
    headers = make_headers([{'name': 'content-type', 'value': 'text/html; charset=utf-8'},
                            {'name': 'Content-Type', 'value': 'text/plain'}])
    assert headers.get_list('CONTENT-TYPE') == ['text/html; charset=utf-8', 'text/plain']


def test_make_headers_from_single_dict():
    headers = make_headers({'name': 'content-type', 'value': 'text/html; charset=utf-8'})
    assert list(headers.get_all()) == [('Content-Type', 'text/html; charset=utf-8')]
    assert 'name' not in headers and 'value' not in headers


def test_make_headers_keeps_http_headers():
    headers = HttpHeaders()
    headers.add('Content-Type', 'text/html')
    assert make_headers(headers) is headers


def test_make_headers_skips_malformed():
    headers = make_headers([None, ('only-name',), {'value': 'v'}, ('', 'v'), ('Content-Type', None)])
    assert list(headers.get_all()) == [('Content-Type', '')]
    assert len(make_headers(None)) == 0
    assert len(make_headers(42)) == 0


def test_copy_network_record():
    record = NetworkRecord('http://example.com/', 200, headers=[('Content-Type', 'text/html')])
    copy_record = record.copy()
    assert copy_record.url == 'http://example.com/'
    assert copy_record.status == 200
    assert copy_record.headers['Content-Type'] == 'text/html'


def test_replace_network_record():
    record = NetworkRecord('http://example.com/', 200, resource_type='Document')
    new_record = record.replace(url='https://example.com/', status=301)
    assert new_record.url == 'https://example.com/'
    assert new_record.status == 301
    assert new_record.resource_type == 'Document'


def test_network_record_from_dict():
    record = NetworkRecord.from_dict({'url': 'https://example.com/',
                                      'responseHeaders': [{'name': 'content-type', 'value': 'text/html'}],
                                      'resourceType': 'Document'})
    assert record.url == 'https://example.com/'
    assert record.status == 200
    assert record.headers['Content-Type'] == 'text/html'
    assert record.resource_type == 'Document'

    record2 = NetworkRecord.from_dict(record.to_dict())
    assert record2.url == record.url
    assert list(record2.headers.get_all()) == list(record.headers.get_all())
    assert record2.resource_type == record.resource_type
