import requests

import turso_db
from turso_db import TursoDatabase, _to_https_url


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        return self.payload


def ok(rows):
    return {'results': [
        {'type': 'ok', 'response': {'type': 'execute', 'result': {'rows': rows}}},
        {'type': 'ok', 'response': {'type': 'close'}},
    ]}


def text(value):
    return {'type': 'text', 'value': value}


def test_url_scheme():
    assert _to_https_url('libsql://db.turso.io') == 'https://db.turso.io'
    assert _to_https_url('db.turso.io') == 'https://db.turso.io'


def test_not_configured(capsys):
    db = TursoDatabase(url='', auth_token='')
    assert db.load_verb_roots() == []
    assert 'not configured' in capsys.readouterr().out


def test_load_verb_roots(monkeypatch, capsys):
    calls = []

    def fake_post(url, headers, json, timeout):
        calls.append(json['requests'][0]['stmt']['sql'])
        if json['requests'][0]['stmt']['sql'] == 'SELECT 1':
            return FakeResponse(ok([[{'type': 'integer', 'value': '1'}]]))
        return FakeResponse(ok([[text('gam')], [text('bhU')], [text('gam')], [None]]))

    monkeypatch.setattr(turso_db.requests, 'post', fake_post)

    db = TursoDatabase(url='libsql://roots.turso.io', auth_token='token')
    assert db.load_verb_roots() == ['bhU', 'gam']
    assert calls == ['SELECT 1', 'SELECT DISTINCT root FROM verb_roots']
    assert db.connected

    out = capsys.readouterr().out
    assert 'Turso: Connected successfully' in out
    assert 'Turso: Loaded 2 verb roots' in out


def test_http_error(monkeypatch):
    monkeypatch.setattr(turso_db.requests, 'post', lambda *a, **kw: FakeResponse({}, status_code=401))
    db = TursoDatabase(url='roots.turso.io', auth_token='bad')
    assert db.connect() is False
    assert db.load_verb_roots() == []


def test_network_failure(monkeypatch):
    def fail(*args, **kwargs):
        raise requests.ConnectionError('unreachable')

    monkeypatch.setattr(turso_db.requests, 'post', fail)
    db = TursoDatabase(url='roots.turso.io', auth_token='token')
    assert db.load_verb_roots() == []
