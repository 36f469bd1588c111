import io
import json

import pytest

import cli
from cli import interactive_line, main


def test_conjugate_table(capsys):
    assert main(['conjugate', 'gam', '-i', 'hk']) == 0
    out = capsys.readouterr().out
    assert 'Verb Root: gam' in out
    assert 'gamai, gamae, gamei' in out


def test_conjugate_json_in_hk(capsys):
    assert main(['conjugate', 'bhaN', '-t', 'future', '-d', 'shauraseni',
                 '-f', 'json', '-i', 'hk', '-e', 'hk']) == 0
    data = json.loads(capsys.readouterr().out)
    assert data['verb_root'] == 'bhaN'
    assert data['tense'] == 'future'
    assert 'bhaNissidi' in data['forms']['third_singular']


def test_conjugate_to_file(tmp_path, capsys):
    path = tmp_path / 'gam.csv'
    assert main(['conjugate', 'gam', '--voice', 'passive', '-f', 'csv', '-o', str(path)]) == 0
    assert 'Output written to' in capsys.readouterr().out
    assert path.read_text(encoding='utf-8').startswith('verb_root,tense,mood')


def test_conjugate_invalid_root(capsys):
    assert main(['conjugate', 'kRt', '-i', 'hk']) == 1
    err = capsys.readouterr().err
    assert err.startswith('Error:')
    assert 'kRt' in err
    assert 'present/maharashtri/active' in err


def test_unknown_tense_is_rejected():
    with pytest.raises(SystemExit):
        main(['conjugate', 'gam', '-t', 'aorist'])


def test_batch(tmp_path, capsys):
    roots = tmp_path / 'roots.txt'
    roots.write_text('gam\nkRt\n', encoding='utf-8')
    out = tmp_path / 'out.json'

    assert main(['batch', '-i', str(roots), '-o', str(out), '--all-tenses',
                 '--input-encoding', 'hk', '--workers', '2']) == 0

    captured = capsys.readouterr()
    assert 'Processed 4 conjugations, 4 errors' in captured.out
    assert 'Line 2: kRt' in captured.err

    data = json.loads(out.read_text(encoding='utf-8'))
    assert [r['tense'] for r in data['results']] == ['present', 'past', 'future', 'imperative']
    assert len(data['errors']) == 4


def test_batch_all_csv(tmp_path):
    roots = tmp_path / 'roots.txt'
    roots.write_text('gam\n', encoding='utf-8')
    out = tmp_path / 'out.csv'

    assert main(['batch', '-i', str(roots), '-o', str(out), '-f', 'csv', '--all']) == 0
    lines = out.read_text(encoding='utf-8').splitlines()
    assert len(lines) == 1 + 24 * 6


def test_batch_missing_file(tmp_path, capsys):
    assert main(['batch', '-i', str(tmp_path / 'nope.txt'), '-o', str(tmp_path / 'o.json')]) == 1
    assert 'Error:' in capsys.readouterr().err


def test_batch_from_turso(tmp_path, monkeypatch):
    monkeypatch.setattr(cli, '_load_turso_roots', lambda: ['gam', 'ho'])
    out = tmp_path / 'out.json'
    assert main(['batch', '--from-turso', '-o', str(out), '--input-encoding', 'hk']) == 0
    data = json.loads(out.read_text(encoding='utf-8'))
    assert [r['verb_root'] for r in data['results']] == ['gam', 'ho']


def test_interactive_line():
    assert interactive_line('quit') is None
    assert 'Commands:' in interactive_line('help')
    assert interactive_line('   ') == ''
    text = interactive_line('gam past', 'hk', 'slp1')
    assert 'gamIa, gamasI, gamahI, gamahIa' in text
    assert 'gamai, gamae, gamei' in interactive_line('gam', 'hk', 'slp1')
    with pytest.raises(ValueError):
        interactive_line('gam aorist', 'hk', 'slp1')


def test_interactive_session(capsys):
    session = io.StringIO('gam\ngam future magadhi\nkRt past\nquit\n')
    assert cli.run_interactive(session) == 0
    captured = capsys.readouterr()
    assert 'Tense: present' in captured.out
    assert 'Dialect: magadhi' in captured.out
    assert 'Goodbye!' in captured.out
    assert captured.err.startswith('Error: Invalid verb root')
    assert '[kRt, past/maharashtri/active]' in captured.err
