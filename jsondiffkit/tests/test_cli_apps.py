# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

import pytest

from jsondiffkit import diffapp
from jsondiffkit.diffapp import main, main_diff, read_json, EXPLICIT_MISSING_FILE


pytestmark = pytest.mark.usefixtures('isolated_config', 'reset_log')


def test_jsondiff_app(jsonfiles, capsys):
    paths = jsonfiles(before={'a': 1, 'b': 2, 'c': 3}, after={'a': 1, 'b': 3, 'd': 4})
    assert 0 == main([paths['before'], paths['after'], '--log-level=CRITICAL'])
    out, _ = capsys.readouterr()
    assert out == (
        '{\n'
        '  "a": 1,\n'
        '  - "b": 2,\n'
        '  + "b": 3,\n'
        '  - "c": 3,\n'
        '  + "d": 4\n'
        '}\n'
    )


def test_jsondiff_app_options(jsonfiles, capsys):
    paths = jsonfiles(before=[1, 2, 3], after=[1, 4, 2, 3])
    assert 0 == main([paths['before'], paths['after'], '--array-diff-method=lcs'])
    out, _ = capsys.readouterr()
    assert out == '[\n  1,\n  + 4,\n  2,\n  3\n]\n'

    assert 0 == main([paths['before'], paths['after'], '--max-depth', '1'])
    out, _ = capsys.readouterr()
    assert '- 3' in out


def test_jsondiff_app_out_file(jsonfiles, tmpdir):
    paths = jsonfiles(before={'a': 1}, after={'a': 2})
    dfn = str(tmpdir.join('diff_output.json'))
    assert 0 == main([paths['before'], paths['after'], '--out', dfn])
    with io.open(dfn, encoding='utf-8') as f:
        lines = json.load(f)
    assert [line['text'] for line in lines] == ['{', '- "a": 1', '+ "a": 2', '}']
    assert lines[0] == {
        'level': 0, 'kind': 'equal', 'text': '{', 'line_number': 1, 'comma': False,
    }
    assert lines[2]['kind'] == 'modify'


def test_jsondiff_app_missing_file(jsonfiles, capsys):
    paths = jsonfiles(after={'a': 1})
    missing = os.path.join(os.path.dirname(paths['after']), 'missing.json')
    assert 1 == main([missing, paths['after']])
    out, _ = capsys.readouterr()
    assert out == 'Missing file {}\n'.format(missing)


def test_jsondiff_app_null_file(posix_only, jsonfiles, capsys):
    paths = jsonfiles(after={'a': 1})
    assert 0 == main([EXPLICIT_MISSING_FILE, paths['after']])
    out, _ = capsys.readouterr()
    assert '- null' in out
    assert '  + "a": 1\n' in out


def test_jsondiff_app_invalid_json(tmpdir):
    fn = str(tmpdir.join('broken.json'))
    with io.open(fn, 'w', encoding='utf-8') as f:
        f.write('{"a": ')
    with pytest.raises(ValueError):
        main([fn, fn])


def test_read_json(jsonfiles):
    paths = jsonfiles(value={'list': [1, None, 'x']})
    assert read_json(paths['value']) == {'list': [1, None, 'x']}
    assert read_json(EXPLICIT_MISSING_FILE) is None


def test_main_diff_uses_parsed_options(jsonfiles, capsys):
    paths = jsonfiles(before={'K': 'a'}, after={'k': 'A'})
    args = diffapp._build_arg_parser().parse_args([
        paths['before'], paths['after'], '--ignore-case', '--ignore-case-for-key'])
    assert 0 == main_diff(args)
    out, _ = capsys.readouterr()
    assert out == '{\n  "K": "a"\n}\n'


def test_jsondiff_app_version(capsys):
    from jsondiffkit import __version__
    with pytest.raises(SystemExit) as exc:
        main(['--version'])
    assert exc.value.code == 0
    out, _ = capsys.readouterr()
    assert out.strip() == 'jsondiff ' + __version__
