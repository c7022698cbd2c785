import argparse
import json
import pytest

from traitlets import Enum

from jsondiffkit import config
from jsondiffkit.args import (
    ToggleAction, ConfigBackedParser, LogLevelAction, options_from_args,
    positive_int,
)
from jsondiffkit.config import (
    entrypoint_configurables, Global, DiffOptions, build_config, recursive_update,
)
from jsondiffkit.diffapp import _build_arg_parser


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)

@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


def test_toggle_action():
    parser = argparse.ArgumentParser()
    parser.add_argument('--flag', action=ToggleAction, default=True)

    assert parser.parse_args([]).flag is True
    assert parser.parse_args(['--no-flag']).flag is False
    assert parser.parse_args(['--no-flag', '--flag']).flag is True


def test_toggle_action_needs_long_option():
    parser = argparse.ArgumentParser()
    with pytest.raises(ValueError):
        parser.add_argument('-f', action=ToggleAction)


def test_positive_int():
    assert positive_int('3') == 3
    with pytest.raises(argparse.ArgumentTypeError):
        positive_int('0')
    with pytest.raises(ValueError):
        positive_int('many')


def test_config_parser(entrypoint_config, isolated_config, reset_log):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'


def test_build_config_defaults(isolated_config):
    cfg = build_config('jsondiff')
    assert cfg['log_level'] == 'INFO'
    assert cfg['array_diff_method'] == 'normal'
    assert cfg['show_modifications'] is True
    assert cfg['detect_circular'] is True
    # Unset options are left out
    assert 'max_depth' not in cfg
    assert 'preserve_key_order' not in cfg

    cfg = build_config('jsondiff', include_none=True)
    assert cfg['max_depth'] is None

    with pytest.raises(ValueError):
        build_config('nbdiff')


def test_build_config_from_disk(write_config):
    write_config({
        'DiffOptions': {'array_diff_method': 'lcs', 'max_depth': 4},
        'Global': {'log_level': 'ERROR'},
    })
    cfg = build_config('jsondiff')
    assert cfg['array_diff_method'] == 'lcs'
    assert cfg['max_depth'] == 4
    assert cfg['log_level'] == 'ERROR'
    assert cfg['ignore_case'] is False


def test_config_path_priority(tmpdir, monkeypatch):
    high = tmpdir.mkdir('high')
    low = tmpdir.mkdir('low')
    high.join('jsondiffkit_config.json').write(
        json.dumps({'DiffOptions': {'ignore_case': True}}))
    low.join('jsondiffkit_config.json').write(
        json.dumps({'DiffOptions': {'ignore_case': False, 'recursive_equal': True}}))
    monkeypatch.setattr(config, 'config_path', lambda: [str(high), str(low)])

    cfg = build_config('jsondiff')
    assert cfg['ignore_case'] is True
    assert cfg['recursive_equal'] is True


def test_recursive_update():
    target = {'a': 1, 'b': {'c': 2, 'd': 3}}
    recursive_update(target, {'a': None, 'b': {'c': 4}, 'e': {}}, False)
    assert target == {'b': {'c': 4, 'd': 3}}

    target = {'a': 1}
    recursive_update(target, {'a': None}, True)
    assert target == {'a': None}


def test_diff_parser_options(isolated_config, reset_log):
    parser = _build_arg_parser()
    args = parser.parse_args(['a.json', 'b.json'])
    options = options_from_args(args)
    assert options.as_dict() == DiffOptions().as_dict()
    assert options.array_diff_method == 'normal'
    assert options.max_depth is None
    assert options.show_modifications is True

    args = parser.parse_args([
        'a.json', 'b.json',
        '--array-diff-method', 'lcs',
        '--max-depth', '2',
        '--no-show-modifications',
        '--ignore-case',
        '--preserve-key-order', 'after',
        '--undefined-behavior', 'throw',
    ])
    options = options_from_args(args)
    assert options.array_diff_method == 'lcs'
    assert options.max_depth == 2
    assert options.show_modifications is False
    assert options.ignore_case is True
    assert options.ignore_case_for_key is False
    assert options.preserve_key_order == 'after'
    assert options.undefined_behavior == 'throw'


def test_diff_parser_takes_defaults_from_config(write_config, reset_log):
    write_config({'DiffOptions': {'array_diff_method': 'unorder-lcs',
                                  'show_modifications': False}})
    args = _build_arg_parser().parse_args(['a.json', 'b.json'])
    assert args.array_diff_method == 'unorder-lcs'
    assert args.show_modifications is False

    args = _build_arg_parser().parse_args(['a.json', 'b.json', '--show-modifications'])
    assert args.show_modifications is True


def test_diff_parser_rejects_bad_values(isolated_config, reset_log):
    parser = _build_arg_parser()
    for bad in (['--max-depth', '0'], ['--array-diff-method', 'myers']):
        with pytest.raises(SystemExit):
            parser.parse_args(['a.json', 'b.json'] + bad)


def test_config_help(isolated_config, reset_log, capsys):
    parser = _build_arg_parser()
    with pytest.raises(SystemExit) as exc:
        parser.parse_args(['--config'])
    assert exc.value.code == 1
    _, err = capsys.readouterr()
    cfg = json.loads(err)
    assert list(cfg.keys()) == ['JsonDiff']
    assert cfg['JsonDiff']['array_diff_method'] == 'normal'
    assert cfg['JsonDiff']['max_depth'] is None
