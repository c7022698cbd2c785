# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import logging
import os

from pytest import fixture, skip

from jsondiffkit import config
from jsondiffkit.log import logger


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Look for config files in an empty temporary directory only"""
    monkeypatch.setattr(config, 'config_path', lambda: [str(tmpdir)])
    return tmpdir


@fixture
def write_config(isolated_config):
    def write(cfg):
        with open(str(isolated_config.join('jsondiffkit_config.json')), 'w') as f:
            json.dump(cfg, f)
    return write


@fixture
def jsonfiles(tmpdir):
    """Fixture writing values as json files in a temporary directory"""
    def write(**values):
        paths = {}
        for name, value in values.items():
            path = str(tmpdir.join(name + '.json'))
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(value, f)
            paths[name] = path
        return paths
    return write


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    level = logger.level
    yield
    logging.getLogger().handlers[:] = handlers
    logger.setLevel(level)


@fixture(scope='session')
def posix_only():
    if os.name == 'nt':
        skip('requires posix null file')
