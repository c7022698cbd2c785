import os

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


ARRAY_DIFF_METHODS = ('normal', 'lcs', 'unorder-normal', 'unorder-lcs')

KEY_ORDER_POLICIES = ('before', 'after')

UNDEFINED_BEHAVIORS = ('stringify', 'ignore', 'throw')


class JsonDiffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """Directories searched for config files, in descending priority."""
    return [os.getcwd(), os.path.join(os.path.expanduser('~'), '.jsondiffkit')]


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files('jsondiffkit_config', path=config_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, JsonDiffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JsonDiffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class DiffOptions(JsonDiffConfigurable):
    """Options of a diff, validated on assignment.

    A Differ reads these on every call and never changes them.
    """

    detect_circular = Bool(
        True,
        help="raise an error on inputs referring back to themselves.",
    ).tag(config=True)

    max_depth = Integer(
        None,
        allow_none=True,
        min=1,
        help="truncate nested values below this depth with '...'. "
             "Unbounded when unset.",
    ).tag(config=True)

    show_modifications = Bool(
        True,
        help="show a changed value as one modified line instead of "
             "a removed line and an added line.",
    ).tag(config=True)

    array_diff_method = Enum(
        ARRAY_DIFF_METHODS,
        'normal',
        help="how to align array items: by position ('normal') or on their "
             "longest common subsequence ('lcs'). The 'unorder-' variants "
             "sort arrays first.",
    ).tag(config=True)

    ignore_case = Bool(
        False,
        help="compare string values case-insensitively.",
    ).tag(config=True)

    ignore_case_for_key = Bool(
        False,
        help="compare object keys case-insensitively.",
    ).tag(config=True)

    recursive_equal = Bool(
        False,
        help="only align array items that are deeply equal or similar.",
    ).tag(config=True)

    preserve_key_order = Enum(
        KEY_ORDER_POLICIES,
        None,
        allow_none=True,
        help="keep the key order of the 'before' or 'after' value "
             "instead of sorting keys.",
    ).tag(config=True)

    undefined_behavior = Enum(
        UNDEFINED_BEHAVIORS,
        'stringify',
        help="what to do with values that have no json representation.",
    ).tag(config=True)

    def as_dict(self):
        return self.configured_traits(DiffOptions)


class JsonDiff(Global, DiffOptions):
    pass


entrypoint_configurables = {
    'jsondiff': JsonDiff,
}
