import json
import logging
import os
from typing import *

import numpy as np
import yaml
from yamlinclude import YamlIncludeConstructor

from ..exceptions import ParamError


class YamlLimitedSafeLoader(type):
    """Meta YAML loader that skips the resolution of the specified YAML tags."""
    def __new__(cls, name, bases, namespace, do_not_resolve: List[str]) -> Type[yaml.SafeLoader]:
        do_not_resolve = set(do_not_resolve)
        implicit_resolvers = {
            key: [(tag, regex) for tag, regex in mappings if tag not in do_not_resolve]
            for key, mappings in yaml.SafeLoader.yaml_implicit_resolvers.items()
        }
        return super().__new__(
            cls,
            name,
            (yaml.SafeLoader, *bases),
            {**namespace, "yaml_implicit_resolvers": implicit_resolvers},
        )


class YamlNoTimestampSafeLoader(
    metaclass=YamlLimitedSafeLoader, do_not_resolve={"tag:yaml.org,2002:timestamp"}
):
    """A safe YAML loader that leaves timestamps as strings."""
    pass


class dotdict(dict):
    """
    dot.notation access to dictionary attributes
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            return self.__getattribute__(item)

    @classmethod
    def create(cls, cfg: Any):
        """
        - recursively replace all dicts by the dotdict.
        """
        if isinstance(cfg, dict):
            items = ((k, cls.create(v)) for k, v in cfg.items())
            return dotdict(items)
        elif isinstance(cfg, list):
            return [cls.create(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return tuple([cls.create(i) for i in cfg])
        else:
            return cfg

    @staticmethod
    def serialize(cfg):
        """
        Convert back to plain dicts and lists, tuples (e.g. points) are written as lists.
        Keys starting with '_' are internal and are dropped.
        """
        if isinstance(cfg, dict):
            return {k: dotdict.serialize(v) for k, v in cfg.items() if not str(k).startswith('_')}
        elif isinstance(cfg, (list, tuple)):
            return [dotdict.serialize(i) for i in cfg]
        elif isinstance(cfg, np.ndarray):
            return cfg.tolist()
        elif isinstance(cfg, np.generic):
            return cfg.item()
        else:
            return cfg


def load_config(path):
    """
    Load configuration from given YAML or JSON file (by the '.json' suffix),
    replace dictionaries by dotdict.
    YAML files can include other files relative to the config file directory:
        controlPoints: !include points.yaml
    """
    cfg_dir = os.path.dirname(path)
    with open(path, encoding="utf-8") as f:
        if os.path.splitext(path)[1].lower() == ".json":
            cfg = json.load(f)
        else:
            YamlIncludeConstructor.add_to_loader_class(loader_class=YamlNoTimestampSafeLoader, base_dir=cfg_dir)
            cfg = yaml.load(f, Loader=YamlNoTimestampSafeLoader)
    if not isinstance(cfg, dict):
        raise ParamError(f"Config file {path} must contain a mapping, get: {type(cfg)}.")
    cfg['_config_root_dir'] = os.path.abspath(cfg_dir)
    logging.info(f"Loaded config: {path}")
    return dotdict.create(cfg)


def dump_config(config, path):
    """
    Write the configuration to `path`. JSON for the '.json' suffix, YAML otherwise.
    """
    data = dotdict.serialize(config)
    with open(path, "w", encoding="utf-8") as f:
        if os.path.splitext(path)[1].lower() == ".json":
            json.dump(data, f, ensure_ascii=False, indent=2)
        else:
            yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
