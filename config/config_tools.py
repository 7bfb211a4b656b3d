import os
from typing import List, Optional
from yacs.config import CfgNode as CN

from config.defaults import get_cfg_defaults


def get_abspath(path: str, project_root: str):
    if path is None:
        return None
    if os.path.isabs(path):
        return path
    return os.path.normpath(os.path.join(project_root, path))


def expand_relative_paths(root_cfg: CN):
    c = root_cfg
    root = c.SYSTEM.ROOT_DIR
    c.LOG.FILE = get_abspath(c.LOG.FILE, root)
    return c


def load_config(config_file: Optional[str] = None, opts: Optional[List] = None):
    """Load the default config, merge a yaml file and a list of overrides into it.

    config_file is relative to the config directory, opts is a flat
    [key1, value1, key2, value2, ...] list as used by yacs.
    """
    cfg = get_cfg_defaults()
    if config_file:
        cfg.merge_from_file(os.path.join(cfg.SYSTEM.CFG_DIR, config_file))
    if opts:
        cfg.merge_from_list(opts)
    cfg = expand_relative_paths(cfg)
    cfg.freeze()
    return cfg
