import os
import numpy as np
from typing import List, Dict, Union, Tuple
from yacs.config import CfgNode as CN
from tools import log


def _is(_type):
    def check_type(x):
        return isinstance(x, _type)
    return check_type


def _is_int_dtype(x):
    try:
        return np.dtype(x).kind in "iu"
    except TypeError:
        return False


system_checks = {
    "CFG_DIR": os.path.isdir,
    "ROOT_DIR": os.path.isdir,
}

log_checks = {
    "LEVEL": lambda x: _is(str)(x) and x.lower() in log.log_level_map,
    "FILE": lambda x: x is None or (_is(str)(x) and os.path.isdir(os.path.dirname(os.path.normpath(x)))),
    "STDOUT": _is(bool),
}

dsu_checks = {
    "RANK_DTYPE": lambda x: _is(str)(x) and _is_int_dtype(x),
}


def run_checks(checks: dict, cfg: CN):
    failed = False
    for check_name, check_fn in checks.items():
        if not check_fn(getattr(cfg, check_name)):
            failed = True
            log.error(f"Config check failed: {check_name}.")
    return not failed


def run_list_of_checks(checks: List[Tuple[Union[Dict, CN]]]):
    success = all(run_checks(check, cfg) for check, cfg in checks)
    if success:
        log.info("All config checks passed.")
    else:
        log.error("Config had errors. Aborting ...")
    return success


def check_dsu_config(cfg: CN):
    """Check a disjoint set config for errors."""
    return run_list_of_checks([(system_checks, cfg.SYSTEM),
                               (log_checks, cfg.LOG),
                               (dsu_checks, cfg.DSU)])
