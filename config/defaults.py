from yacs.config import CfgNode as CN
from pathlib import Path

C = CN()
C.SYSTEM = CN()

# path to the config directory
C.SYSTEM.CFG_DIR = str(Path(__file__).parent)

# path to the repo's root directory
C.SYSTEM.ROOT_DIR = str(Path(__file__).parent.parent)

########################################
# Logging config
########################################
C.LOG = CN()

# logging level (debug, info, warning, error)
C.LOG.LEVEL = "info"

# log file path (or None for not logging into a file)
C.LOG.FILE = None

# also log to stdout
C.LOG.STDOUT = True

########################################
# Disjoint set config
########################################
C.DSU = CN()

# numpy integer dtype of the rank array, rank increments saturate at its maximum
# e.g. "uint8" is enough for any practical size, as ranks stay below log2(n)
C.DSU.RANK_DTYPE = "int64"


def get_cfg_defaults():
    """Get a yacs config object with default values."""
    return C.clone()
