import numpy as np
from yacs.config import CfgNode as CN

from config.defaults import get_cfg_defaults
from tools import log

DEFAULT_RANK_DTYPE = np.dtype(get_cfg_defaults().DSU.RANK_DTYPE)


def _int_dtype(dtype):
    """Resolve dtype to a numpy integer dtype or raise ValueError."""
    try:
        dtype = np.dtype(dtype)
    except TypeError as e:
        raise ValueError(f"Unknown rank dtype: {dtype}") from e
    if dtype.kind not in "iu":
        raise ValueError(f"Rank dtype has to be an integer type, got {dtype}.")
    return dtype


class DisjointSet:
    """Disjoint Set Union data structure with path halving and union by rank.

    Elements are the dense integer ids 0 .. n-1. Both heuristics together give
    O(m * alpha(n)) amortized cost for m operations on n elements.

    Parents and ranks are kept in plain lists, the rank dtype only sets the
    maximum rank, where increments saturate.

    See more at: https://cp-algorithms.com/data_structures/disjoint_set_union.html
    """

    def __init__(self, n_elements=0, rank_dtype=DEFAULT_RANK_DTYPE):
        if n_elements < 0:
            raise ValueError(f"Number of elements must be non-negative, got {n_elements}.")
        self.rank_dtype = _int_dtype(rank_dtype)
        self._max_rank = int(np.iinfo(self.rank_dtype).max)
        self._parent = list(range(n_elements))
        self._rank = [0] * n_elements

    @classmethod
    def from_ranks(cls, ranks):
        """Create singleton sets with the given initial ranks.

        An integer numpy array keeps its dtype, other integral sequences get
        the default rank dtype. Non-integral values raise ValueError.
        """
        ranks = np.array(ranks)
        if ranks.ndim != 1:
            raise ValueError(f"Ranks must be one dimensional, got shape {ranks.shape}.")
        if ranks.dtype.kind == "b":
            ranks = ranks.astype(DEFAULT_RANK_DTYPE)
        elif ranks.dtype.kind == "f":
            if not np.all(np.isfinite(ranks)) or not np.all(ranks == np.floor(ranks)):
                raise ValueError(f"Ranks must be integral, got {ranks.tolist()}.")
            ranks = ranks.astype(DEFAULT_RANK_DTYPE)
        elif ranks.dtype.kind not in "iu":
            raise ValueError(f"Ranks must be integers, got dtype {ranks.dtype}.")
        dsu = cls(len(ranks), rank_dtype=ranks.dtype)
        dsu._rank = ranks.tolist()
        return dsu

    @classmethod
    def from_cfg(cls, cfg: CN, n_elements: int):
        """Create a DisjointSet with the rank dtype set in cfg.DSU."""
        log.debug("Creating DisjointSet of %d elements with %s ranks.", n_elements, cfg.DSU.RANK_DTYPE)
        return cls(n_elements, rank_dtype=cfg.DSU.RANK_DTYPE)

    @property
    def n(self):
        return len(self._parent)

    def __len__(self):
        return len(self._parent)

    def is_empty(self):
        return len(self._parent) == 0

    def __repr__(self):
        return f"DisjointSet(n_elements={len(self)})"

    def copy(self):
        """Return an independent deep copy."""
        dsu = type(self).__new__(type(self))
        dsu.rank_dtype = self.rank_dtype
        dsu._max_rank = self._max_rank
        dsu._parent = self._parent.copy()
        dsu._rank = self._rank.copy()
        return dsu

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def extend(self, k):
        """Append k new singleton sets with ids len(self) .. len(self)+k-1."""
        if k < 0:
            raise ValueError(f"Cannot extend by a negative number of elements: {k}.")
        n = len(self._parent)
        self._parent.extend(range(n, n + k))
        self._rank.extend([0] * k)

    def new_set(self):
        """Insert a new set and return its id."""
        new_id = len(self._parent)
        self._parent.append(new_id)
        self._rank.append(0)
        return new_id

    def _check_index(self, x):
        if not 0 <= x < len(self._parent):
            raise IndexError(f"Element {x} out of range for DisjointSet of size {len(self)}.")

    def get_parent(self, x):
        """Current parent of x, without resolving or compressing."""
        self._check_index(x)
        return self._parent[x]

    def set_parent(self, x, parent):
        self._check_index(x)
        self._check_index(parent)
        self._parent[x] = int(parent)

    def get_rank(self, x):
        self._check_index(x)
        return self._rank[x]

    def find_root(self, x):
        """Get the root of the set, which contains x.

        Every node on the way is pointed to its grandparent (path halving).
        """
        self._check_index(x)
        parent = self._parent
        par = parent[x]
        while x != par:
            grandpar = parent[par]
            parent[x] = grandpar
            x = par
            par = grandpar
        return int(x)

    def union_sets(self, x, y):
        """Merge the sets of x and y. Return False if they were already merged.

        On equal ranks the root of x goes under the root of y.
        """
        x = self.find_root(x)
        y = self.find_root(y)
        if x == y:
            return False

        rank = self._rank
        if rank[x] > rank[y]:
            self._parent[y] = x
        elif rank[x] < rank[y]:
            self._parent[x] = y
        else:
            self._parent[x] = y
            self._increment_rank(y)
        return True

    def _increment_rank(self, x):
        if self._rank[x] < self._max_rank:
            self._rank[x] += 1
        else:
            log.debug("Rank of root %d saturated at %d.", x, self._max_rank)

    def in_same_set(self, x, y):
        return self.find_root(x) == self.find_root(y)

    def get_sets(self):
        """List of sets, each a sorted list of ids, ordered by their smallest id."""
        sets = {}
        for i in range(len(self)):
            sets.setdefault(self.find_root(i), []).append(i)
        return list(sets.values())
