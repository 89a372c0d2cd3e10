import functools
import logging
import multiprocessing as mp
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from foldgen.datatypes import LEAF, Branch, Tree, is_tree
from foldgen.measures import size
from foldgen.splits import check_natural, splits

logger = logging.getLogger(__name__)

# gen_size(0) = [Leaf]
# gen_size(n) = [Branch(l, r) | (m, p) <- splits(n - 1), l <- gen_size(m), r <- gen_size(p)]

@dataclass
class EnumerationOptions:
    memoize: bool = True
    max_cached_size: Optional[int] = None

# C(0..k), grown bottom-up over splits
_catalan_table: List[int] = [1]

def catalan(n: int) -> int:
    check_natural(n)
    while len(_catalan_table) <= n:
        k = len(_catalan_table) - 1
        _catalan_table.append(sum(_catalan_table[m] * _catalan_table[p] for m, p in splits(k)))
    return _catalan_table[n]

class MemoStream:
    # One shared generator per size; readers replay what is built and pull
    # more only when they run past the end.
    def __init__(self, source: Iterator[Tree]):
        self.trees: List[Tree] = []
        self.source = source
        self.done = False

    def __iter__(self) -> Iterator[Tree]:
        i = 0
        while True:
            if i < len(self.trees):
                yield self.trees[i]
                i += 1
            elif self.done:
                return
            else:
                try:
                    self.trees.append(next(self.source))
                except StopIteration:
                    self.done = True

class SizeClass:
    def __init__(self, n: int, enumerator: 'Enumerator'):
        self.n = n
        self.enumerator = enumerator

    def __iter__(self) -> Iterator[Tree]:
        return self.enumerator.iterate(self.n)

    def __len__(self) -> int:
        return catalan(self.n)

    def __contains__(self, tree: object) -> bool:
        return is_tree(tree) and size(tree) == self.n

    def __repr__(self):
        return f"SizeClass(n={self.n})"

class Enumerator:
    def __init__(self, options: Optional[EnumerationOptions] = None):
        self.options = options or EnumerationOptions()
        self.cache: Dict[int, MemoStream] = {}

    def gen_size(self, n: int) -> SizeClass:
        check_natural(n)
        return SizeClass(n, self)

    def iterate(self, n: int) -> Iterator[Tree]:
        if n == 0:
            yield LEAF
            return
        for m, p in splits(n - 1):
            for left in self.subtrees(m):
                for right in self.subtrees(p):
                    yield Branch(left, right)

    def cacheable(self, k: int) -> bool:
        limit = self.options.max_cached_size
        return self.options.memoize and (limit is None or k <= limit)

    def subtrees(self, k: int) -> Iterable[Tree]:
        if not self.cacheable(k):
            return self.iterate(k)
        stream = self.cache.get(k)
        if stream is None:
            # An equal stream may already be stored; keep that one.
            stream = self.cache.setdefault(k, MemoStream(self.iterate(k)))
            logger.debug("caching trees of size %d", k)
        return stream

    def materialize(self, k: int) -> Tuple[Tree, ...]:
        return tuple(self.subtrees(k))

    def clear(self) -> None:
        self.cache.clear()

_default = Enumerator()

def gen_size(n: int, options: Optional[EnumerationOptions] = None) -> SizeClass:
    if options is None:
        return _default.gen_size(n)
    return Enumerator(options).gen_size(n)

def _enumerate_branch(options: EnumerationOptions, pair: Tuple[int, int]) -> List[Tree]:
    m, p = pair
    enumerator = Enumerator(options)
    return [Branch(left, right) for left in enumerator.subtrees(m) for right in enumerator.subtrees(p)]

# One pool task per split branch; Pool.map keeps split order, so the result
# equals list(gen_size(n)).
def gen_size_parallel(n: int, workers: Optional[int] = None,
                      options: Optional[EnumerationOptions] = None) -> List[Tree]:
    check_natural(n)
    if n == 0:
        return [LEAF]
    pairs = splits(n - 1)
    logger.info("enumerating size %d over %d split branches", n, len(pairs))
    task = functools.partial(_enumerate_branch, options or EnumerationOptions())
    with mp.Pool(workers) as pool:
        chunks = pool.map(task, pairs)
    return [tree for chunk in chunks for tree in chunk]
