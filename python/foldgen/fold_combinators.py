from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from foldgen.datatypes import Branch, Empty, Leaf, Prepend, Sequence, Tree

T = TypeVar('T')
R = TypeVar('R')

# Handler configurations, one field per variant. Both fields are required,
# so an algebra with a missing case cannot be built.
@dataclass(frozen=True)
class SequenceAlgebra(Generic[T, R]):
    empty: R
    prepend: Callable[[T, R], R]

@dataclass(frozen=True)
class TreeAlgebra(Generic[R]):
    leaf: R
    branch: Callable[[R, R], R]

Algebra = Union[SequenceAlgebra, TreeAlgebra]

# f(Empty) = alg.empty; f(Prepend(x, xs)) = alg.prepend(x, f(xs))
def fold_sequence(alg: SequenceAlgebra[T, R]) -> Callable[[Sequence[T]], R]:
    def go(seq: Sequence[T]) -> R:
        match seq:
            case Empty():
                return alg.empty
            case Prepend(head, tail):
                return alg.prepend(head, go(tail))
        raise TypeError(f"not a sequence: {seq!r}")
    return go

# f(Leaf) = alg.leaf; f(Branch(l, r)) = alg.branch(f(l), f(r))
def fold_tree(alg: TreeAlgebra[R]) -> Callable[[Tree], R]:
    def go(tree: Tree) -> R:
        match tree:
            case Leaf():
                return alg.leaf
            case Branch(left, right):
                return alg.branch(go(left), go(right))
        raise TypeError(f"not a tree: {tree!r}")
    return go

def fold(alg: Algebra) -> Callable:
    match alg:
        case SequenceAlgebra():
            return fold_sequence(alg)
        case TreeAlgebra():
            return fold_tree(alg)
    raise TypeError(f"no fold for {type(alg).__name__}")
