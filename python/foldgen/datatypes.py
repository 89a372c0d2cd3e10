from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterable, List, TypeVar, Union

T = TypeVar('T')

# Finite Sequences
@dataclass(frozen=True, repr=False)
class Empty:
    def __repr__(self):
        return "Empty"

@dataclass(frozen=True, repr=False)
class Prepend(Generic[T]):
    head: T
    tail: Sequence[T]

    def __repr__(self):
        return f"Prepend({self.head!r}, {self.tail!r})"

Sequence = Union[Empty, Prepend[T]]

EMPTY = Empty()

# Finite Binary Trees
@dataclass(frozen=True, repr=False)
class Leaf:
    def __repr__(self):
        return "Leaf"

@dataclass(frozen=True, repr=False)
class Branch:
    left: Tree
    right: Tree

    def __repr__(self):
        return f"Branch({self.left!r}, {self.right!r})"

Tree = Union[Leaf, Branch]

LEAF = Leaf()

def is_sequence(value: object) -> bool:
    return isinstance(value, (Empty, Prepend))

def is_tree(value: object) -> bool:
    return isinstance(value, (Leaf, Branch))

def from_iterable(items: Iterable[T]) -> Sequence[T]:
    seq: Sequence[T] = EMPTY
    for item in reversed(list(items)):
        seq = Prepend(item, seq)
    return seq

# Iterative, so long sequences stay clear of the recursion limit.
def to_list(seq: Sequence[T]) -> List[T]:
    items = []
    while True:
        match seq:
            case Empty():
                return items
            case Prepend(head, tail):
                items.append(head)
                seq = tail
            case _:
                raise TypeError(f"not a sequence: {seq!r}")
