from typing import TypeVar

from foldgen.datatypes import EMPTY, Prepend, Sequence, from_iterable, to_list
from foldgen.fold_combinators import SequenceAlgebra, fold, fold_sequence

T = TypeVar('T')

def append_to_end(seq: Sequence[T], x: T) -> Sequence[T]:
    return fold_sequence(SequenceAlgebra(Prepend(x, EMPTY), Prepend))(seq)

# reverse(Prepend(x, xs)) = append_to_end(reverse(xs), x); quadratic.
REVERSE = SequenceAlgebra(EMPTY, lambda x, reversed_tail: append_to_end(reversed_tail, x))

reverse = fold(REVERSE)

def reverse_acc(seq: Sequence[T]) -> Sequence[T]:
    """Linear reverse, consing each element onto an accumulator."""
    acc: Sequence[T] = EMPTY
    for item in to_list(seq):
        acc = Prepend(item, acc)
    return acc

def reverse_builtin(seq: Sequence[T]) -> Sequence[T]:
    return from_iterable(reversed(to_list(seq)))
