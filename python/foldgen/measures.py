import operator

from foldgen.fold_combinators import SequenceAlgebra, TreeAlgebra, fold_sequence, fold_tree

# Number of branch points; the enumeration index.
size = fold_tree(TreeAlgebra(0, lambda l, r: 1 + l + r))

height = fold_tree(TreeAlgebra(0, lambda l, r: 1 + max(l, r)))

leaves = fold_tree(TreeAlgebra(1, operator.add))

length = fold_sequence(SequenceAlgebra(0, lambda _, n: 1 + n))

# Balanced-parenthesis word of a tree, 2 * size(t) characters long.
to_brackets = fold_tree(TreeAlgebra("", lambda l, r: f"({l}){r}"))
