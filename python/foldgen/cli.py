import argparse
import itertools
import logging
import sys

from foldgen.datatypes import from_iterable, to_list
from foldgen.enumeration import EnumerationOptions, catalan, gen_size, gen_size_parallel
from foldgen.measures import to_brackets
from foldgen.reverse import reverse
from foldgen.splits import check_natural, splits

DEFAULT_LIMIT = 100

FORMATS = {
    "repr": repr,
    "brackets": to_brackets,
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foldgen",
        description="Folds over sequences and trees, and size-indexed tree enumeration",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="mode", help="Run mode")

    enum_p = subparsers.add_parser("enumerate", help="List every tree of size N")
    enum_p.add_argument("n", type=int, help="Tree size (number of branches)")
    enum_p.add_argument(
        "--limit", type=int, default=DEFAULT_LIMIT,
        help=f"Print at most this many trees, 0 for all (default: {DEFAULT_LIMIT})"
    )
    enum_p.add_argument("--count", action="store_true", help="Only print how many trees there are")
    enum_p.add_argument("--format", choices=sorted(FORMATS), default="repr", help="Tree rendering")
    enum_p.add_argument("--no-memo", action="store_true", help="Recompute smaller sizes instead of caching")
    enum_p.add_argument("--workers", type=int, default=1, help="Worker processes, one split branch each")

    splits_p = subparsers.add_parser("splits", help="List every (m, p) with m + p = N")
    splits_p.add_argument("n", type=int)

    catalan_p = subparsers.add_parser("catalan", help="Print the tree counts for sizes 0..N")
    catalan_p.add_argument("n", type=int)

    reverse_p = subparsers.add_parser("reverse", help="Reverse the given items with the fold")
    reverse_p.add_argument("items", nargs="*")

    return parser

def run_enumerate(args) -> None:
    render = FORMATS[args.format]
    if args.count:
        print(catalan(args.n))
        return
    options = EnumerationOptions(memoize=not args.no_memo)
    if args.workers > 1:
        trees = gen_size_parallel(args.n, args.workers, options)
    else:
        trees = gen_size(args.n, options)
    limit = args.limit or None
    for tree in itertools.islice(trees, limit):
        print(render(tree))

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.mode == "enumerate":
            run_enumerate(args)
        elif args.mode == "splits":
            for m, p in splits(args.n):
                print(m, p)
        elif args.mode == "catalan":
            for n in range(check_natural(args.n) + 1):
                print(n, catalan(n))
        elif args.mode == "reverse":
            print(" ".join(to_list(reverse(from_iterable(args.items)))))
        else:
            parser.print_help()
    except (TypeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
