"""Command line entry point: ``apathy <relation> SUBJECT [OTHER]``.

Relation commands exit 0 when the relation holds and 1 when it does not, so
they compose in shell conditionals the way ``test`` does::

    apathy descendant build/out . && echo inside
    apathy classify ../foo --json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Callable, Dict, List, Optional

from apathy import __version__
from apathy.logging import create_logger
from apathy.relations import classify, is_ancestor, is_descendant, is_equal, is_sibling

PREDICATES: Dict[str, Callable[..., bool]] = {
    "descendant": is_descendant,
    "ancestor": is_ancestor,
    "sibling": is_sibling,
    "equal": is_equal,
}


def _add_path_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("subject", help="path to check")
    p.add_argument("other", nargs="?", default=None, help="path to compare against (default: base)")
    p.add_argument("--base", default=None, help="directory relative paths resolve against (default: cwd)")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="apathy", description="Classify how two paths relate.")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = ap.add_subparsers(dest="command", required=True)

    for name in PREDICATES:
        p = sub.add_parser(name, help=f"exit 0 if SUBJECT is {name} of/to OTHER")
        _add_path_args(p)
        p.add_argument("-q", "--quiet", action="store_true", help="print nothing, use exit code only")

    p = sub.add_parser("classify", help="print every relation that holds")
    _add_path_args(p)
    p.add_argument("--json", action="store_true", help="emit a JSON object")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log = create_logger("cli")
    try:
        if args.command == "classify":
            report = classify(args.subject, args.other, base=args.base)
            log.info("classify", subject=args.subject, other=args.other, result=report.to_dict())
            if args.json:
                print(json.dumps(report.to_dict(), sort_keys=True))
            else:
                names = sorted(r.value for r in report.relations)
                print(" ".join(names) if names else "unrelated")
            return 0

        result = PREDICATES[args.command](args.subject, args.other, base=args.base)
        log.info(args.command, subject=args.subject, other=args.other, result=result)
        if not args.quiet:
            print("true" if result else "false")
        return 0 if result else 1
    finally:
        log.close()


if __name__ == "__main__":
    sys.exit(main())
