"""Runs mscript programs from files, from the command line or interactively. Also uses the error handling context
manager. Called from the mscript console script and `python -m mscript`.
"""

import argparse
import logging
import sys

from mscript.lang.error import ErrorHandler
from mscript.lang.ir import build
from mscript.lang.session import Session, run_source
from mscript.lang.shell import Shell


DEMO = "x=4 * 2;print(x);"

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def make_parser():
    parser = argparse.ArgumentParser(prog="mscript", description="Interpreter for the mscript language.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("-c", "--command", help="program text to run instead of a file")
    parser.add_argument("--demo", action="store_true", help=f"run the demo program {DEMO!r}")
    parser.add_argument("--ir", action="store_true", help="print the program's IR instead of running it")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more (repeat for debug output)")
    return parser


def main(argv=None):
    """Runs mscript interpreter. Called from mscript executable script."""
    with ErrorHandler() as error_handler:
        args = make_parser().parse_args(argv)
        logging.basicConfig(level=LOG_LEVELS[min(args.verbose, len(LOG_LEVELS) - 1)],
                            format="%(levelname)s %(name)s: %(message)s")

        if args.command is not None or args.demo:
            source = args.command if args.command is not None else DEMO
            if args.ir:
                for statement in build(source):
                    print(statement)
            else:
                run_source(source)

        elif args.file is not None:
            sess = Session(error_handler, args.file)
            if args.ir:
                for statement in sess.to_exec:
                    print(statement)
            else:
                sess.run()

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
