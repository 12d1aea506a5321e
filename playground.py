#!/usr/bin/env python3

__author__ = "PaulioRandall"
__copyright__ = "Copyright (C) 2022 PaulioRandall"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

import codecs
from argparse import ArgumentParser
from cookies import main


def decode_delimiter(value):
    # Lets '\n', '\t', etc. be typed on the command line
    return codecs.decode(value, "unicode_escape")


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument(
        "things", nargs="*",
        help="things to push onto the stack, in order (default: Thing 1, Thing 2, Thing 3)"
    )
    parser.add_argument(
        "-d", "--delimiter", type=decode_delimiter,
        help="set the text placed between things when the stack is printed.  Escapes such as '\\n' are decoded "
             "(default is a newline)"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


if __name__ == "__main__":
    args = vars(parse_args())
    # An empty list means nothing was given, so fall back to the defaults
    args["things"] = args["things"] or None
    main(args)
