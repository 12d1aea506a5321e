#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to run the playground, replacing args with a dictionary
of options.  This is normally done from the Terminal via playground.py.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 PaulioRandall"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, PLAYGROUND_RHYME, PLAYGROUND_DELIMITER, DEFAULT_THINGS
from .stack import Stack


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    things = DEFAULT_THINGS if args["things"] is None else args["things"]
    delimiter = PLAYGROUND_DELIMITER if args["delimiter"] is None else args["delimiter"]

    if not things:
        raise StartupError("At least one thing is needed to play with.")

    # Write play code here...

    print()
    print("\n".join(PLAYGROUND_RHYME))
    print()

    stack = Stack()

    for thing in things:
        stack.push(thing)

    print(stack.join_string(delimiter))
    print()

    thing, exists = stack.pop()
    print(thing, "exists:", exists)
    print()

    print(stack.join_string(delimiter))
    print()

    # Empty whatever is left
    while exists:
        _, exists = stack.pop()

    print("Empty:", stack.empty())
    return stack
