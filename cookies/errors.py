#!/usr/bin/env python3

"""
Error Wrapping

Attaches context to an existing error without losing it.  The new error reads
as the supplied message, and the original is kept as its cause so it can be
inspected later, either directly or by unwrapping the whole chain.
"""

__copyright__ = "Copyright (C) 2022 PaulioRandall"
__license__ = "GNU Affero General Public License v3.0"


class WrappedError(Exception):
    def __init__(self, message, cause):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def __str__(self):
        return self.message

    def full_message(self):
        # Each layer of context, outermost first, down to the original error
        if isinstance(self.cause, WrappedError):
            return "{}: {}".format(self.message, self.cause.full_message())

        return "{}: {}".format(self.message, self.cause)


def wrap(error, message, *args):
    # Nothing to wrap, so there is no error to report
    if error is None:
        return None

    if args:
        message = format_message(message, args)

    return WrappedError(message, error)


def cause(error):
    while isinstance(error, WrappedError):
        error = error.cause

    return error


def format_message(message, args):
    # Never fails.  Arguments that don't fit the message are tacked on the end
    try:
        return message % args
    except (TypeError, ValueError, KeyError):
        return "{}%!(EXTRA {})".format(message, ", ".join(map(repr, args)))
