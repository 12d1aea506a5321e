#!/usr/bin/env python3

"""
Directory Stack

Mimics the shell's 'pushd' and 'popd' commands.  Each push records the current
working directory before changing to a new one, and each pop changes back to
the most recently recorded directory.

The working directory belongs to the whole process, so only one directory
stack should be changing it at any time.  This is not thread-safe.

The pushed() context manager always pops on exit.  If that pop fails, because
the recorded directory has gone or the block already popped it, the error
from the pop replaces any exception raised inside the block.
"""

__copyright__ = "Copyright (C) 2022 PaulioRandall"
__license__ = "GNU Affero General Public License v3.0"

import os
from contextlib import contextmanager


class DirStackError(IndexError):
    pass


class DirStack:
    def __init__(self):
        self.dirs = []

    def pushd(self, path):
        # Only record the old directory once the change has worked
        curr_dir = os.getcwd()
        os.chdir(path)
        self.dirs.append(curr_dir)

    def popd(self):
        # Callers must balance their pushes and pops
        if not self.dirs:
            raise DirStackError("Directory stack underflow")

        os.chdir(self.dirs[-1])
        self.dirs.pop()

    @contextmanager
    def pushed(self, path):
        self.pushd(path)

        try:
            yield
        finally:
            self.popd()

    def empty(self):
        return not self.dirs

    def get_items(self):
        # Oldest directory first
        return list(self.dirs)

    def __len__(self):
        return len(self.dirs)
