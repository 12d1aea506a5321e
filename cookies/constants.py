#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 PaulioRandall"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Cookies Playground"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 PaulioRandall, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Printed before the stack is exercised
PLAYGROUND_RHYME = (
    "All work and no play makes Jack a dull boy,",
    "All play and no work makes Jack a mere toy."
)

# Stack text output
DEFAULT_DELIMITER = ", "      # Used when a stack is printed directly
PLAYGROUND_DELIMITER = "\n"  # One thing per line in the playground

# Pushed in this order, so "Thing 3" ends up on top
DEFAULT_THINGS = ["Thing 1", "Thing 2", "Thing 3"]
