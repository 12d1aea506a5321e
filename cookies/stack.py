#!/usr/bin/env python3

"""
Stack Container

A last-in, first-out stack built from a chain of singly-linked nodes.  The
most recently pushed node is held as the top, and each node holds its
successor, so pushing and popping only ever touch the top of the chain.

Peeking or popping an empty stack is not an error.  Both return a pair of
(element, found), and callers are expected to check the flag.  When nothing
is found, the element is the placeholder given when the stack was created.
"""

__copyright__ = "Copyright (C) 2022 PaulioRandall"
__license__ = "GNU Affero General Public License v3.0"

from .constants import DEFAULT_DELIMITER


class Node:
    __slots__ = ("data", "next")

    def __init__(self, data, next_node=None):
        self.data = data
        self.next = next_node

    def __str__(self):
        return str(self.data)


class Stack:
    def __init__(self, empty_value=None):
        self.top = None
        self.size = 0
        self.empty_value = empty_value

    def empty(self):
        return self.size == 0

    def push(self, element):
        self.top = Node(element, self.top)
        self.size += 1

    def peek(self):
        if self.size == 0:
            return self.empty_value, False

        return self.top.data, True

    def pop(self):
        element, found = self.peek()

        if found:
            self.top = self.top.next
            self.size -= 1

        return element, found

    def join_string(self, delimiter):
        parts = []
        self._foreach_node(lambda node: parts.append(str(node)))
        return delimiter.join(parts)

    def get_items(self):
        # For debugging.  Top of the stack comes first
        items = []
        self._foreach_node(lambda node: items.append(node.data))
        return items

    def _foreach_node(self, func):
        # Visits exactly 'size' nodes, top first
        node = self.top

        for _ in range(self.size):
            func(node)
            node = node.next

    def __len__(self):
        return self.size

    def __iter__(self):
        return iter(self.get_items())

    def __str__(self):
        return self.join_string(DEFAULT_DELIMITER)

    def __repr__(self):
        return "Stack({!r})".format(self.get_items())
