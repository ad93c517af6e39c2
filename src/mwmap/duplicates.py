#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from dataclasses import dataclass

from .maplang.names import Identifier
from .maplang.parser import LineType
from .maplang.tree import DuplicateIdentifier
from .maplang.tree import DuplicateSpecifier
from .maplang.tree import Specifier


@dataclass(frozen=True)
class Duplicate:
    depth: int
    id: Identifier
    specifier: Specifier


def pairDuplicates(lines, firstLineNumber=1):
    """
    Joins each `>>> UNREFERENCED DUPLICATE` tree line with the specifier line
    that follows it. The parser keeps the two lines separate; this raises
    ValueError if a marker is not immediately followed by its specifier at
    the same depth, or if a specifier appears on its own.
    """

    duplicates = []
    pending = None

    for i, line in enumerate(lines, firstLineNumber):
        data = line.value.data if line.type == LineType.TreeNode else None

        if pending is not None:
            pending_line, pending_node = pending
            pending = None

            if not isinstance(data, DuplicateSpecifier) or line.value.depth != pending_node.depth:
                raise ValueError("At line %d, duplicate marker is not followed by its specifier" % pending_line)

            duplicates.append(Duplicate(pending_node.depth, pending_node.data.id, data.specifier))
            continue

        if isinstance(data, DuplicateIdentifier):
            pending = (i, line.value)

        elif isinstance(data, DuplicateSpecifier):
            raise ValueError("At line %d, duplicate specifier without a preceding marker" % i)

    if pending is not None:
        raise ValueError("At line %d, duplicate marker is not followed by its specifier" % pending[0])

    return duplicates
