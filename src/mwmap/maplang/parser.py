#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from dataclasses import dataclass
from enum import IntEnum

from . import linkerTable
from . import memoryTable
from . import sectionTable
from . import tree
from .reader import LineReader
from .reader import MapParseError


class LineType(IntEnum):
    Empty               =  0
    TreeTitle           =  1
    TreeNode            =  2
    SectionTitle        =  3
    SectionColumns0     =  4
    SectionColumns1     =  5
    SectionSeparator    =  6
    SectionSymbol       =  7
    SectionUnused       =  8
    MemoryTitle         =  9
    MemoryColumns0      = 10
    MemoryColumns1      = 11
    MemoryEntry         = 12
    LinkerTitle         = 13
    LinkerEntry         = 14


@dataclass(frozen=True)
class Line:
    type: LineType
    value: object = None


def empty(reader):
    return reader.atEnd(), None


# Priority order. Several tables share prefixes, so the first alternative
# that consumes the whole line wins.
LINE_ALTERNATIVES = (
    (LineType.Empty,            empty),
    (LineType.TreeTitle,        tree.title),
    (LineType.TreeNode,         tree.node),
    (LineType.SectionTitle,     sectionTable.title),
    (LineType.SectionColumns0,  sectionTable.columns0),
    (LineType.SectionColumns1,  sectionTable.columns1),
    (LineType.SectionSeparator, sectionTable.separator),
    (LineType.SectionSymbol,    sectionTable.symbol),
    (LineType.SectionUnused,    sectionTable.unused),
    (LineType.MemoryTitle,      memoryTable.title),
    (LineType.MemoryColumns0,   memoryTable.columns0),
    (LineType.MemoryColumns1,   memoryTable.columns1),
    (LineType.MemoryEntry,      memoryTable.entry),
    (LineType.MemoryEntry,      memoryTable.debugEntry),
    (LineType.LinkerTitle,      linkerTable.title),
    (LineType.LinkerEntry,      linkerTable.entry)
)


def stripLineTerminator(text):
    if text.endswith('\n'):
        text = text[:-1]

    if text.endswith('\r'):
        text = text[:-1]

    return text


def parseLine(text, lineNumber=None):
    """
    Classifies one physical line of a map file.

    Returns a `Line`; raises `MapParseError` if no alternative consumes the
    whole line. The error points at the furthest column any alternative
    reached.
    """

    reader = LineReader(stripLineTerminator(text))

    for line_type, alternative in LINE_ALTERNATIVES:
        reader.reset()

        is_valid, value = alternative(reader)
        if not is_valid:
            continue

        if reader.atEnd():
            return Line(line_type, value)

        reader.fail()

    raise reader.error(lineNumber)


def classifyLine(text, lineNumber=None):
    """
    Same as `parseLine`, but the error is returned instead of raised.
    """

    try:
        return parseLine(text, lineNumber)

    except MapParseError as e:
        return e
