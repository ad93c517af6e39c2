#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from dataclasses import dataclass

from .names import DebugSectionName
from .names import readDebugSectionName
from .names import readSectionName
from .token import readHex
from .token import readPaddedWith


TITLE       = "Memory map:"
COLUMNS_0   = ' ' * 19 + "Starting Size     File"
COLUMNS_1   = ' ' * 19 + "address" + ' ' * 11 + "Offset"

NAME_WIDTH  = 17


class Data:
    __slots__ = ()


@dataclass(frozen=True)
class Main(Data):
    name: object  # SectionName or UnknownSectionName
    virtAddr: int


@dataclass(frozen=True)
class Debug(Data):
    """
    Debug sections are not loaded, so they have no virtual address.
    """
    name: DebugSectionName


@dataclass(frozen=True)
class Entry:
    data: Data
    size: int
    fileAddr: int


def title(reader):
    return reader.matchWord(TITLE), None


def columns0(reader):
    return reader.matchWord(COLUMNS_0), None


def columns1(reader):
    return reader.matchWord(COLUMNS_1), None


def hexFields(reader, *fields):
    """
    Reads `(gap, count)` pairs: `gap` spaces followed by `count` hex digits.
    """

    start = reader.save()
    values = []

    for gap, count in fields:
        if not reader.matchChar(' ', gap):
            break

        is_valid, value = readHex(reader, count)
        if not is_valid:
            break

        values.append(value)

    else:
        return True, values

    reader.restore(start)
    return False, None


def entry(reader):
    start = reader.save()

    is_valid, name = readPaddedWith(reader, NAME_WIDTH, readSectionName)
    if is_valid:
        is_valid, values = hexFields(reader, (2, 8), (1, 8), (1, 8))
        if is_valid:
            virt_addr, size, file_addr = values
            return True, Entry(Main(name, virt_addr), size, file_addr)

    reader.restore(start)
    return False, None


def debugEntry(reader):
    start = reader.save()

    is_valid, name = readPaddedWith(reader, NAME_WIDTH, readDebugSectionName)
    if is_valid:
        is_valid, values = hexFields(reader, (11, 6), (1, 8))
        if is_valid:
            size, file_addr = values
            return True, Entry(Debug(name), size, file_addr)

    reader.restore(start)
    return False, None
