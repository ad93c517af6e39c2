#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from dataclasses import dataclass
from typing import Optional

from .names import Identifier
from .names import Origin
from .names import readIdentifier
from .names import readOrigin
from .names import readSectionName
from .token import U8_MAX
from .token import isDigit
from .token import readHex
from .token import readPaddedWith


COLUMNS_0       = "  Starting        Virtual"
COLUMNS_1       = "  address  Size   address"
SEPARATOR       = "  " + '-' * 23

# Later linkers add a file offset column to the same tables
COLUMNS_0_FILE  = "  File"
COLUMNS_1_FILE  = "  offset"
SEPARATOR_FILE  = '-' * 10


class Data:
    __slots__ = ()


@dataclass(frozen=True)
class Parent(Data):
    size: int
    align: int


@dataclass(frozen=True)
class Child(Data):
    parent: Identifier


@dataclass(frozen=True)
class Symbol:
    addr: int
    virtAddr: int
    fileAddr: Optional[int]
    data: Data
    id: Identifier
    origin: Origin


@dataclass(frozen=True)
class UnusedSymbol:
    """
    A symbol the linker dead-stripped; only its size is reported.
    """
    size: int
    id: Identifier
    origin: Origin


def title(reader):
    start = reader.save()

    is_valid, name = readSectionName(reader)
    if is_valid and reader.matchWord(" section layout"):
        return True, name

    reader.restore(start)
    return False, None


def fixedText(reader, text, optional_suffix):
    if not reader.matchWord(text):
        return False, None

    memo = reader.save()
    if not reader.matchWord(optional_suffix) or not reader.atEnd():
        reader.restore(memo)

    return True, None


def columns0(reader):
    return fixedText(reader, COLUMNS_0, COLUMNS_0_FILE)


def columns1(reader):
    return fixedText(reader, COLUMNS_1, COLUMNS_1_FILE)


def separator(reader):
    return fixedText(reader, SEPARATOR, SEPARATOR_FILE)


def hexField(reader, count):
    start = reader.save()

    is_valid, value = readHex(reader, count)
    if is_valid and reader.matchChar(' '):
        return True, value

    reader.restore(start)
    return False, None


def optionalHexField(reader, count):
    is_valid, value = hexField(reader, count)
    return value if is_valid else None


def align(reader):
    def digits(inner):
        start = inner.save()
        if inner.readWhile(isDigit, 1) is None:
            return False, None

        value = int(inner.line[start:inner.pos])
        if value > U8_MAX:
            return inner.fail()

        return True, value

    return readPaddedWith(reader, 2, digits)


def parentIdentifier(reader):
    start = reader.save()

    if reader.matchWord("(entry of "):
        is_valid, id_ = readIdentifier(reader)
        if is_valid and reader.matchChar(')'):
            return True, id_

    reader.restore(start)
    return False, None


def parent(reader):
    start = reader.save()

    is_valid, size = hexField(reader, 6)
    if is_valid:
        is_valid, virt_addr = hexField(reader, 8)
        if is_valid:
            file_addr = optionalHexField(reader, 8)

            is_valid, align_ = align(reader)
            if is_valid and reader.matchChar(' '):
                is_valid, id_ = readIdentifier(reader)
                if is_valid:
                    return True, (virt_addr, file_addr, Parent(size, align_), id_)

    reader.restore(start)
    return False, None


def child(reader):
    start = reader.save()

    if reader.matchWord("000000 "):
        is_valid, virt_addr = hexField(reader, 8)
        if is_valid:
            file_addr = optionalHexField(reader, 8)

            is_valid, id_ = readIdentifier(reader)
            if is_valid and reader.matchChar(' '):
                is_valid, parent_id = parentIdentifier(reader)
                if is_valid:
                    return True, (virt_addr, file_addr, Child(parent_id), id_)

    reader.restore(start)
    return False, None


def originSeparator(reader, allow_space=False):
    if reader.matchWord(" \t") or reader.matchChar('\t'):
        return True

    return allow_space and reader.matchChar(' ')


def symbol(reader):
    start = reader.save()

    if reader.matchChar(' ', 2):
        is_valid, addr = hexField(reader, 8)
        if is_valid:
            for alternative in (parent, child):
                is_valid, fields = alternative(reader)
                if is_valid:
                    break

            if is_valid and originSeparator(reader):
                is_valid, origin = readOrigin(reader)
                if is_valid:
                    virt_addr, file_addr, data, id_ = fields
                    return True, Symbol(addr, virt_addr, file_addr, data, id_, origin)

    reader.restore(start)
    return False, None


def unused(reader):
    start = reader.save()

    if reader.matchWord("  UNUSED   "):
        is_valid, size = hexField(reader, 6)
        if is_valid and reader.matchWord("........ "):
            reader.matchWord("........ ")
            reader.readWhile(lambda c: c == ' ')

            is_valid, id_ = readIdentifier(reader)
            if is_valid and originSeparator(reader, True):
                is_valid, origin = readOrigin(reader)
                if is_valid:
                    reader.matchChar(' ')
                    return True, UnusedSymbol(size, id_, origin)

    reader.restore(start)
    return False, None
