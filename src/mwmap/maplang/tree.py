#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from dataclasses import dataclass
from enum import IntEnum

from .names import Identifier
from .names import Origin
from .names import readIdentifier
from .names import readOrigin
from .token import isDigit
from .token import readCName
from .token import readDecimal


class SymbolType(IntEnum):
    NoType      = 0
    Section     = 1
    Object      = 2
    Function    = 3


class Scope(IntEnum):
    Global      = 0
    Local       = 1
    Weak        = 2


SYMBOL_TYPES = (
    ("section", SymbolType.Section),
    ("object",  SymbolType.Object),
    ("func",    SymbolType.Function),
    ("notype",  SymbolType.NoType)
)

SCOPES = (
    ("global",  Scope.Global),
    ("local",   Scope.Local),
    ("weak",    Scope.Weak)
)


@dataclass(frozen=True)
class Specifier:
    type: SymbolType
    scope: Scope
    origin: Origin


class Data:
    __slots__ = ()


@dataclass(frozen=True)
class Linker(Data):
    name: str


@dataclass(frozen=True)
class Object(Data):
    id: Identifier
    specifier: Specifier


@dataclass(frozen=True)
class DuplicateIdentifier(Data):
    """
    First line of an unreferenced duplicate. The matching DuplicateSpecifier
    is on the next physical line and is parsed separately.
    """
    id: Identifier


@dataclass(frozen=True)
class DuplicateSpecifier(Data):
    specifier: Specifier


@dataclass(frozen=True)
class Node:
    depth: int
    data: Data


def readKeyword(reader, keywords):
    for keyword, value in keywords:
        if reader.matchWord(keyword):
            return True, value

    return False, None


def title(reader):
    if not reader.matchWord("Link map of "):
        return False, None

    return readCName(reader)


def depth(reader):
    start = reader.save()

    reader.readWhile(lambda c: c == ' ')
    if not reader.peek() or not isDigit(reader.peek()):
        reader.restore(start)
        return reader.fail()

    is_valid, value = readDecimal(reader)
    if not is_valid or not reader.matchWord("] "):
        reader.restore(start)
        return False, None

    return True, value


def specifier(reader):
    start = reader.save()

    if reader.matchChar('('):
        is_valid, type_ = readKeyword(reader, SYMBOL_TYPES)
        if is_valid and reader.matchChar(','):
            is_valid, scope = readKeyword(reader, SCOPES)
            if is_valid and reader.matchWord(") found in "):
                is_valid, origin = readOrigin(reader)
                if is_valid:
                    return True, Specifier(type_, scope, origin)

    reader.restore(start)
    return False, None


def linkerData(reader):
    start = reader.save()

    is_valid, name = readCName(reader)
    if is_valid and reader.matchWord(" found as linker generated symbol"):
        return True, Linker(name)

    reader.restore(start)
    return False, None


def objectData(reader):
    start = reader.save()

    is_valid, id_ = readIdentifier(reader)
    if is_valid and reader.matchChar(' '):
        is_valid, spec = specifier(reader)
        if is_valid:
            return True, Object(id_, spec)

    reader.restore(start)
    return False, None


def duplicateData(reader):
    start = reader.save()

    if reader.matchWord(">>> "):
        if reader.matchWord("UNREFERENCED DUPLICATE "):
            is_valid, id_ = readIdentifier(reader)
            if is_valid:
                return True, DuplicateIdentifier(id_)

        else:
            is_valid, spec = specifier(reader)
            if is_valid:
                return True, DuplicateSpecifier(spec)

    reader.restore(start)
    return False, None


def node(reader):
    is_valid, depth_ = depth(reader)
    if not is_valid:
        return False, None

    for alternative in (linkerData, objectData, duplicateData):
        is_valid, data = alternative(reader)
        if is_valid:
            return True, Node(depth_, data)

    return False, None
