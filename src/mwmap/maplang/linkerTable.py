#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from dataclasses import dataclass

from .token import readCName
from .token import readHex
from .token import readPaddedWith


TITLE       = "Linker generated symbols:"
NAME_WIDTH  = 25


@dataclass(frozen=True)
class Entry:
    name: str
    virtAddr: int


def title(reader):
    return reader.matchWord(TITLE), None


def entry(reader):
    start = reader.save()

    is_valid, name = readPaddedWith(reader, NAME_WIDTH, readCName)
    if is_valid and reader.matchChar(' '):
        is_valid, virt_addr = readHex(reader, 8)
        if is_valid:
            return True, Entry(name, virt_addr)

    reader.restore(start)
    return False, None
