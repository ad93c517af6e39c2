#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .reader import LineReader
from .token import ALNUM
from .token import U8_MAX
from .token import readCName
from .token import readCppName
from .token import readDecimal
from .token import readFilename


IDENTIFIER_CHARS    = ALNUM + "<>,_$@.-"
SECTION_NAME_CHARS  = ALNUM + "_."


class SectionName(IntEnum):
    Bss         =  0
    Ctors       =  1
    Data        =  2
    Dtors       =  3
    ExTab       =  4
    ExTabIndex  =  5
    Init        =  6
    RoData      =  7
    SBss        =  8
    SBss2       =  9
    SData       = 10
    SData2      = 11
    Text        = 12


@dataclass(frozen=True)
class UnknownSectionName:
    """
    Any other dot-prefixed section; `name` excludes the leading dot.
    """
    name: str


class DebugSectionName(IntEnum):
    Main        = 0
    Line        = 1
    Abbrev      = 2
    Aranges     = 3
    Info        = 4
    SfNames     = 5
    SrcInfo     = 6
    Str         = 7


FIXED_SECTION_NAMES = {
    "bss":      SectionName.Bss,
    "ctors":    SectionName.Ctors,
    "data":     SectionName.Data,
    "dtors":    SectionName.Dtors,
    "init":     SectionName.Init,
    "rodata":   SectionName.RoData,
    "sbss2":    SectionName.SBss2,
    "sbss":     SectionName.SBss,
    "sdata2":   SectionName.SData2,
    "sdata":    SectionName.SData,
    "text":     SectionName.Text
}

# '.debug_line' is reported as Info, not Line; only a bare '.line' is Line.
DEBUG_SECTION_SUFFIXES = {
    "abbrev":   DebugSectionName.Abbrev,
    "aranges":  DebugSectionName.Aranges,
    "info":     DebugSectionName.Info,
    "line":     DebugSectionName.Info,
    "sfnames":  DebugSectionName.SfNames,
    "srcinfo":  DebugSectionName.SrcInfo,
    "str":      DebugSectionName.Str
}


class Identifier:
    __slots__ = ()


@dataclass(frozen=True)
class Relative(Identifier):
    idx: int


@dataclass(frozen=True)
class StringBase(Identifier):
    idx: int


@dataclass(frozen=True)
class Named(Identifier):
    name: str
    instance: Optional[int] = None


@dataclass(frozen=True)
class Mangled(Identifier):
    name: str


@dataclass(frozen=True)
class Section(Identifier):
    name: object  # SectionName or UnknownSectionName
    idx: Optional[int] = None


@dataclass(frozen=True)
class DotL(Identifier):
    name: str


@dataclass(frozen=True)
class Origin:
    obj: str
    src: Optional[str] = None
    asm: bool = False


def isUnknownSection(name):
    return isinstance(name, UnknownSectionName)


def classifyExTab(s):
    if s.startswith('.'):
        s = s[1:]

    if s.startswith('_'):
        s = s[1:]

    if s.endswith('_'):
        s = s[:-1]

    if s in ("extabindex", "exidx"):
        return SectionName.ExTabIndex

    if s == "extab":
        return SectionName.ExTab

    return None


def classifySectionName(s):
    name = classifyExTab(s)
    if name is not None:
        return True, name

    if not s.startswith('.') or len(s) < 2:
        return False, None

    body = s[1:]
    if body in FIXED_SECTION_NAMES:
        return True, FIXED_SECTION_NAMES[body]

    if all(c in SECTION_NAME_CHARS for c in body):
        return True, UnknownSectionName(body)

    return False, None


def classifyDebugSectionName(s):
    if s == ".line":
        return True, DebugSectionName.Line

    if s == ".debug":
        return True, DebugSectionName.Main

    if s.startswith(".debug_"):
        suffix = s[len(".debug_"):]
        if suffix in DEBUG_SECTION_SUFFIXES:
            return True, DEBUG_SECTION_SUFFIXES[suffix]

    return False, None


def readClassified(reader, chars, classify):
    start = reader.save()

    s = reader.readWhile(lambda c: c in chars, 1)
    if s is None:
        return False, None

    is_valid, name = classify(s)
    if not is_valid:
        reader.restore(start)
        return reader.fail()

    return True, name


def readSectionName(reader):
    return readClassified(reader, SECTION_NAME_CHARS, classifySectionName)


def readDebugSectionName(reader):
    return readClassified(reader, SECTION_NAME_CHARS, classifyDebugSectionName)


### Identifier alternatives ###
# Each one sees only the identifier token and must consume all of it.

def dotL(reader):
    if not reader.matchWord(".L"):
        return False, None

    is_valid, name = readCName(reader)
    if not is_valid:
        return False, None

    return True, DotL(name)


def relative(reader):
    if not reader.matchChar('@'):
        return False, None

    is_valid, idx = readDecimal(reader)
    if not is_valid:
        return False, None

    return True, Relative(idx)


def sectionSymbol(reader):
    if not reader.matchWord(".."):
        return False, None

    rest = reader.remaining()
    dot = rest.rfind('.')
    if dot <= 0:
        return reader.fail()

    is_valid, name = classifySectionName(rest[:dot])
    if not is_valid:
        return reader.fail()

    reader.pos += dot + 1

    is_valid, idx = readDecimal(reader, U8_MAX)
    if not is_valid:
        return False, None

    return True, Section(name, idx)


def sectionOnly(reader):
    is_valid, name = classifySectionName(reader.remaining())
    if not is_valid:
        return reader.fail()

    reader.pos = len(reader.line)
    return True, Section(name)


def named(reader):
    is_valid, name = readCName(reader)
    if not is_valid:
        return False, None

    instance = None

    memo = reader.save()
    if reader.peek() == '$':
        reader.pos += 1
        is_valid, instance = readDecimal(reader)
        if not is_valid:
            reader.restore(memo)
            instance = None

    return True, Named(name, instance)


def mangled(reader):
    is_valid, name = readCppName(reader)
    if not is_valid:
        return False, None

    return True, Mangled(name)


def stringBase(reader):
    if not reader.matchWord("@stringBase"):
        return False, None

    is_valid, idx = readDecimal(reader, U8_MAX)
    if not is_valid:
        return False, None

    return True, StringBase(idx)


# Order matters: a plain C name also satisfies the mangled-name charset.
IDENTIFIER_ALTERNATIVES = (
    dotL,
    relative,
    sectionSymbol,
    sectionOnly,
    named,
    mangled,
    stringBase
)


def classifyIdentifier(s, reader=None):
    token_reader = LineReader(s)

    for alternative in IDENTIFIER_ALTERNATIVES:
        token_reader.reset()
        is_valid, value = alternative(token_reader)
        if is_valid and token_reader.atEnd():
            return True, value

        if is_valid:
            token_reader.fail()

    if reader is not None:
        reader.fail(token_reader.errorKind, reader.pos + token_reader.errorPos)

    return False, None


def readIdentifier(reader):
    start = reader.save()

    s = reader.readWhile(lambda c: c in IDENTIFIER_CHARS, 1)
    if s is None:
        return False, None

    reader.restore(start)
    is_valid, value = classifyIdentifier(s, reader)
    if not is_valid:
        return False, None

    reader.pos = start + len(s)
    return True, value


def readOrigin(reader):
    """
    <object> ' ' [<source> [' (asm)']]
    """

    start = reader.save()

    is_valid, obj = readFilename(reader)
    if not is_valid or not reader.matchChar(' '):
        reader.restore(start)
        return False, None

    memo = reader.save()
    is_valid, src = readFilename(reader)
    if not is_valid:
        reader.restore(memo)
        return True, Origin(obj)

    asm = reader.matchWord(" (asm)")
    return True, Origin(obj, src, asm)
