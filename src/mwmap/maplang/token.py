#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .reader import ErrorKind
from .reader import LineReader


DIGITS          = "0123456789"
HEX_DIGITS      = "0123456789ABCDEFabcdef"
ALPHA           = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ALNUM           = ALPHA + DIGITS

C_NAME_START    = ALPHA + '_'
C_NAME_CHARS    = ALNUM + '_'
CPP_NAME_START  = ALPHA + "_@"
CPP_NAME_CHARS  = ALNUM + "_@$<>,-"

FILENAME_RESERVED   = "<>:\"/\\|?*"
ASCII_WHITESPACE    = " \t\n\x0c\r"

U8_MAX  = 0xFF
U32_MAX = 0xFFFFFFFF


def isDigit(c):
    return c in DIGITS


def isHexDigit(c):
    return c in HEX_DIGITS


def isFilenameChar(c):
    return c >= ' ' and c not in FILENAME_RESERVED


def readHex(reader, count):
    """
    Exactly `count` hexadecimal digits, as an unsigned 32-bit value.
    """

    start = reader.save()
    digits = reader.readWhile(isHexDigit, 0, count)
    if len(digits) != count:
        reader.fail(ErrorKind.Numeric)
        reader.restore(start)
        return False, None

    value = int(digits, 16)
    if value > U32_MAX:
        reader.restore(start)
        return reader.fail(ErrorKind.Numeric, start)

    return True, value


def readDecimal(reader, limit=U32_MAX):
    start = reader.save()
    digits = reader.readWhile(isDigit, 1)
    if digits is None:
        return reader.fail(ErrorKind.Numeric)

    value = int(digits)
    if value > limit:
        reader.restore(start)
        return reader.fail(ErrorKind.Numeric, start)

    return True, value


def readPadded(reader, width):
    """
    Right-justified fixed-width column: leading spaces followed by the
    remaining `width - len(padding)` characters, which are returned.
    """

    start = reader.save()
    pad = reader.readWhile(lambda c: c == ' ')
    if len(pad) > width:
        reader.fail(ErrorKind.Padding)
        reader.restore(start)
        return False, None

    content = reader.take(width - len(pad))
    if content is None:
        reader.restore(start)
        return False, None

    return True, content


def readPaddedWith(reader, width, inner):
    """
    Applies `inner` to the content of a padded column; `inner` must consume
    the whole content.
    """

    start = reader.save()

    is_valid, content = readPadded(reader, width)
    if not is_valid:
        return False, None

    column = start + width - len(content)
    inner_reader = LineReader(content)

    is_valid, value = inner(inner_reader)
    if is_valid and not inner_reader.atEnd():
        is_valid = False
        inner_reader.fail()

    if not is_valid:
        reader.fail(inner_reader.errorKind, column + inner_reader.errorPos)
        reader.restore(start)
        return False, None

    return True, value


def readCName(reader):
    start = reader.save()
    if reader.readWhile(lambda c: c in C_NAME_START, 1, 1) is None:
        return False, None

    reader.readWhile(lambda c: c in C_NAME_CHARS)
    return True, reader.line[start:reader.pos]


def readCppName(reader):
    start = reader.save()
    if reader.readWhile(lambda c: c in CPP_NAME_START, 1, 1) is None:
        return False, None

    reader.readWhile(lambda c: c in CPP_NAME_CHARS)
    return True, reader.line[start:reader.pos]


def readFilename(reader):
    """
    <stem> '.' <extension>, where the stem stops at the first '.' and the
    extension (which may contain further dots) stops at whitespace.
    """

    start = reader.save()

    if reader.readWhile(lambda c: isFilenameChar(c) and c != '.', 1) is None \
            or not reader.matchChar('.') \
            or reader.readWhile(lambda c: isFilenameChar(c) and c not in ASCII_WHITESPACE, 1) is None:
        reader.restore(start)
        return False, None

    return True, reader.line[start:reader.pos]


def readAll(text, parse):
    """
    Runs `parse` over `text`, requiring that it consumes all of it.
    Raises MapParseError otherwise.
    """

    reader = LineReader(text)

    is_valid, value = parse(reader)
    if is_valid and not reader.atEnd():
        is_valid = False
        reader.fail()

    if not is_valid:
        raise reader.error()

    return value


def parseHex(text, count):
    return readAll(text, lambda reader: readHex(reader, count))


def parsePadded(text, width):
    return readAll(text, lambda reader: readPadded(reader, width))
