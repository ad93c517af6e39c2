#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from enum import IntEnum


class ErrorKind(IntEnum):
    NoAlternative   = 0
    Numeric         = 1
    Padding         = 2

    def describe(self):
        return {
            ErrorKind.NoAlternative:    "no alternative matched",
            ErrorKind.Numeric:          "malformed or out of range number",
            ErrorKind.Padding:          "padding length is too large"
        }[self]


class MapParseError(ValueError):
    def __init__(self, text, column, kind=ErrorKind.NoAlternative, lineNumber=None):
        self.text = text
        self.column = column
        self.kind = kind
        self.lineNumber = lineNumber

        if lineNumber is None:
            msg = "At column %d: %s: %r" % (column + 1, kind.describe(), text)
        else:
            msg = "At line %d, column %d: %s: %r" % (lineNumber, column + 1, kind.describe(), text)

        super().__init__(msg)

    def __reduce__(self):
        return self.__class__, (self.text, self.column, self.kind, self.lineNumber)

    def withLineNumber(self, lineNumber):
        return MapParseError(self.text, self.column, self.kind, lineNumber)


class LineReader:
    """
    Cursor over a single map file line.

    Grammar functions advance `pos` as they consume characters and return
    `(is_valid, value)`. A failing function records where and why through `fail()`
    and leaves `pos` wherever it stopped; callers that try alternatives take a memo
    with `save()` and rewind with `restore()`.
    """

    def __init__(self, line=''):
        self.initialize(line)

    def initialize(self, line):
        self.line = line
        self.pos = 0

        self.errorPos = 0
        self.errorKind = ErrorKind.NoAlternative

    def reset(self):
        self.pos = 0

    def save(self):
        return self.pos

    def restore(self, memo):
        self.pos = memo

    def atEnd(self):
        return self.pos >= len(self.line)

    def remaining(self):
        return self.line[self.pos:]

    def peek(self, n=1):
        return self.line[self.pos:self.pos + n]

    def fail(self, kind=ErrorKind.NoAlternative, pos=None):
        if pos is None:
            pos = self.pos

        if pos > self.errorPos or (pos == self.errorPos and kind > self.errorKind):
            self.errorPos = pos
            self.errorKind = kind

        return False, None

    def matchWord(self, word):
        if self.line.startswith(word, self.pos):
            self.pos += len(word)
            return True

        self.fail()
        return False

    def matchChar(self, c, count=1):
        return self.matchWord(c * count)

    def readWhile(self, pred, min_count=0, max_count=None):
        line = self.line
        line_len = len(line)

        end = self.pos
        limit = line_len if max_count is None else min(line_len, self.pos + max_count)
        while end < limit and pred(line[end]):
            end += 1

        if end - self.pos < min_count:
            self.fail(pos=end)
            return None

        value = line[self.pos:end]
        self.pos = end
        return value

    def take(self, count):
        if self.pos + count > len(self.line):
            self.fail(pos=len(self.line))
            return None

        value = self.line[self.pos:self.pos + count]
        self.pos += count
        return value

    def error(self, lineNumber=None):
        return MapParseError(self.line, self.errorPos, self.errorKind, lineNumber)
