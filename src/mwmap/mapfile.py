#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
from concurrent.futures import ProcessPoolExecutor
from concurrent.futures import ThreadPoolExecutor
import mmap
import os


# Local
from .maplang.parser import classifyLine
from .maplang.reader import MapParseError


ON_ERROR_POLICIES = ("abort", "skip")

EXECUTORS = {
    "process":  ProcessPoolExecutor,
    "thread":   ThreadPoolExecutor
}


def splitLines(text):
    lines = text.split('\n')
    if lines and not lines[-1]:
        lines.pop()

    return lines


class MapFile:
    def __init__(self, text, path=None):
        self.path = path
        self.text = text
        self.lines = []
        self.errors = []

    @staticmethod
    def fromPath(file_path, encoding="utf-8", useMmap=True, error=print):
        if not os.path.isfile(file_path):
            error("File does not exist: %r" % file_path)
            return None

        with open(file_path, "rb") as inf:
            try:
                if useMmap and os.path.getsize(file_path):
                    # Decoded straight from the mapping, without an intermediate bytes copy
                    with mmap.mmap(inf.fileno(), 0, access=mmap.ACCESS_READ) as buf:
                        text = str(buf, encoding)

                else:
                    text = inf.read().decode(encoding)

            except UnicodeDecodeError as e:
                error("Failed to decode %r as %s: %s" % (file_path, encoding, e))
                return None
            except LookupError:
                error("Unknown encoding: %r" % encoding)
                return None

        return MapFile(text, file_path)

    def rawLines(self):
        return splitLines(self.text)

    def classify(self, onError="abort", workers=1, parallel="process", error=print):
        """
        Classifies every line, in order.

        With `onError` set to "abort", the first bad line is reported through
        `error` and None is returned. With "skip", bad lines are left out of
        the result and collected in `self.errors`.
        """

        assert onError in ON_ERROR_POLICIES
        assert parallel in EXECUTORS

        raw_lines = self.rawLines()
        line_numbers = range(1, len(raw_lines) + 1)

        if workers > 1 and len(raw_lines) > 1:
            chunksize = max(1, len(raw_lines) // (workers * 4))
            with EXECUTORS[parallel](max_workers=workers) as executor:
                results = list(executor.map(classifyLine, raw_lines, line_numbers, chunksize=chunksize))

        else:
            results = list(map(classifyLine, raw_lines, line_numbers))

        lines = []
        errors = []

        for result in results:
            if isinstance(result, MapParseError):
                if onError == "abort":
                    name = self.path if self.path is not None else "<input>"
                    error("In %r, %s" % (name, result))
                    return None

                errors.append(result)
                continue

            lines.append(result)

        self.lines = lines
        self.errors = errors

        return lines
