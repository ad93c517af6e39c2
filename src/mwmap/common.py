#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import os
import pathlib
import re


TOOL_VERSION    = "0"

MWMAP_VERSION_MIN       = (1, 0)
MWMAP_VERSION_MIN_STR   = '.'.join(map(str, MWMAP_VERSION_MIN))

MWMAP_VERSION_MAX       = (1, 0)
MWMAP_VERSION_MAX_STR   = '.'.join(map(str, MWMAP_VERSION_MAX))

MWMAP_VERSION       = MWMAP_VERSION_MAX
MWMAP_VERSION_STR   = MWMAP_VERSION_MAX_STR


FILENAME_SEARCH_RE_OBJ = re.compile(r'[^A-Za-z0-9_\-.,+\(\)\ ]')


def IsValidFilename(s):
    return bool(s and
                isinstance(s, str) and
                not FILENAME_SEARCH_RE_OBJ.search(s) and
                not s.startswith('-') and
                not s.endswith('.'))


def NormalizePath(path):
    return pathlib.Path(os.path.normcase(os.path.normpath(path))).resolve()
