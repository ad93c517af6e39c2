#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .common import TOOL_VERSION
from .common import MWMAP_VERSION, MWMAP_VERSION_STR
from .common import MWMAP_VERSION_MAX, MWMAP_VERSION_MAX_STR
from .common import MWMAP_VERSION_MIN, MWMAP_VERSION_MIN_STR

from .duplicates import pairDuplicates
from .mapfile import MapFile
from .maplang import Line, LineType, MapParseError, parseLine
from .progress import computeProgress
from .project import Project


__all__ = [
    "TOOL_VERSION",
    "MWMAP_VERSION", "MWMAP_VERSION_STR",
    "MWMAP_VERSION_MAX", "MWMAP_VERSION_MAX_STR",
    "MWMAP_VERSION_MIN", "MWMAP_VERSION_MIN_STR",
    "MapFile",
    "Line", "LineType", "MapParseError", "parseLine",
    "computeProgress",
    "pairDuplicates",
    "Project"
]
