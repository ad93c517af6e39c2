#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
from dataclasses import dataclass
import json


# Local
from .maplang.names import Section
from .maplang.names import SectionName
from .maplang.names import isUnknownSection
from .maplang.memoryTable import Main
from .maplang.parser import LineType
from .maplang.sectionTable import Parent


DEFAULT_CODE_SECTIONS = frozenset((SectionName.Init, SectionName.Text))


@dataclass
class Progress:
    code: int = 0
    codeTotal: int = 0
    data: int = 0
    dataTotal: int = 0

    def toObj(self):
        return {
            "code":         self.code,
            "code/total":   self.codeTotal,
            "data":         self.data,
            "data/total":   self.dataTotal
        }

    def toJson(self, name="dol"):
        return json.dumps({name: self.toObj()})


def isCodeSection(name, code_sections):
    """
    True for code, False for data, None for sections that count as neither.
    """

    if name in code_sections:
        return True

    if isUnknownSection(name):
        return None

    return False


def computeProgress(lines, codeSections=DEFAULT_CODE_SECTIONS):
    """
    Sums code and data sizes over a classified map.

    The totals come from the memory table; the matched sizes come from the
    parent symbols listed under each section layout title. Rows that name a
    section itself are skipped so that they are not counted twice.
    """

    progress = Progress()
    section = None

    for line in lines:
        line_type = line.type

        if line_type == LineType.MemoryEntry:
            data = line.value.data
            if not isinstance(data, Main):
                continue

            is_code = isCodeSection(data.name, codeSections)
            if is_code is True:
                progress.codeTotal += line.value.size

            elif is_code is False:
                progress.dataTotal += line.value.size

        elif line_type == LineType.Empty:
            section = None

        elif line_type == LineType.SectionTitle:
            section = line.value

        elif line_type == LineType.SectionSymbol:
            symbol = line.value
            if section is None or isinstance(symbol.id, Section) or not isinstance(symbol.data, Parent):
                continue

            is_code = isCodeSection(section, codeSections)
            if is_code is True:
                progress.code += symbol.data.size

            elif is_code is False:
                progress.data += symbol.data.size

    return progress
