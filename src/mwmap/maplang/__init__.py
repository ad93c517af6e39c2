#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Common:
#
# hex(n)            exactly n HEX_DIGIT
#
# padded(n)         { ' ' }* content        (n characters in total)
#
# c_name            (ALPHA | '_') { ALPHA | DIGIT | '_' }*
#
# cpp_name          (ALPHA | '_' | '@') { ALPHA | DIGIT | '_' | '@' | '$' | '<' | '>' | ',' | '-' }*
#
# filename          { FILENAME_CHAR - '.' }+ '.' { FILENAME_CHAR - WHITESPACE }+
#
# origin            filename ' ' [ filename [ ' (asm)' ] ]
#
# section_name      [ '.' ] [ '_' ] ('extabindex' | 'exidx') [ '_' ]
#                 | [ '.' ] [ '_' ] 'extab' [ '_' ]
#                 | '.' ('bss' | 'ctors' | 'data' | 'dtors' | 'init' | 'rodata'
#                        | 'sbss2' | 'sbss' | 'sdata2' | 'sdata' | 'text')
#                 | '.' { ALPHA | DIGIT | '_' | '.' }+
#
# debug_name        '.line' | '.debug' [ '_' ('abbrev' | 'aranges' | 'info' | 'line'
#                                             | 'sfnames' | 'srcinfo' | 'str') ]
#
# identifier        '.L' c_name
#                 | '@' DIGIT+
#                 | '..' section_name '.' DIGIT+
#                 | section_name
#                 | c_name [ '$' DIGIT+ ]
#                 | cpp_name
#                 | '@stringBase' DIGIT+


# Tree:
#
# title             'Link map of ' c_name
#
# node              { ' ' }* DIGIT+ '] ' (linker | object | duplicate)
#
# linker            c_name ' found as linker generated symbol'
#
# object            identifier ' ' specifier
#
# duplicate         '>>> ' ('UNREFERENCED DUPLICATE ' identifier | specifier)
#
# specifier         '(' type ',' scope ') found in ' origin


# Section table:
#
# title             section_name ' section layout'
#
# symbol            '  ' hex(8) ' ' (parent | child) (' \t' | '\t') origin
#
# parent            hex(6) ' ' hex(8) ' ' [ hex(8) ' ' ] padded(2) ' ' identifier
#
# child             '000000 ' hex(8) ' ' [ hex(8) ' ' ] identifier ' (entry of ' identifier ')'
#
# unused            '  UNUSED   ' hex(6) ' ........ ' [ '........ ' ] { ' ' }*
#                   identifier (' \t' | '\t' | ' ') origin [ ' ' ]


# Memory table:
#
# entry             padded(17) '  ' hex(8) ' ' hex(8) ' ' hex(8)
#
# debug_entry       padded(17) '           ' hex(6) ' ' hex(8)


# Linker table:
#
# entry             padded(25) ' ' hex(8)


from . import linkerTable
from . import memoryTable
from . import names
from . import parser
from . import reader
from . import sectionTable
from . import token
from . import tree

from .parser import Line
from .parser import LineType
from .parser import classifyLine
from .parser import parseLine
from .reader import ErrorKind
from .reader import MapParseError


__all__ = [
    "linkerTable",
    "memoryTable",
    "names",
    "parser",
    "reader",
    "sectionTable",
    "token",
    "tree",
    "Line",
    "LineType",
    "classifyLine",
    "parseLine",
    "ErrorKind",
    "MapParseError"
]
