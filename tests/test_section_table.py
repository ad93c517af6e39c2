#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import unittest

from mwmap.maplang.names import Named
from mwmap.maplang.names import Origin
from mwmap.maplang.names import Section
from mwmap.maplang.names import SectionName
from mwmap.maplang.names import UnknownSectionName
from mwmap.maplang.reader import LineReader
from mwmap.maplang.sectionTable import Child
from mwmap.maplang.sectionTable import Parent
from mwmap.maplang.sectionTable import Symbol
from mwmap.maplang.sectionTable import UnusedSymbol
from mwmap.maplang.sectionTable import columns0
from mwmap.maplang.sectionTable import columns1
from mwmap.maplang.sectionTable import separator
from mwmap.maplang.sectionTable import symbol
from mwmap.maplang.sectionTable import title
from mwmap.maplang.sectionTable import unused


def readLine(parse, line):
    reader = LineReader(line)
    is_valid, value = parse(reader)
    if is_valid and not reader.atEnd():
        return False, None

    return is_valid, value


class HeaderTest(unittest.TestCase):
    def test_title(self):
        self.assertEqual(readLine(title, ".init section layout"), (True, SectionName.Init))
        self.assertEqual(readLine(title, "extabindex section layout"), (True, SectionName.ExTabIndex))
        self.assertEqual(readLine(title, ".PPC.EMB.apuinfo section layout"),
                         (True, UnknownSectionName("PPC.EMB.apuinfo")))

    def test_title_rejects_plain_word(self):
        self.assertFalse(readLine(title, "init section layout")[0])

    def test_columns(self):
        self.assertTrue(readLine(columns0, "  Starting        Virtual")[0])
        self.assertTrue(readLine(columns1, "  address  Size   address")[0])
        self.assertTrue(readLine(separator, "  " + '-' * 23)[0])

    def test_columns_with_file_offset(self):
        self.assertTrue(readLine(columns0, "  Starting        Virtual  File")[0])
        self.assertTrue(readLine(columns1, "  address  Size   address  offset")[0])
        self.assertTrue(readLine(separator, "  " + '-' * 33)[0])

    def test_columns_reject_other_text(self):
        self.assertFalse(readLine(columns0, "  Starting        Virtual  Extra")[0])
        self.assertFalse(readLine(separator, "  " + '-' * 24)[0])


class SymbolTest(unittest.TestCase):
    def assertSymbol(self, line, expected):
        self.assertEqual(readLine(symbol, line), (True, expected))

    def test_section_parent(self):
        self.assertSymbol(
            "  00000000 0001cc 80003100  1 .init \t__start.o ",
            Symbol(0, 0x80003100, None, Parent(0x1cc, 1), Section(SectionName.Init), Origin("__start.o"))
        )

    def test_named_parent(self):
        self.assertSymbol(
            "  00000000 0000f0 80003100  4 __start \t__start.o ",
            Symbol(0, 0x80003100, None, Parent(0xf0, 4), Named("__start"), Origin("__start.o"))
        )

    def test_child(self):
        self.assertSymbol(
            "  00000250 000000 80003350 __fill_mem (entry of memset) \t__mem.o ",
            Symbol(0x250, 0x80003350, None, Child(Named("memset")), Named("__fill_mem"), Origin("__mem.o"))
        )

    def test_file_address(self):
        self.assertSymbol(
            "  00031b94 00009c 800ec754 000e8954  4 OnRemoval__23AControllerRemovedStateFv\tAControllerRemovedState.o ",
            Symbol(0x31b94, 0x800ec754, 0xe8954, Parent(0x9c, 4),
                   Named("OnRemoval__23AControllerRemovedStateFv"), Origin("AControllerRemovedState.o"))
        )

    def test_two_digit_alignment(self):
        self.assertSymbol(
            "  00000000 000400 80500000 32 gBuffer \tbuffer.o ",
            Symbol(0, 0x80500000, None, Parent(0x400, 32), Named("gBuffer"), Origin("buffer.o"))
        )

    def test_alignment_overflow(self):
        self.assertFalse(readLine(symbol, "  00000000 000400 80500000 999 gBuffer \tbuffer.o ")[0])

    def test_requires_tab_before_origin(self):
        self.assertFalse(readLine(symbol, "  00000000 0000f0 80003100  4 __start __start.o ")[0])

    def test_bad_hex(self):
        self.assertFalse(readLine(symbol, "  0000025g 000000 80003350 __fill_mem (entry of memset) \t__mem.o ")[0])


class UnusedTest(unittest.TestCase):
    def test_unused(self):
        self.assertEqual(
            readLine(unused, "  UNUSED   000004 ........ ........    OSVReport os.a OSError.o "),
            (True, UnusedSymbol(4, Named("OSVReport"), Origin("os.a", "OSError.o")))
        )

    def test_unused_without_file_column(self):
        self.assertEqual(
            readLine(unused, "  UNUSED   000010 ........ __dt__Q23std9exceptionFv \texception.o "),
            (True, UnusedSymbol(0x10, Named("__dt__Q23std9exceptionFv"), Origin("exception.o")))
        )


if __name__ == "__main__":
    unittest.main()
