#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import unittest

from mwmap.maplang.names import DebugSectionName
from mwmap.maplang.names import DotL
from mwmap.maplang.names import Mangled
from mwmap.maplang.names import Named
from mwmap.maplang.names import Origin
from mwmap.maplang.names import Relative
from mwmap.maplang.names import Section
from mwmap.maplang.names import SectionName
from mwmap.maplang.names import UnknownSectionName
from mwmap.maplang.names import classifyDebugSectionName
from mwmap.maplang.names import classifyIdentifier
from mwmap.maplang.names import classifySectionName
from mwmap.maplang.names import readIdentifier
from mwmap.maplang.names import readOrigin
from mwmap.maplang.reader import LineReader


class SectionNameTest(unittest.TestCase):
    def test_fixed_names(self):
        for s, expected in (
            (".bss",    SectionName.Bss),
            (".ctors",  SectionName.Ctors),
            (".data",   SectionName.Data),
            (".dtors",  SectionName.Dtors),
            (".init",   SectionName.Init),
            (".rodata", SectionName.RoData),
            (".sbss",   SectionName.SBss),
            (".sbss2",  SectionName.SBss2),
            (".sdata",  SectionName.SData),
            (".sdata2", SectionName.SData2),
            (".text",   SectionName.Text)
        ):
            with self.subTest(s=s):
                self.assertEqual(classifySectionName(s), (True, expected))

    def test_exception_table_spellings(self):
        for s in ("extab", ".extab", "_extab", "_extab_", "._extab_"):
            with self.subTest(s=s):
                self.assertEqual(classifySectionName(s), (True, SectionName.ExTab))

        for s in ("extabindex", "_extabindex", ".extabindex", "exidx", "._exidx_"):
            with self.subTest(s=s):
                self.assertEqual(classifySectionName(s), (True, SectionName.ExTabIndex))

    def test_unknown(self):
        self.assertEqual(classifySectionName(".rodata.str1.4"), (True, UnknownSectionName("rodata.str1.4")))
        self.assertEqual(classifySectionName(".PPC.EMB.apuinfo"), (True, UnknownSectionName("PPC.EMB.apuinfo")))

    def test_not_a_section(self):
        self.assertEqual(classifySectionName("text"), (False, None))
        self.assertEqual(classifySectionName("."), (False, None))
        self.assertEqual(classifySectionName(".te-xt"), (False, None))


class DebugSectionNameTest(unittest.TestCase):
    def test_names(self):
        for s, expected in (
            (".debug",          DebugSectionName.Main),
            (".line",           DebugSectionName.Line),
            (".debug_abbrev",   DebugSectionName.Abbrev),
            (".debug_aranges",  DebugSectionName.Aranges),
            (".debug_info",     DebugSectionName.Info),
            (".debug_sfnames",  DebugSectionName.SfNames),
            (".debug_srcinfo",  DebugSectionName.SrcInfo),
            (".debug_str",      DebugSectionName.Str)
        ):
            with self.subTest(s=s):
                self.assertEqual(classifyDebugSectionName(s), (True, expected))

    def test_debug_line_is_info(self):
        self.assertEqual(classifyDebugSectionName(".debug_line"), (True, DebugSectionName.Info))

    def test_unknown_debug_section(self):
        self.assertEqual(classifyDebugSectionName(".debug_frame"), (False, None))
        self.assertEqual(classifyDebugSectionName(".text"), (False, None))


class IdentifierTest(unittest.TestCase):
    def test_instance_suffix(self):
        self.assertEqual(classifyIdentifier("finfo"), (True, Named("finfo", None)))
        self.assertEqual(classifyIdentifier("finfo$221"), (True, Named("finfo", 221)))

    def test_dot_l(self):
        self.assertEqual(classifyIdentifier(".LcopyLoop"), (True, DotL("copyLoop")))

    def test_relative(self):
        self.assertEqual(classifyIdentifier("@1234"), (True, Relative(1234)))

    def test_section_symbol(self):
        self.assertEqual(classifyIdentifier("...data.0"), (True, Section(SectionName.Data, 0)))
        self.assertEqual(classifyIdentifier("...text.12"), (True, Section(SectionName.Text, 12)))

    def test_bare_section(self):
        self.assertEqual(classifyIdentifier(".init"), (True, Section(SectionName.Init, None)))
        self.assertEqual(classifyIdentifier("extab"), (True, Section(SectionName.ExTab, None)))

    def test_plain_name_is_not_mangled(self):
        self.assertEqual(classifyIdentifier("__dt__15CMemoryInStreamFv"), (True, Named("__dt__15CMemoryInStreamFv")))

    def test_mangled(self):
        self.assertEqual(classifyIdentifier("foo<int,char>"), (True, Mangled("foo<int,char>")))
        self.assertEqual(classifyIdentifier("__ct__Q34nw4r2ut@ListFv"), (True, Mangled("__ct__Q34nw4r2ut@ListFv")))
        self.assertEqual(classifyIdentifier("lbl_$x"), (True, Mangled("lbl_$x")))

    def test_string_base_is_shadowed_by_mangled(self):
        self.assertEqual(classifyIdentifier("@stringBase0"), (True, Mangled("@stringBase0")))

    def test_invalid(self):
        self.assertEqual(classifyIdentifier("foo.bar"), (False, None))
        self.assertEqual(classifyIdentifier("-x"), (False, None))

    def test_read_stops_at_token_end(self):
        reader = LineReader("memset) \t__mem.o ")
        self.assertEqual(readIdentifier(reader), (True, Named("memset")))
        self.assertEqual(reader.remaining(), ") \t__mem.o ")


class OriginTest(unittest.TestCase):
    def read(self, s):
        reader = LineReader(s)
        is_valid, origin = readOrigin(reader)
        return is_valid and reader.atEnd(), origin

    def test_object_only(self):
        self.assertEqual(self.read("__start.c.o "), (True, Origin("__start.c.o")))

    def test_object_and_source(self):
        self.assertEqual(self.read("os.a __start.c"), (True, Origin("os.a", "__start.c", False)))

    def test_assembly(self):
        self.assertEqual(self.read("MSL_C.PPCEABI.bare.H.a printf.o (asm)"),
                         (True, Origin("MSL_C.PPCEABI.bare.H.a", "printf.o", True)))

    def test_object_requires_separator(self):
        self.assertEqual(readOrigin(LineReader("__start.o")), (False, None))


if __name__ == "__main__":
    unittest.main()
