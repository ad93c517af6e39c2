#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
import glob
import os


# Local
from .common import IsValidFilename
from .common import NormalizePath
from .common import MWMAP_VERSION_MAX, MWMAP_VERSION_MAX_STR
from .common import MWMAP_VERSION_MIN, MWMAP_VERSION_MIN_STR
from .mapfile import EXECUTORS
from .mapfile import ON_ERROR_POLICIES
from .maplang.names import classifySectionName
from .progress import DEFAULT_CODE_SECTIONS


# External
import yaml


class Project:
    def __init__(self, path):
        if not os.path.isabs(path):
            path = os.path.abspath(path)

        path = NormalizePath(path)
        self.path = path

        self.name = None
        self.variables = []
        self.mapsBaseDir = path
        self.maps = []
        self.encoding = "utf-8"
        self.onError = "abort"
        self.workers = 1
        self.parallel = "process"
        self.useMmap = True
        self.codeSections = DEFAULT_CODE_SECTIONS

    def processVariables(self, s, error=print):
        variables = self.variables

        s_parts = s.split('$')
        s_new_parts = [s_parts[0]]

        for part in s_parts[1:]:
            for k, v in variables:
                if part.startswith(k):
                    part = v + part[len(k):]
                    break

            else:
                error("Unable to process variables in string: %r" % s)
                return None

            s_new_parts.append(part)

        return ''.join(s_new_parts)

    def readString(self, obj, key, field_name, default=None, error=print):
        """
        'default' is None <-> Field is required.
        """

        if key not in obj:
            if default is None:
                error("%s not specified" % field_name)
                return None

            return default

        return self.processString(field_name, obj[key], error=error)

    def processString(self, field_name, s, error=print):
        s_valid = isinstance(s, str) and s != ''
        if s_valid:
            s = self.processVariables(s, error)
            if s is None:
                return None

            s_valid = s != ''

        if not s_valid:
            error("Invalid value in %s: %r" % (field_name, s))
            return None

        return s

    def readChoice(self, obj, key, field_name, choices, default, error=print):
        value = self.readString(obj, key, field_name, default, error)
        if value is None:
            return None

        if value not in choices:
            error("Expected %s to be one of %s, received: %r" % (field_name, ", ".join(map(repr, choices)), value))
            return None

        return value

    def readMapList(self, maps, error=print):
        field_name = "\"Maps\""

        if not isinstance(maps, list):
            error("Expected %s to be a list of strings" % field_name)
            return False

        maps_new = []
        normalize_path = NormalizePath
        join_path = os.path.join
        is_file = os.path.isfile
        i_glob = glob.iglob
        is_valid_filename = IsValidFilename

        for file_path in maps:
            base_file_path = file_path

            file_path = self.processString(field_name, file_path, error=error)
            if file_path is None:
                return False

            if not os.path.isabs(file_path):
                file_path = join_path(self.mapsBaseDir, file_path)

            file_path = normalize_path(file_path)
            dir_path, filename = os.path.split(file_path)

            if filename.startswith("*."):
                if len(filename) == 2 or not is_valid_filename(filename[1:]):
                    error("In %s, folder scan path contains an invalid extension: %r" % (field_name, base_file_path))
                    return False

                scan_path = join_path(dir_path, filename)

            elif filename.startswith("**."):
                if len(filename) == 3 or not is_valid_filename(filename[2:]):
                    error("In %s, folder recursive scan path contains an invalid extension: %r" % (field_name, base_file_path))
                    return False

                scan_path = join_path(dir_path, "**", filename[1:])

            else:
                if not is_file(file_path):
                    error("In %s,\n"
                          "File not found: %r\n"
                          "Path resolved to: %r" % (field_name, base_file_path, str(file_path)))
                    return False

                if file_path not in maps_new:
                    maps_new.append(file_path)

                continue

            scan_files = sorted(normalize_path(p) for p in i_glob(scan_path, recursive=True) if is_file(p))
            for scan_file_path in scan_files:
                if scan_file_path not in maps_new:
                    maps_new.append(scan_file_path)

        self.maps = maps_new
        return True

    @staticmethod
    def fromYaml(file_path, error=print):
        ### File Loading ###

        if not os.path.isfile(file_path):
            error("File does not exist: %r" % file_path)
            return None

        with open(file_path, encoding="utf8") as inf:
            try:
                obj = yaml.safe_load(inf)
            except yaml.YAMLError as e:
                error("Failed to parse %r:\n%s" % (file_path, e))
                return None

        if not isinstance(obj, dict):
            error("Unexpected file format for file: %r" % file_path)
            return None

        path = os.path.dirname(file_path)

        ### Selected Options Sanity Check ###

        available_options = (
            "MWMapVersion",
            "Name",
            "Variables",
            "MapsBaseDir",
            "Maps",
            "Encoding",
            "OnError",
            "Workers",
            "Parallel",
            "UseMmap",
            "CodeSections"
        )

        for k in obj:
            if k not in available_options:
                error("Unrecognized option: %r" % k)
                return None

        ### Project Initialization ###

        proj = Project(path)
        path = proj.path

        ### Variables Reading ###

        if "Variables" in obj:
            variables = obj["Variables"]
            if variables is not None:
                if not isinstance(variables, dict):
                    error("Expected \"Variables\" to be a key-value mapping")
                    return None

                is_str = lambda s: isinstance(s, str)
                is_valid_key = lambda k: is_str(k) and k.isidentifier()

                for k, v in variables.items():
                    if not is_valid_key(k):
                        error("Invalid key in \"Variables\": %r" % k)
                        return None

                    if not is_str(v):
                        error("Invalid value for key in \"Variables\": (%r, %r)" % (k, v))
                        return None

                proj.variables = tuple(sorted(variables.items(), key=lambda item: len(item[0]), reverse=True))

        ### Version Check ###

        version_str = proj.readString(obj, "MWMapVersion", "MWMap Version", error=error)
        if version_str is None:
            return None

        try:
            major, minor = map(int, version_str.split('.'))
        except ValueError:
            error("Unexpected MWMapVersion format: %r" % version_str)
            return None

        if (major, minor) < MWMAP_VERSION_MIN or (major, minor) > MWMAP_VERSION_MAX:
            error("Version mismatch,\n"
                  "Specified version: %r,\n"
                  "Latest supported version: %r,\n"
                  "Minimum supported version: %r" % (version_str, MWMAP_VERSION_MAX_STR, MWMAP_VERSION_MIN_STR))
            return None

        ### Project Name Reading ###

        name = proj.readString(obj, "Name", "Project Name", error=error)
        if name is None:
            return None

        proj.name = name

        ### Maps Base Directory Reading ###

        mapsBaseDir = proj.readString(obj, "MapsBaseDir", "Maps Base Directory", '', error=error)
        if mapsBaseDir is None:
            return None

        if mapsBaseDir:
            if not os.path.isabs(mapsBaseDir):
                mapsBaseDir = os.path.join(path, mapsBaseDir)

            proj.mapsBaseDir = NormalizePath(mapsBaseDir)

        ### Maps List Reading ###

        if "Maps" not in obj:
            error("\"Maps\" not specified")
            return None

        if not proj.readMapList(obj["Maps"], error):
            return None

        ### Encoding Reading ###

        encoding = proj.readString(obj, "Encoding", "Encoding", proj.encoding, error=error)
        if encoding is None:
            return None

        proj.encoding = encoding

        ### Error Policy Reading ###

        on_error = proj.readChoice(obj, "OnError", "\"OnError\"", ON_ERROR_POLICIES, proj.onError, error=error)
        if on_error is None:
            return None

        proj.onError = on_error

        ### Workers Reading ###

        if "Workers" in obj:
            workers = obj["Workers"]
            if not isinstance(workers, int) or isinstance(workers, bool) or workers <= 0:
                error("Expected \"Workers\" to be a positive integer, received: %r" % workers)
                return None

            proj.workers = workers

        parallel = proj.readChoice(obj, "Parallel", "\"Parallel\"", tuple(EXECUTORS), proj.parallel, error=error)
        if parallel is None:
            return None

        proj.parallel = parallel

        ### Memory Mapping Flag Reading ###

        if "UseMmap" in obj:
            use_mmap = obj["UseMmap"]
            if not isinstance(use_mmap, bool):
                error("Expected \"UseMmap\" to be a boolean")
                return None

            proj.useMmap = use_mmap

        ### Code Sections Reading ###

        if "CodeSections" in obj:
            code_sections = obj["CodeSections"]
            if not isinstance(code_sections, list):
                error("Expected \"CodeSections\" to be a list of section names")
                return None

            code_sections_set = set()

            for section in code_sections:
                is_valid = isinstance(section, str)
                if is_valid:
                    is_valid, section_name = classifySectionName(section)

                if not is_valid:
                    error("Invalid section name in \"CodeSections\": %r" % section)
                    return None

                code_sections_set.add(section_name)

            proj.codeSections = frozenset(code_sections_set)

        ### Success ###

        return proj
