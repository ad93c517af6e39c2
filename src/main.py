#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from mwmap import MapFile
from mwmap import Project
from mwmap import computeProgress
from mwmap import pairDuplicates
from mwmap.progress import DEFAULT_CODE_SECTIONS
import argparse
import os


def processMap(file_path, name, encoding="utf-8", useMmap=True, onError="abort", workers=1, parallel="process",
               codeSections=DEFAULT_CODE_SECTIONS, error=print):

    print("\n*** Parsing %r ***\n" % os.path.basename(file_path))

    map_file = MapFile.fromPath(file_path, encoding, useMmap, error)
    if map_file is None:
        return False

    lines = map_file.classify(onError, workers, parallel, error)
    if lines is None:
        return False

    print("Classified %d line(s)" % len(lines))

    if map_file.errors:
        print("Skipped %d line(s) that could not be parsed:" % len(map_file.errors))
        for e in map_file.errors:
            print("  %s" % e)

    else:
        # Line numbers only line up when nothing was skipped
        try:
            duplicates = pairDuplicates(lines)
        except ValueError as e:
            error("In %r, %s" % (file_path, e))
            return False

        print("Found %d unreferenced duplicate(s)" % len(duplicates))

    print(computeProgress(lines, codeSections).toJson(name))
    return True


def main():
    def error(*args, **kargs):
        print("While trying to parse, encountered the following error:\n")
        print(*args, **kargs)

    arg_parser = argparse.ArgumentParser(description="Classify CodeWarrior linker map files and report code/data progress.")
    arg_parser.add_argument("paths", nargs="*", help="map files or project .yaml files")
    arg_parser.add_argument("--skip-errors", action="store_true", help="skip lines that cannot be parsed instead of aborting")
    arg_parser.add_argument("-j", "--workers", type=int, default=1, help="number of worker processes")
    args = arg_parser.parse_args()

    paths = args.paths
    if not paths:
        file_path = input("Enter map or project.yaml path: ")
        if not file_path:
            return

        paths = [file_path]

    on_error = "skip" if args.skip_errors else "abort"

    for file_path in paths:
        if os.path.splitext(file_path)[1].lower() in (".yaml", ".yml"):
            proj = Project.fromYaml(file_path, error)
            if proj is None:
                return

            for map_path in proj.maps:
                if not processMap(str(map_path), proj.name, proj.encoding, proj.useMmap, proj.onError,
                                  proj.workers, proj.parallel, proj.codeSections, error):
                    return

                print()
                print('=' * 50)

        else:
            name = os.path.splitext(os.path.basename(file_path))[0]
            if not processMap(file_path, name, onError=on_error, workers=max(1, args.workers), error=error):
                return

            print()
            print('=' * 50)


if __name__ == "__main__":
    main()
