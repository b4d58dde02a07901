#!/usr/bin/env python3
"""
UE3 Content Packager

Inspects a UE3 package, resolves the packages it imports against a game
directory and lists (or packages) the ones not already shipped.

Usage:
    ue3-packager --in CNC-Field.udk --game-path ./UDKGame --names names.txt
    ue3-packager --in CNC-Field.udk --game-path ./UDKGame --against shipped.bin --package
    ue3-packager --game-path ./UDKGame --build-against shipped.bin
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .dependencies import write_dependency_guids
from .packager import generate_package
from .report import (
    format_dependency_list,
    format_game_packages,
    format_import_table,
    format_name_table,
    format_package_table,
    write_report,
)
from .session import ResolutionSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ue3-packager",
        description="UE3 package dependency resolver and content packager",
    )
    parser.add_argument("--in", "--level", "--map", "--file", "--filename", dest="package_file",
                        help="Package to inspect")
    parser.add_argument("--game-path", default=config.GAME_PATH,
                        help="Directory searched for imported packages")
    parser.add_argument("--package", action="store_true",
                        help="Copy the package and its dependencies into a content tree")
    parser.add_argument("--output", default=config.OUTPUT_DIR,
                        help="Root directory for --package output")
    parser.add_argument("--names", help="Write the name table to this file")
    parser.add_argument("--imports", help="Write the import table to this file")
    parser.add_argument("--packages", help="Write the package table to this file")
    parser.add_argument("--dependencies", help="Write the dependency list to this file")
    parser.add_argument("--dependency-guids", help="Write dependency GUIDs (binary) to this file")
    parser.add_argument("--game-packages", help="Write every package found under the baseline path")
    parser.add_argument("--baseline-path",
                        help="Directory used to build the baseline (default: --game-path)")

    baseline = parser.add_mutually_exclusive_group()
    baseline.add_argument("--against", help="Load the baseline GUID list from this file")
    baseline.add_argument("--build-against",
                          help="Save the GUID of every package under --baseline-path to this file")

    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity")
    return parser


def _write(label: str, path: str, lines) -> bool:
    try:
        count = write_report(path, lines)
    except OSError as e:
        print(f"ERROR: Unable to write {label}: {e}")
        return False
    print(f"{count} {label} lines written to {path}")
    return True


def run(args: argparse.Namespace) -> int:
    session = ResolutionSession()
    baseline_path = args.baseline_path or args.game_path

    if args.against:
        if not session.load_baseline(args.against):
            print(f"WARNING: Unable to read baseline {args.against}; using an empty baseline")

    if args.package_file:
        if not session.inspect(args.package_file):
            print(f"ERROR: Unable to open package {args.package_file}")
            return 1
        found = session.resolve(args.game_path)
        print(f"Resolved {found}/{len(session.packages)} imported packages under {args.game_path}")

        # Only a loaded --against list feeds the diff
        deps = session.build_dependencies()
        print(f"{len(deps)} dependencies")
        if args.package:
            packager = generate_package(session.package, deps, args.game_path, args.output)
            print(f"Packaged {len(packager.copied)} files into {packager.root}")
            for skipped in packager.skipped:
                print(f"  skipped: {skipped}")

    game_baseline = None
    if args.game_packages or args.build_against:
        game_baseline = session.scan_game_packages(baseline_path).baseline
        print(f"Found {len(session.game_packages)} packages under {baseline_path}")

    if args.names:
        _write("name table", args.names, format_name_table(session.names))
    if args.imports:
        _write("import table", args.imports, format_import_table(session.imports, session.names))
    if args.dependencies:
        _write("dependency list", args.dependencies, format_dependency_list(session.dependencies))
    if args.dependency_guids:
        try:
            write_dependency_guids(session.dependencies, args.dependency_guids)
        except OSError as e:
            print(f"ERROR: Unable to write dependency GUIDs: {e}")
    if args.packages:
        _write("package table", args.packages, format_package_table(session.packages))
    if args.game_packages:
        _write("game package table", args.game_packages, format_game_packages(session.game_packages))
    if args.build_against:
        try:
            game_baseline.save(args.build_against)
            print(f"{len(game_baseline)} baseline GUIDs written to {args.build_against}")
        except OSError as e:
            print(f"ERROR: Unable to write baseline list: {e}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING)
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args.package_file and not args.game_packages and not args.build_against:
        parser.print_help()
        return 0

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
