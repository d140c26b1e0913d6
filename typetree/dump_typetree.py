#!/usr/bin/env python3
"""
Dump TypeTree

Decodes the TypeTree block of an asset file and prints every class field
tree. Optionally re-encodes legacy trees and compares the result with the
source bytes.

Usage:
    typetree-dump level0 --asset-version 9 --offset 20 --big-endian
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from .config import DecoderConfig, load_decoder_config
from .data_types import TypeClass, TypeTree, TypeTreeFormat, VersionInfo
from .errors import TypeTreeError
from .parsers import BinaryReader, TypeTreeParser
from .serialization import write_type_tree
from .utils import log, logWarning, logError, init_logging, close_logging, print_summary, get_counts


def format_class(type_class: TypeClass) -> List[str]:
    """
    Render one class as indented lines.

    Returns:
        Header line followed by one line per field
    """
    header = f"Class {type_class.class_id}"
    if type_class.script_guid is not None:
        header += f" script={type_class.script_guid}"
    if type_class.class_guid is not None:
        header += f" guid={type_class.class_guid}"

    lines = [header]
    if type_class.type_tree is None:
        lines.append("  (not embedded)")
        return lines

    for depth, node in type_class.type_tree.walk():
        t = node.type
        lines.append(f"  {'  ' * depth}{t.type_name} {t.field_name} "
                     f"// size={t.byte_size} index={t.index} array={t.is_array} "
                     f"version={t.version} flags=0x{t.meta_flag & 0xFFFFFFFF:X}")
    return lines


def dump_tree(tree: TypeTree):
    """Print a decoded TypeTree."""
    log(f"Asset version: {tree.version_info.asset_version} ({tree.format.value})")
    log(f"Revision: {tree.revision or '(none)'}")
    log(f"Attributes: 0x{tree.attributes & 0xFFFFFFFF:X}")
    log(f"Embedded: {tree.embedded}")
    log(f"Classes: {len(tree.classes)}")
    for type_class in tree.classes:
        log()
        for line in format_class(type_class):
            log(line)


def verify_roundtrip(tree: TypeTree, source: bytes, config: DecoderConfig) -> bool:
    """
    Re-encode a legacy tree and compare it with the bytes it was read from.

    Args:
        tree: Decoded tree
        source: Exact bytes the tree was decoded from
        config: Settings used for decoding

    Returns:
        True if the bytes match
    """
    if tree.format is TypeTreeFormat.MODERN:
        logWarning("Round trip skipped: modern TypeTrees cannot be written")
        return True

    encoded = write_type_tree(tree, config)
    if encoded == source:
        log(f"Round trip OK ({len(encoded)} bytes)")
        return True

    mismatch = next((i for i, (a, b) in enumerate(zip(encoded, source)) if a != b),
                    min(len(encoded), len(source)))
    logError(f"Round trip mismatch at byte {mismatch} "
             f"(encoded {len(encoded)} bytes, source {len(source)} bytes)")
    return False


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='typetree-dump',
        description='Decode and print the TypeTree block of an asset file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    typetree-dump sharedassets0.assets --asset-version 15 --offset 20

    # Old big-endian web player asset, check the legacy encoder:
    typetree-dump level0 --asset-version 9 --offset 20 --big-endian --verify-roundtrip

    # Settings from an INI file:
    typetree-dump level0 --asset-version 9 --config typetree.ini
    [typetree]
    byte_order = big
    strict_levels = true
        """
    )

    parser.add_argument('file', help='File containing the TypeTree block')
    parser.add_argument('--asset-version', type=int, required=True,
                        help='Asset format version from the file header')
    parser.add_argument('--offset', type=int, default=0,
                        help='Byte offset of the TypeTree block')
    parser.add_argument('--config', default=None,
                        help='Path to a typetree INI file')
    parser.add_argument('--big-endian', action='store_true',
                        help='Read big-endian data (overrides the config file)')
    parser.add_argument('--log', default=None,
                        help='Also write output to this log file')
    parser.add_argument('--verify-roundtrip', action='store_true',
                        help='Re-encode legacy trees and compare with the source bytes')
    args = parser.parse_args(argv)

    init_logging(Path(args.log) if args.log else None)

    try:
        config = load_decoder_config(args.config) if args.config else DecoderConfig()
        if args.big_endian:
            config.byte_order = '>'

        data = Path(args.file).read_bytes()
        reader = BinaryReader(data, config.byte_order, args.offset)
        tree = TypeTreeParser(VersionInfo(args.asset_version), config).read(reader)
        dump_tree(tree)

        if args.verify_roundtrip:
            verify_roundtrip(tree, data[args.offset:reader.tell()], config)

    except (TypeTreeError, OSError, ValueError) as e:
        logError(f"{e}")

    print_summary()
    errors, _ = get_counts()
    close_logging()
    return 1 if errors else 0


if __name__ == '__main__':
    sys.exit(main())
