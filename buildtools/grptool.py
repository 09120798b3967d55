#!/usr/bin/env python3
import sys
import logging

from pathlib import Path
from argparse import ArgumentParser, FileType

from .errors import BuildError
from .grp import GrpFileReader

argparser = ArgumentParser(prog="grptool", description="List and extract .grp archives")
argparser.add_argument("-v", "--verbose", action="store_true")
commands = argparser.add_subparsers(dest="command", required=True)

cmd = commands.add_parser("list")
cmd.add_argument("file", type=FileType("rb"))

cmd = commands.add_parser("extract")
cmd.add_argument("file", type=FileType("rb"))
cmd.add_argument("entry")
cmd.add_argument("out", type=Path)

cmd = commands.add_parser("extract-all")
cmd.add_argument("file", type=FileType("rb"))
cmd.add_argument("out", type=Path)

def do_list(grp, args):
    print("Offset", "Length", "Name", sep='\t')
    for entry in grp.entries():
        print(hex(entry.offset), entry.size, entry.name, sep='\t')

def do_extract(grp, args):
    entry = grp.find_entry(args.entry)
    if entry is None:
        raise BuildError('entry "%s" not found' % args.entry)
    data = grp.read(entry)
    args.out.write_bytes(data)
    print("File size:", len(data))

def member_path(outdir, entry):
    root = outdir.resolve()
    dest = (root / entry.name).resolve()
    if not entry.name or dest.parent != root:
        raise BuildError('entry "%s" escapes output directory' % entry.name)
    return dest

def do_extract_all(grp, args):
    entries = grp.entries()
    # check every name before writing anything
    paths = [member_path(args.out, entry) for entry in entries]
    args.out.mkdir(parents=True, exist_ok=True)
    for entry, path in zip(entries, paths):
        path.write_bytes(grp.read(entry))
        print(entry.name, entry.size, sep='\t')

handlers = {
    "list": do_list,
    "extract": do_extract,
    "extract-all": do_extract_all,
}

def main(argv=None):
    args = argparser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        with args.file as fd:
            handlers[args.command](GrpFileReader(fd), args)
    except (BuildError, OSError) as e:
        sys.stderr.write("Error: %s\n" % e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
