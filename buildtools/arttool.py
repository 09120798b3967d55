#!/usr/bin/env python3
import sys
import logging

from pathlib import Path
from argparse import ArgumentParser, FileType

from .art import ArtFileReader
from .errors import BuildError
from .palette import read_palette, tile_image

argparser = ArgumentParser(prog="arttool", description="Inspect and export .art tiles")
argparser.add_argument("-v", "--verbose", action="store_true")
commands = argparser.add_subparsers(dest="command", required=True)

cmd = commands.add_parser("list")
cmd.add_argument("file", type=FileType("rb"))

cmd = commands.add_parser("export")
cmd.add_argument("file", type=FileType("rb"))
cmd.add_argument("number", type=int)
cmd.add_argument("out", type=Path)
cmd.add_argument("--palette", type=FileType("rb"))

def do_list(art, args):
    print("Number", "Width", "Height", "Frames", sep='\t')
    for tile, anim in zip(art.tiles(), art.animations()):
        print("%04d" % tile.number, tile.width, tile.height, anim.frames, sep='\t')

def do_export(art, args):
    tile = art.find_tile(args.number)
    if tile is None:
        raise BuildError("tile %d not found" % args.number)

    palette = None
    if args.palette:
        with args.palette as fd:
            palette = read_palette(fd)

    img = tile_image(tile, art.read_pixels(tile), palette)
    img.save(args.out)

handlers = {
    "list": do_list,
    "export": do_export,
}

def main(argv=None):
    args = argparser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        with args.file as fd:
            handlers[args.command](ArtFileReader(fd), args)
    except (BuildError, OSError) as e:
        sys.stderr.write("Error: %s\n" % e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
