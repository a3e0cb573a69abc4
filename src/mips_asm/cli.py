from __future__ import annotations
import argparse
import logging
import sys

from .lexer import TAB_WIDTH
from .parser import parse
from .writers import to_listing_lines, write_listing

logger = logging.getLogger(__name__)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="MIPS assembly front end: parse and list a source file")
    ap.add_argument("source", help="archivo .s/.asm de entrada")
    ap.add_argument("-o", "--output", help="escribir el listado en este archivo (por defecto, stdout)")
    ap.add_argument("--tab-width", type=int, default=TAB_WIDTH,
                    help=f"ancho de tabulador para calcular columnas (por defecto {TAB_WIDTH})")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="más mensajes de log (-v, -vv)")
    args = ap.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        with open(args.source, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    program, diags = parse(text, filename=args.source, tab_width=args.tab_width)
    for d in diags:
        print(d, file=sys.stderr)
    if program is None:
        return 1

    if args.output:
        try:
            write_listing(program, args.output)
        except OSError as ex:
            print(f"ERROR al escribir el listado: {ex}", file=sys.stderr)
            return 3
        logger.info("%d items -> %s", len(program), args.output)
    else:
        for line in to_listing_lines(program):
            print(line)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
