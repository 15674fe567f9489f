#!/usr/bin/env python
from argparse import ArgumentParser, FileType
import io

from stlsolid._version import __version__
from stlsolid.inifile import Inifile
from stlsolid.logutil import init_logging
from stlsolid.progress import ProgressSequenceAction, format_bytes
from stlsolid.readers import sniff
from stlsolid.readers.stl import read_stl


def main(argv=None):
    ap = ArgumentParser(prog='stlsolid')
    sp = ap.add_subparsers(help='sub-command help', metavar='command')

    # Common options
    ap.add_argument('-v', '--verbose', action='count', default=0,
                    help='increase verbosity')
    ap.add_argument('-V', '--version', action='version',
                    version=f'%(prog)s {__version__}')
    ap.add_argument('-p', '--progress', action=ProgressSequenceAction,
                    help='show progress')
    ap.add_argument('-c', '--cfg', type=FileType('r'),
                    help='reader config file')

    # Info command
    ap_info = sp.add_parser('info', help='info --help')
    ap_info.add_argument('stl', type=FileType('rb'), help='STL file')
    ap_info.add_argument('-s', '--sep', default='\t', help='separator')
    ap_info.set_defaults(process=process_info)

    # Dump command
    ap_dump = sp.add_parser('dump', help='dump --help')
    ap_dump.add_argument('stl', type=FileType('rb'), help='STL file')
    ap_dump.add_argument('-s', '--sep', default='\t', help='separator')
    ap_dump.set_defaults(process=process_dump)

    # Parse the arguments
    args = ap.parse_args(argv)

    init_logging(args.verbose)

    # Invoke the process method
    if hasattr(args, 'process'):
        try:
            args.process(args)
        except ValueError as e:
            ap.exit(1, f'{ap.prog}: error: {e}\n')
    else:
        ap.print_help()


def _load_cfg(args):
    if args.cfg:
        with args.cfg as f:
            return Inifile.load(f)
    else:
        return Inifile()


def _fmt(v):
    return f'{v:.9g}'


def process_info(args):
    cfg = _load_cfg(args)

    with args.stl as f:
        # Buffer pipes so that the format can be sniffed
        if not f.seekable():
            f = io.BytesIO(f.read())

        fmt = cfg.get('reader', 'format', 'auto')
        if fmt == 'auto':
            fmt = sniff(f)

        with args.progress.start('Reading STL'):
            solid = read_stl(f, cfg)

        size = f.tell()

    print('format', fmt, sep=args.sep)
    print('name', solid.name or '', sep=args.sep)
    print('facets', len(solid), sep=args.sep)

    if (bounds := solid.bounds) is not None:
        print('min', *map(_fmt, bounds[0]), sep=args.sep)
        print('max', *map(_fmt, bounds[1]), sep=args.sep)

    print('size', format_bytes(size), sep=args.sep)


def process_dump(args):
    cfg = _load_cfg(args)

    with args.stl as f, args.progress.start('Reading STL'):
        solid = read_stl(f, cfg)

    cols = [f'{p}{c}' for p in ('n', 'v0', 'v1', 'v2') for c in 'xyz']
    print('facet', *cols, sep=args.sep)

    for i, (n, v0, v1, v2) in enumerate(solid):
        print(i, *map(_fmt, [*n, *v0, *v1, *v2]), sep=args.sep)


if __name__ == '__main__':
    main()
