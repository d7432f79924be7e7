# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/10/13 01:47:05
# @Author : Kariko Lin

"""`python -m pyinifile SampleFile.ini [--get PLAYER_DATA score --type int]`"""

import argparse
import logging
import sys

from .export import dump_yaml
from .ini import IniError, IniFile, ValueKind


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pyinifile',
        description='Parse an INI file and print its typed values')
    parser.add_argument('file', help='path to the INI file')
    parser.add_argument('--encoding', default=None,
                        help='text encoding, guessed when decoding fails')
    parser.add_argument('--get', nargs=2, metavar=('SECTION', 'KEY'),
                        help='print a single value instead of the whole file')
    parser.add_argument('--type', default=ValueKind.STRING.value,
                        choices=[i.value for i in ValueKind],
                        help='type to read the --get value as')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log parsing details')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        ini = IniFile.open(args.file, args.encoding)
        if args.get is None:
            dump_yaml(ini, sys.stdout)
            return 0
        section, key = args.get
        value = getattr(ini, f'get_{args.type}')(section, key)
    except IniError as e:
        logging.error(e)
        return 1
    except LookupError as e:
        # unknown --encoding
        logging.error(e)
        return 1

    if isinstance(value, bool):
        value = str(value).lower()
    print(value)
    return 0


if __name__ == '__main__':
    sys.exit(main())
