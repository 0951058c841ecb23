# -*- coding: utf-8 -*-
#
# dataurl, RFC 2397 data URL parsing and serialization
#
# Copyright (C) 2024-2025 Philipp Wolfer
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.

import argparse
import sys

from dataurl import (
    __version__,
    log,
)
from dataurl.datauri import (
    DataURL,
    parse,
    to_text,
)
from dataurl.errors import DataURLError


def _parameter(value: str) -> tuple[str, str]:
    name, sep, param_value = value.partition('=')
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name, param_value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='dataurl',
        description='Parse and create RFC 2397 data URLs',
    )
    ap.add_argument(
        '-d',
        '--debug',
        action='store_true',
        default=False,
        help='Show debug messages',
    )
    ap.add_argument(
        '-V', '--version', action='version', version='%(prog)s version ' + __version__
    )

    sp = ap.add_subparsers(
        dest='command',
        title='commands',
        description='Command to run. It must be one of these',
        required=True,
    )

    ap_p = sp.add_parser('parse', help='Show the parts of a data URL')
    ap_p.add_argument('url', help='The data URL to parse')
    ap_p.add_argument(
        '-o',
        '--output',
        dest='output',
        help='Write the decoded payload to this file',
    )

    ap_e = sp.add_parser('encode', help='Build a data URL from a file')
    ap_e.add_argument(
        'input',
        nargs='?',
        default='-',
        help='File to encode, standard input if omitted or "-"',
    )
    ap_e.add_argument(
        '-t',
        '--content-type',
        dest='content_type',
        help='Media type in type/subtype form',
    )
    ap_e.add_argument(
        '-p',
        '--param',
        dest='parameters',
        action='append',
        type=_parameter,
        default=[],
        metavar='NAME=VALUE',
        help='Media type parameter, may be repeated',
    )
    ap_e.add_argument(
        '--raw',
        dest='is_base64',
        action='store_false',
        default=True,
        help='Percent-escape the payload instead of using base64',
    )
    return ap


def cmd_parse(args: argparse.Namespace) -> int:
    url = parse(args.url)
    print(f"content-type: {url.content_type or ''}")
    for name, value in url.parameters.items():
        print(f"parameter: {name}={value}")
    print(f"base64: {'yes' if url.is_base64 else 'no'}")
    if args.output:
        with open(args.output, 'wb') as fp:
            fp.write(url.data)
        log.info('Wrote %d bytes to %s', len(url.data), args.output)
    else:
        print(f"size: {len(url.data)}")
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    if args.input == '-':
        data = sys.stdin.buffer.read()
    else:
        with open(args.input, 'rb') as fp:
            data = fp.read()
    log.debug('Encoding %d bytes from %s', len(data), args.input)
    url = DataURL(
        data,
        content_type=args.content_type,
        parameters=dict(args.parameters),
        is_base64=args.is_base64,
    )
    print(to_text(url))
    return 0


_commands = {
    'parse': cmd_parse,
    'encode': cmd_encode,
}


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = log.main_logger.level
    handler = log.setup_logging(args.debug)
    try:
        return _commands[args.command](args)
    except DataURLError as e:
        log.error('%s', e)
    except OSError as e:
        log.error('Cannot access %s: %s', e.filename, e.strerror)
    finally:
        log.main_logger.removeHandler(handler)
        log.main_logger.setLevel(level)
    return 1
