"""
Command line interface for the tree-header Huffman compressor.
"""

import argparse
import os
import sys

from algorithms.huff_processor import DEBUG_HIGH, DEBUG_LOW, HuffProcessor
from algorithms.huff_utils.huff_errors import HuffException


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Huffman compressor with the coding tree stored in the output',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python huff_cli.py compress book.txt -o book.hf
  python huff_cli.py decompress book.hf -o book.txt -vv
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Command')

    for name in ('compress', 'decompress'):
        sub = subparsers.add_parser(name, help=f'{name.capitalize()} a file')
        sub.add_argument('input', help='Input file')
        sub.add_argument('-o', '--output', required=True, help='Output file')
        sub.add_argument('-v', '--verbose', action='count', default=0,
                         help='Print diagnostics (-vv for every symbol)')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    debug = DEBUG_HIGH if args.verbose >= 2 else DEBUG_LOW * args.verbose

    try:
        if args.command == 'compress':
            log_info = HuffProcessor.compress_file(args.input, args.output, debug=debug)
        else:
            log_info = HuffProcessor.decompress_file(args.input, args.output, debug=debug)
    except HuffException as e:
        # the output file was created empty before decoding failed
        os.remove(args.output)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(log_info)
    return 0


if __name__ == '__main__':
    sys.exit(main())
