import argparse
import logging
import pathlib
import sys
import typing

from . import __version__, codegen, render
from .builder import build_manifest


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--asset-dir',
        dest='asset_directories',
        type=pathlib.Path,
        action='append',
        default=[],
        help='A directory of static files to walk recursively (may be provided multiple times)',
    )
    parser.add_argument(
        '--extra-file',
        dest='extra_files',
        type=pathlib.Path,
        action='append',
        default=[],
        help='A single file to declare in the root namespace (may be provided multiple times)',
    )
    parser.add_argument('--url-prefix', default='/static', help='The leading segment of every public path')
    parser.add_argument('--hash-algorithm', default='md5')
    parser.add_argument('--hash-length', type=int, default=None, help='Truncate the content hash to this many characters')
    parser.add_argument(
        '--ignore',
        dest='ignore_patterns',
        action='append',
        default=[],
        help='Skip directory entries whose name matches this glob (may be provided multiple times)',
    )


def configure_parser(parser: argparse.ArgumentParser) -> None:
    parser.description = "Generate a manifest of cache-busted static files"
    parser.add_argument('--version', action='version', version=__version__)
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    parser_generate = subparsers.add_parser('generate', help='Write the manifest module')
    parser_generate.add_argument('destination', type=pathlib.Path, help='Where to write the generated module')
    _add_source_arguments(parser_generate)
    parser_generate.add_argument(
        '--format',
        dest='output_format',
        choices=sorted(render.RENDERERS),
        default='python',
    )
    parser_generate.set_defaults(handler=handle_generate)

    parser_export = subparsers.add_parser('export', help='Copy the static files to their hashed names in a directory')
    parser_export.add_argument('destination', type=pathlib.Path, help='Where to write the static files')
    _add_source_arguments(parser_export)
    parser_export.set_defaults(handler=handle_export)


def _builder_options(args: argparse.Namespace) -> dict[str, typing.Any]:
    return {
        'url_prefix': args.url_prefix,
        'hash_algorithm': args.hash_algorithm,
        'hash_length': args.hash_length,
        'ignore_patterns': args.ignore_patterns,
    }


def handle_generate(args: argparse.Namespace) -> None:
    print(f'Writing static manifest to {args.destination}')
    codegen.generate(
        args.destination,
        args.asset_directories,
        args.extra_files,
        output_format=args.output_format,
        **_builder_options(args),
    )


def handle_export(args: argparse.Namespace) -> None:
    print(f'Writing static files to {args.destination}')
    manifest = build_manifest(args.asset_directories, args.extra_files, **_builder_options(args))
    codegen.export_static_files(destination=args.destination, manifest=manifest)


def main(argv: typing.Optional[typing.Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='static-manifest')
    configure_parser(parser)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    try:
        args.handler(args)
    except (OSError, ValueError) as err:
        # ManifestError is a ValueError, as are invalid option values.
        logging.getLogger('static_manifest.error').error('%s: %s', type(err).__name__, err)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
