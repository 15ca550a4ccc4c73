from typing import IO, List, Optional, Union
import argparse
import json as mjson
import logging
import pathlib
import sys

from . import __version__
from .errors import ConfigurationError, IntrospectionParseError, OutputError, SchemaPrintError
from .fetch import fetch_introspection
from .sdl import print_minified_sdl, print_sdl
from .types import load_schema, snippet


def minified_path(path: pathlib.Path) -> pathlib.Path:
    """schema.graphql -> schema.min.graphql, next to the main file."""
    return path.with_name(f'{path.stem}.min{path.suffix}')

def write_schema_file(path: pathlib.Path, content: str) -> None:
    try:
        path.write_text(content, encoding='utf-8')
    except OSError as e:
        raise OutputError(f"Error writing schema to file '{path}': {e}") from e
    print(f"Schema successfully saved to {path}")

def _reformat_json(raw: Union[str, bytes], pretty: bool) -> str:
    try:
        data = mjson.loads(raw)
    except ValueError as e:
        raise IntrospectionParseError(
            f"Error parsing introspection response: {e}", snippet=snippet(raw)) from e
    if pretty:
        return mjson.dumps(data, indent=2, ensure_ascii=False) + '\n'
    return mjson.dumps(data, separators=(',', ':'), ensure_ascii=False)

def dump(
        endpoint: Optional[str],
        input_file: Optional[IO[bytes]],
        header: Optional[str],
        output: Optional[str],
        json: bool,
        minify: bool,
        omit_default_reason: bool,
) -> None:
    """Fetch (or read) an introspection result and write it as SDL or JSON.

    With `minify`, a second file with the compact variant is written next to
    the main one.
    """
    if input_file is not None:
        with input_file:
            if header:
                raise ConfigurationError("--header only applies when fetching from --endpoint")
            raw = input_file.read()
    elif endpoint:
        raw = fetch_introspection(endpoint, header)
    else:
        raise ConfigurationError("GraphQL endpoint URL is required (or pass --input)")

    path = pathlib.Path(output or ('schema.json' if json else 'schema.graphql'))
    if json:
        write_schema_file(path, _reformat_json(raw, pretty=True))
        if minify:
            write_schema_file(minified_path(path), _reformat_json(raw, pretty=False))
        return

    document = load_schema(raw)
    write_schema_file(path, print_sdl(document, omit_default_reason=omit_default_reason))
    if minify:
        write_schema_file(minified_path(path), print_minified_sdl(document))


def main(argv: List[str]) -> None:
    parser = argparse.ArgumentParser(
        prog='schemaprint',
        description="Download a GraphQL schema through introspection and write it as SDL."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('-e', '--endpoint', help='The GraphQL endpoint URL')
    source.add_argument(
        '-i',
        '--input',
        dest='input_file',
        type=argparse.FileType('rb'),
        help='Read a saved introspection JSON file instead of querying an endpoint'
    )
    parser.add_argument('-H', '--header', help="Extra request header, e.g. 'Authorization: Bearer x'")
    parser.add_argument(
        '-o',
        '--output',
        help='Output file path (default: schema.graphql, or schema.json with --json)'
    )
    parser.add_argument(
        '-j',
        '--json',
        action='store_true',
        help='Write the introspection JSON instead of SDL'
    )
    parser.add_argument(
        '-m',
        '--minify',
        action='store_true',
        help='Also write a minified variant (schema.min.graphql / schema.min.json)'
    )
    parser.add_argument(
        '--omit-default-reason',
        action='store_true',
        help='Write a bare @deprecated when the reason is "No longer supported"'
    )
    parser.add_argument('--verbose', action='store_true', help='Log progress')
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    parsed = parser.parse_args(argv)
    params = vars(parsed)
    logging.basicConfig(
        level=logging.INFO if params.pop('verbose') else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )
    try:
        dump(**params)
    except SchemaPrintError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main(sys.argv[1:])
