"""shader-swatch: colour literals in shader source as editable swatches.

Usage: shader-swatch <command> [options]

Commands:
  scan      list every colour literal in a shader file
  present   decode one literal and list how it can be re-spelled
  swatches  render the colours of a shader file to <tmp_dir>/swatches.png
  help      print the docs of a colour syntax

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, shader-swatch looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  SHADER_SWATCH_POLICY       permissive | strict  (vector decode policy)
  SHADER_SWATCH_SWATCH_SIZE  swatch edge in pixels (default 48)
"""

import argparse
import importlib
import logging
import os
import sys

from shader_swatch import LANGUAGES, registry
from shader_swatch.core.env import POLICIES, load_env, load_settings
from shader_swatch.core.errors import ShaderSwatchError
from shader_swatch.core.report import (
    format_json,
    format_presentations_json,
    format_presentations_text,
    format_text,
)
from shader_swatch.core.swatch import save_swatches
from shader_swatch.core.types import REJECTED
from shader_swatch.engine import decode, document_colours, grammar_of_text, presentations, scan

log = logging.getLogger('shader_swatch')

# File suffixes of the shader languages served
_SHADER_SUFFIXES = {
    'glsl': ('.glsl', '.vert', '.frag', '.geom', '.comp', '.tesc', '.tese', '.vs', '.fs'),
    'hlsl': ('.hlsl', '.fx', '.fxh', '.hlsli'),
}


def _load_syntax_module(name: str) -> object:
    """Load the raw module for a syntax (for docstring access)."""
    return importlib.import_module(f'shader_swatch.syntaxes.{name}')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  shader-swatch scan shader.frag\n'
        '  shader-swatch scan shader.frag --json --policy strict\n'
        "  shader-swatch present '#F90'\n"
        "  shader-swatch present 'rgba(255, 128, 0, 0.5)' --json\n"
        '  shader-swatch swatches ./tmp shader.frag\n'
        '  shader-swatch help vector\n'
    )
    parser = argparse.ArgumentParser(
        prog='shader-swatch',
        description='Find colour literals in GLSL/HLSL source and convert between notations.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log rejected literals and other details')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('scan', help='List every colour literal in a shader file')
    p.add_argument('source', help='Path to shader source')
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument('-p', '--policy', choices=POLICIES, default=None, help='Vector decode policy')

    p = sub.add_parser('present', help='Decode one literal and list its presentations')
    p.add_argument('literal', help="A single colour literal, e.g. 'vec3(1.0, 0.5, 0.0)'")
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument('-p', '--policy', choices=POLICIES, default=None, help='Vector decode policy')

    p = sub.add_parser('swatches', help='Render colours of a shader file to a PNG strip')
    p.add_argument('tmp_dir', help='Working directory for artefacts')
    p.add_argument('source', help='Path to shader source')
    p.add_argument('-s', '--size', type=int, default=None, metavar='PX', help='Swatch edge in pixels')
    p.add_argument('-p', '--policy', choices=POLICIES, default=None, help='Vector decode policy')

    help_parser = sub.add_parser('help', help='Print full docs for a colour syntax')
    help_parser.add_argument('syntax', nargs='?', help='Syntax name')

    return parser


def _print_help(name: str | None) -> None:
    """Print full module docstring for a syntax."""
    syntaxes = registry.discover()

    if name is None:
        print('Available syntaxes (scan order):\n')
        for syn_name, syn in syntaxes.items():
            print(f'  {syn_name:<8} {syn.help}')
        print('\nRun: shader-swatch help <syntax> for full docs.')
        return

    if name not in syntaxes:
        print(f'Unknown syntax: {name}', file=sys.stderr)
        print(f'Available: {", ".join(syntaxes)}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_syntax_module(name).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {name!r})')
        return
    print(doc)


def _read_source(path: str) -> str:
    if not os.path.isfile(path):
        print(f'Error: source not found: {path}', file=sys.stderr)
        sys.exit(1)
    if not path.lower().endswith(tuple(s for suffixes in _SHADER_SUFFIXES.values() for s in suffixes)):
        log.warning('%s is not a recognised %s file; scanning anyway', path, '/'.join(LANGUAGES))
    with open(path, encoding='utf-8') as f:
        return f.read()


def _run_scan(args: argparse.Namespace) -> None:
    settings = load_settings(args.policy)
    text = _read_source(args.source)
    colours = document_colours(text, settings.policy)
    if args.json:
        print(format_json(colours, text, source_path=args.source))
    else:
        print(format_text(colours, text, source_path=args.source))


def _run_present(args: argparse.Namespace) -> None:
    settings = load_settings(args.policy)
    literal = args.literal.strip()
    grammar_of_text(literal)
    colour = decode(scan(literal)[0], settings.policy)
    if colour is REJECTED:
        print(f'Error: {args.literal} does not look like a colour ({settings.policy} policy)', file=sys.stderr)
        sys.exit(1)
    candidates = presentations(colour, args.literal)
    if args.json:
        print(format_presentations_json(colour, candidates))
    else:
        print(format_presentations_text(colour, candidates))


def _run_swatches(args: argparse.Namespace) -> None:
    settings = load_settings(args.policy)
    text = _read_source(args.source)
    colours = document_colours(text, settings.policy)
    size = args.size if args.size and args.size > 0 else settings.swatch_size
    os.makedirs(args.tmp_dir, exist_ok=True)
    path = os.path.join(args.tmp_dir, 'swatches.png')
    image = save_swatches([dc.colour for dc in colours], path, size=size)
    print(f'{path} ({image.width}\u00d7{image.height}, {len(colours)} swatches)')


_COMMANDS = {
    'scan': _run_scan,
    'present': _run_present,
    'swatches': _run_swatches,
}


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(levelname)s %(message)s',
    )

    # Load .env before anything else: OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        log.info('loaded %s', env_path)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.syntax)
        return

    try:
        _COMMANDS[args.command](args)
    except (ShaderSwatchError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
