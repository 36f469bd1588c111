"""
Command-line interface for the Prakrit verb conjugator

    prakrit-verb conjugate gam -t future -d shauraseni
    prakrit-verb batch -i roots.txt -o out.json --all
    prakrit-verb interactive
    prakrit-verb serve
"""

import argparse
import sys
from typing import List, Optional

import config
from batch import BatchProcessor, categories_for
from conjugator import conjugate
from errors import ConjugationError
from models import Category, Dialect, Encoding, Tense, Voice
from transliterator import to_canonical
from writers import format_batch_json, format_csv, format_json, format_table, write_output

TENSE_CHOICES = [t.value for t in Tense]
DIALECT_CHOICES = [d.value for d in Dialect] + ['maharastri']
VOICE_CHOICES = [v.value for v in Voice]
ENCODING_CHOICES = [e.value for e in Encoding]

INTERACTIVE_HELP = """Commands:
  <verb> [tense] [dialect] [voice]  - Conjugate a verb
  tenses: present (default), past, future, imperative
  dialects: maharashtri (default), shauraseni, magadhi
  voices: active (default), passive
  help - Show this help
  quit - Exit"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='prakrit-verb',
        description='Generate verb conjugations for Maharashtri, Shauraseni and Magadhi Prakrit.',
    )
    subparsers = parser.add_subparsers(title='commands', dest='command', required=True)

    conj = subparsers.add_parser('conjugate', help='Generate the conjugation of a single verb')
    conj.add_argument('verb', help='Verb root in the input encoding')
    conj.add_argument('-t', '--tense', choices=TENSE_CHOICES, default='present')
    conj.add_argument('-d', '--dialect', choices=DIALECT_CHOICES, default='maharashtri')
    conj.add_argument('--voice', choices=VOICE_CHOICES, default='active')
    conj.add_argument('-f', '--format', choices=['table', 'json', 'csv'], default='table')
    conj.add_argument('-i', '--input-encoding', choices=ENCODING_CHOICES, default=config.INPUT_ENCODING)
    conj.add_argument('-e', '--encoding', choices=ENCODING_CHOICES, default=config.OUTPUT_ENCODING,
                      help='Output encoding')
    conj.add_argument('-o', '--output', metavar='PATH', help='Output file (stdout if omitted)')

    batch = subparsers.add_parser('batch', help='Conjugate a file of verb roots, one per line')
    source = batch.add_mutually_exclusive_group(required=True)
    source.add_argument('-i', '--input', metavar='PATH', help='File of verb roots')
    source.add_argument('--from-turso', action='store_true', help='Read verb roots from the Turso database')
    batch.add_argument('-o', '--output', metavar='PATH', required=True)
    batch.add_argument('-f', '--format', choices=['json', 'csv'], default='json')
    batch.add_argument('--input-encoding', choices=ENCODING_CHOICES, default=config.INPUT_ENCODING)
    batch.add_argument('--encoding', choices=ENCODING_CHOICES, default=config.OUTPUT_ENCODING,
                       help='Output encoding')
    batch.add_argument('--tenses', nargs='+', choices=TENSE_CHOICES, default=[])
    batch.add_argument('--dialects', nargs='+', choices=DIALECT_CHOICES, default=[])
    batch.add_argument('--voices', nargs='+', choices=VOICE_CHOICES, default=[])
    batch.add_argument('--all-tenses', action='store_true')
    batch.add_argument('--all-dialects', action='store_true')
    batch.add_argument('--all-voices', action='store_true')
    batch.add_argument('--all', action='store_true', help='All tenses, dialects and voices')
    batch.add_argument('--workers', type=int, default=config.BATCH_WORKERS)

    subparsers.add_parser('interactive', help='Start interactive mode')
    subparsers.add_parser('serve', help='Run the HTTP API')

    return parser


def error_line(message: str, root: str, category: Category) -> str:
    return f"Error: {message} [{root}, {category}]"


def run_conjugate(args) -> int:
    category = Category.parse(args.tense, args.dialect, args.voice)
    try:
        root = to_canonical(args.verb, args.input_encoding)
        table = conjugate(root, category).transliterated(args.encoding)
    except ConjugationError as e:
        print(error_line(e.message, args.verb, category), file=sys.stderr)
        return 1

    if args.format == 'json':
        text = format_json(table) + '\n'
    elif args.format == 'csv':
        text = format_csv([table])
    else:
        text = format_table(table)

    if args.output:
        write_output(text, args.output)
        print(f"Output written to: {args.output}")
    else:
        print(text, end='')
    return 0


def _load_turso_roots() -> List[str]:
    from turso_db import TursoDatabase

    db = TursoDatabase()
    try:
        return db.load_verb_roots()
    finally:
        db.close()


def run_batch(args) -> int:
    tenses = list(Tense) if args.all or args.all_tenses else args.tenses
    dialects = list(Dialect) if args.all or args.all_dialects else args.dialects
    voices = list(Voice) if args.all or args.all_voices else args.voices

    processor = BatchProcessor(
        categories=categories_for(tenses, dialects, voices),
        encoding=args.input_encoding,
        workers=args.workers,
    )

    if args.from_turso:
        roots = _load_turso_roots()
        if not roots:
            print("Error: no verb roots loaded from Turso", file=sys.stderr)
            return 1
        output = processor.process_list(roots)
    else:
        try:
            output = processor.process_file(args.input)
        except OSError as e:
            print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
            return 1

    try:
        output = output.transliterated(args.encoding)
    except ConjugationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.format == 'csv':
        write_output(format_csv(output.results), args.output)
    else:
        write_output(format_batch_json(output) + '\n', args.output)

    print(f"Output written to: {args.output}")
    print(f"Processed {len(output.results)} conjugations, {len(output.errors)} errors")

    if output.errors:
        print("\nErrors:", file=sys.stderr)
        for error in output.errors:
            print(f"  {error}", file=sys.stderr)
    return 0


def interactive_line(line: str, input_encoding=None, output_encoding=None) -> Optional[str]:
    """
    Handle one REPL line; returns the text to show, or None to quit

    Raises:
        ValueError: unknown tense, dialect or voice name
        ConjugationError: invalid root or unmappable input
    """
    command = line.strip()
    if command.lower() in ('quit', 'exit', 'q'):
        return None
    if command.lower() in ('help', 'h', '?'):
        return INTERACTIVE_HELP
    if not command:
        return ''

    parts = command.split()
    category = Category.parse(*parts[1:4])
    root = to_canonical(parts[0], input_encoding or config.INPUT_ENCODING)
    table = conjugate(root, category).transliterated(output_encoding or config.OUTPUT_ENCODING)
    return format_table(table)


def run_interactive(stdin=None) -> int:
    stdin = stdin or sys.stdin
    print("Prakrit Verb Conjugation - Interactive Mode")
    print("============================================")
    print(INTERACTIVE_HELP)
    print()

    while True:
        print("> ", end='', flush=True)
        line = stdin.readline()
        if not line:
            break
        try:
            text = interactive_line(line)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            continue
        except ConjugationError as e:
            parts = line.split()
            print(error_line(e.message, parts[0], Category.parse(*parts[1:4])), file=sys.stderr)
            continue
        if text is None:
            print("Goodbye!")
            break
        if text:
            print()
            print(text)
    return 0


def run_serve(args) -> int:
    from prakrit_verb import run_server

    run_server()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'conjugate':
        return run_conjugate(args)
    if args.command == 'batch':
        return run_batch(args)
    if args.command == 'interactive':
        return run_interactive()
    return run_serve(args)


if __name__ == '__main__':
    sys.exit(main())
