"""
Table, JSON and CSV rendering of conjugation tables
"""

import csv
import io
import json
from typing import Iterable

from models import SANSKRIT_TERMS, ConjugationTable, PersonNumber

CSV_HEADERS = ['verb_root', 'tense', 'mood', 'voice', 'dialect', 'person', 'number', 'forms']

PERSON_ROWS = (
    ('Third Person', PersonNumber.THIRD_SINGULAR, PersonNumber.THIRD_PLURAL),
    ('Second Person', PersonNumber.SECOND_SINGULAR, PersonNumber.SECOND_PLURAL),
    ('First Person', PersonNumber.FIRST_SINGULAR, PersonNumber.FIRST_PLURAL),
)

COLUMN_WIDTHS = (20, 40, 40)


def _label(name: str) -> str:
    term = SANSKRIT_TERMS.get(name)
    return f"{name} ({term})" if term else name


def _row(*cells) -> str:
    return ' '.join(f"{cell:<{width}}" for cell, width in zip(cells, COLUMN_WIDTHS)).rstrip()


def format_table(table: ConjugationTable) -> str:
    """Human-readable grid: persons down, singular and plural across"""
    category = table.category
    lines = [
        f"Verb Root: {table.root}",
        f"Tense: {_label(category.tense.value)}",
        f"Mood: {_label(category.mood)}",
        f"Voice: {_label(category.voice.value)}",
        f"Dialect: {_label(category.dialect.value)}",
        '',
        _row('Person', 'Singular', 'Plural'),
        '-' * sum(COLUMN_WIDTHS),
    ]
    for person, singular, plural in PERSON_ROWS:
        lines.append(_row(person, ', '.join(table.get(singular)), ', '.join(table.get(plural))))
    return '\n'.join(lines) + '\n'


def format_json(table: ConjugationTable) -> str:
    return json.dumps(table.as_dict(), ensure_ascii=False, indent=2)


def format_batch_json(output) -> str:
    """JSON for a BatchOutput (results, and errors when there are any)"""
    return json.dumps(output.as_dict(), ensure_ascii=False, indent=2)


def format_csv(tables: Iterable[ConjugationTable]) -> str:
    """One row per table and slot, forms joined with ', '"""
    if isinstance(tables, ConjugationTable):
        tables = [tables]

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(CSV_HEADERS)
    for table in tables:
        category = table.category
        for slot, forms in table.items():
            writer.writerow([
                table.root,
                category.tense.value,
                category.mood,
                category.voice.value,
                category.dialect.value,
                slot.person,
                slot.number,
                ', '.join(forms),
            ])
    return buffer.getvalue()


def write_output(text: str, path) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
