"""
Batch conjugation of many verb roots over many categories

Work is fanned out over a thread pool per (root, category) pair; results
are collected in submission order, so the output does not depend on the
number of workers.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from itertools import product
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import config
from conjugator import conjugate
from errors import ConjugationError
from models import Category, ConjugationTable, Dialect, Encoding, Tense, Voice
from transliterator import to_canonical

DEFAULT_TENSES = (Tense.PRESENT,)
DEFAULT_DIALECTS = (Dialect.MAHARASHTRI,)
DEFAULT_VOICES = (Voice.ACTIVE,)


@dataclass(frozen=True)
class BatchError:
    line_number: int
    verb_root: str
    category: Optional[Category]
    error_message: str

    def as_dict(self):
        return {
            'line_number': self.line_number,
            'verb_root': self.verb_root,
            'category': str(self.category) if self.category else None,
            'error_message': self.error_message,
        }

    def __str__(self):
        where = f" ({self.category})" if self.category else ''
        return f"Line {self.line_number}: {self.verb_root}{where} - {self.error_message}"


@dataclass
class BatchOutput:
    results: List[ConjugationTable] = field(default_factory=list)
    errors: List[BatchError] = field(default_factory=list)

    def transliterated(self, encoding) -> 'BatchOutput':
        return BatchOutput([table.transliterated(encoding) for table in self.results], list(self.errors))

    def as_dict(self):
        data = {'results': [table.as_dict() for table in self.results]}
        if self.errors:
            data['errors'] = [error.as_dict() for error in self.errors]
        return data


def categories_for(tenses: Sequence = (), dialects: Sequence = (), voices: Sequence = ()) -> List[Category]:
    """
    Cartesian product of the selected tenses, dialects and voices

    Names or enum members are accepted. An empty selection falls back to
    present / maharashtri / active.
    """
    tenses = [Tense.parse(t) for t in tenses] or list(DEFAULT_TENSES)
    dialects = [Dialect.parse(d) for d in dialects] or list(DEFAULT_DIALECTS)
    voices = [Voice.parse(v) for v in voices] or list(DEFAULT_VOICES)

    categories = []
    for tense, dialect, voice in product(tenses, dialects, voices):
        category = Category(tense, dialect, voice)
        if category not in categories:
            categories.append(category)
    return categories


def iter_roots(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield (line number, root) pairs, skipping blank lines and # comments"""
    for line_number, line in enumerate(lines, 1):
        root = line.strip()
        if not root or root.startswith('#'):
            continue
        yield line_number, root


class BatchProcessor:
    """Conjugates roots over a fixed set of categories"""

    def __init__(self, categories: Optional[Sequence[Category]] = None,
                 encoding=Encoding.SLP1, workers: Optional[int] = None):
        self.categories = list(categories) if categories else categories_for()
        self.encoding = Encoding.parse(encoding)
        self.workers = max(1, workers if workers is not None else config.BATCH_WORKERS)

    iter_roots = staticmethod(iter_roots)

    def _conjugate_one(self, task):
        line_number, verb_root, canonical, category = task
        try:
            return conjugate(canonical, category), None
        except ConjugationError as e:
            return None, BatchError(line_number, verb_root, category, e.message)

    def process_roots(self, entries: Iterable[Tuple[int, str]]) -> BatchOutput:
        """
        Conjugate every (line number, root) entry over every category

        A root that cannot be read in the input encoding gives one error for
        the entry; a root that fails to conjugate gives one error per
        failing category. Neither stops the batch.
        """
        output = BatchOutput()
        # (position, task) pairs; encoding errors take their position in line order
        tasks = []
        slots = []

        for line_number, verb_root in entries:
            try:
                canonical = to_canonical(verb_root, self.encoding)
            except ConjugationError as e:
                slots.append(BatchError(line_number, verb_root, None, e.message))
                continue
            for category in self.categories:
                slots.append(None)
                tasks.append((len(slots) - 1, (line_number, verb_root, canonical, category)))

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            outcomes = list(executor.map(self._conjugate_one, [task for _, task in tasks]))

        for (position, _), outcome in zip(tasks, outcomes):
            slots[position] = outcome

        for slot in slots:
            if isinstance(slot, BatchError):
                output.errors.append(slot)
                continue
            table, error = slot
            if error is not None:
                output.errors.append(error)
            else:
                output.results.append(table)
        return output

    def process_list(self, roots: Iterable[str]) -> BatchOutput:
        return self.process_roots(iter_roots(roots))

    def process_file(self, path) -> BatchOutput:
        with open(path, 'r', encoding='utf-8') as f:
            return self.process_roots(iter_roots(f))
