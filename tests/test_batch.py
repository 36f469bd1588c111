from batch import BatchProcessor, categories_for, iter_roots
from conjugator import all_categories
from models import Category, Dialect, Tense, Voice


def test_iter_roots_skips_comments_and_blank_lines():
    lines = ['gam\n', '\n', '# comment\n', '  ho  \n']
    assert list(iter_roots(lines)) == [(1, 'gam'), (4, 'ho')]


def test_categories_for_defaults():
    assert categories_for() == [Category(Tense.PRESENT, Dialect.MAHARASHTRI, Voice.ACTIVE)]
    assert len(categories_for(list(Tense), list(Dialect), list(Voice))) == 24
    assert categories_for(['past', 'future'], voices=['passive']) == [
        Category(Tense.PAST, Dialect.MAHARASHTRI, Voice.PASSIVE),
        Category(Tense.FUTURE, Dialect.MAHARASHTRI, Voice.PASSIVE),
    ]


def test_errors_do_not_stop_the_batch():
    processor = BatchProcessor(categories_for(['present', 'past']), encoding='slp1', workers=2)
    output = processor.process_list(['gam', 'kft', 'ho'])

    assert [(t.root, t.category.tense) for t in output.results] == [
        ('gam', Tense.PRESENT), ('gam', Tense.PAST),
        ('ho', Tense.PRESENT), ('ho', Tense.PAST),
    ]
    assert len(output.errors) == 2
    error = output.errors[0]
    assert error.line_number == 2
    assert error.verb_root == 'kft'
    assert error.category == Category(Tense.PRESENT)
    assert 'vocalic r' in error.error_message


def test_encoding_error_is_reported_once():
    output = BatchProcessor(categories_for(['present', 'past']), encoding='hk').process_list(['ga1', 'gam'])
    assert len(output.errors) == 1
    assert output.errors[0].category is None
    assert len(output.results) == 2


def test_concurrent_output_equals_sequential():
    roots = ['gam', 'ho', 'ni', 'kar', 'pucC', 'hU', 'kft']
    sequential = BatchProcessor(all_categories(), workers=1).process_list(roots)
    concurrent = BatchProcessor(all_categories(), workers=8).process_list(roots)
    assert concurrent.as_dict() == sequential.as_dict()
    assert len(sequential.results) == 6 * 24


def test_process_file(tmp_path):
    path = tmp_path / 'roots.txt'
    path.write_text('gacch\n# comment\n\nbhaN\n', encoding='utf-8')

    output = BatchProcessor(encoding='hk').process_file(path)
    assert [table.root for table in output.results] == ['gacC', 'BaR']
    assert not output.errors
    assert 'errors' not in output.as_dict()

    hk = output.transliterated('hk')
    assert hk.results[1].root == 'bhaN'
    assert 'bhaNai' in hk.results[1].all_forms()
