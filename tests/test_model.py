from flatini.ini import Record, RecordStore


def test_put_first_write_wins() -> None:
    store = RecordStore()
    store.put('[A]', 'x', 'v')
    store.put('[A]', 'x', 'v2')
    assert store == [Record('[A]', 'x', 'v')]


def test_put_updates_in_place() -> None:
    store = RecordStore([Record('[A]', 'x', '1'), Record('[A]', 'y', '2')])
    store.put('[A]', 'x', '9', update=True)
    assert store == [Record('[A]', 'x', '9'), Record('[A]', 'y', '2')]


def test_plain_append_keeps_duplicates() -> None:
    store = RecordStore()
    store.append(Record('[A]', 'x', '1'))
    store.append(Record('[A]', 'x', '2'))
    assert len(store) == 2
    assert store.find('[A]', 'x') == 0


def test_find_is_exact() -> None:
    store = RecordStore([Record('[A]', 'x', '1')])
    assert store.find('[A]', ' x') is None
    assert store.find('A', 'x') is None
    assert store.find('[a]', 'x') is None


def test_discard_first_match_only() -> None:
    store = RecordStore([
        Record('[A]', 'x', '1'), Record('[B]', 'y', '2'),
        Record('[A]', 'x', '3')])
    assert store.discard('[A]', 'x')
    assert store == [Record('[B]', 'y', '2'), Record('[A]', 'x', '3')]
    assert not store.discard('[C]', 'z')


def test_case_insensitive_folds_group_and_key() -> None:
    store = RecordStore(case_insensitive=True)
    store.append(Record('[Graphics]', 'Width', 'Full HD'))
    store[0] = ('[Audio]', 'Volume', 'Loud')
    assert store == [Record('[audio]', 'volume', 'Loud')]
    assert store.find('[AUDIO]', 'VOLUME') == 0
