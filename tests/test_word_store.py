import pytest

from vocabloop.services import WordStore


@pytest.mark.unit
def test_load_counts(store):
    assert store.count == 5
    assert len(store) == 5
    assert not store.is_empty
    assert not store.has_unsaved_changes


@pytest.mark.unit
def test_round_trip_is_exact(canonical_text):
    assert WordStore.from_text(canonical_text).serialize() == canonical_text


@pytest.mark.unit
def test_load_after_serialize_is_stable():
    text = "cat|kæt|n.|animal|pet\tname\n\ndog\n"
    first = WordStore.from_text(text)
    second = WordStore.from_text(first.serialize())
    assert second.records() == first.records()


@pytest.mark.unit
def test_load_replaces_contents(store):
    store.load("only|||||0|0|0")
    assert store.count == 1
    assert store[0].word == "only"


@pytest.mark.unit
def test_edit_field(store):
    assert store.edit_field(1, "meaning", "to sprint")
    assert store[1].meaning == "to sprint"
    assert store.has_unsaved_changes


@pytest.mark.unit
def test_edit_same_value_is_noop(store):
    calls = []
    store.on_change(lambda: calls.append(1))
    assert not store.edit_field(1, "meaning", "to move fast")
    assert calls == []
    assert not store.has_unsaved_changes


@pytest.mark.unit
@pytest.mark.parametrize("index", [-1, 5, 100])
def test_edit_out_of_range_is_noop(store, index):
    before = store.serialize()
    assert not store.edit_field(index, "meaning", "x")
    assert store.serialize() == before


@pytest.mark.unit
def test_edit_empty_store_is_noop():
    assert not WordStore().edit_field(0, "phonetic", "x")


@pytest.mark.unit
def test_word_is_not_editable(store):
    with pytest.raises(ValueError):
        store.edit_field(0, "word", "pear")


@pytest.mark.unit
def test_toggles_flip_flags(store):
    assert store.toggle_favorited(0)
    assert store[0].is_favorited
    assert store.toggle_mastered(0)
    assert store[0].is_mastered
    assert store.toggle_learned(0)
    assert not store[0].is_learned
    assert store.serialize().splitlines()[0] == "apple|ˈæpəl|n.|a round fruit|think of Adam's apple|0|1|1"


@pytest.mark.unit
def test_toggles_on_empty_store():
    empty = WordStore()
    assert not empty.toggle_favorited(0)
    assert not empty.toggle_mastered(0)
    assert not empty.toggle_learned(0)


@pytest.mark.unit
def test_on_change_notified(store):
    calls = []
    store.on_change(lambda: calls.append(1))
    store.toggle_favorited(2)
    store.edit_field(2, "mnemonic", "sunny")
    assert len(calls) == 2


@pytest.mark.unit
def test_get_returns_copy(store):
    record = store.get(0)
    record.word = "changed"
    assert store[0].word == "apple"
    assert store.get(99) is None


@pytest.mark.unit
def test_unlearned_count(store):
    assert store.unlearned_count() == 3
    assert store.unlearned_count(upto=0) == 0
    assert store.unlearned_count(upto=2) == 2


@pytest.mark.unit
def test_mark_saved(store):
    store.toggle_learned(1)
    store.mark_saved()
    assert not store.has_unsaved_changes


@pytest.mark.unit
def test_round_trip_keeps_edge_spaces():
    text = " apple|p|n.|m|h|0|0|0\nb  |||||0|0|0"
    assert WordStore.from_text(text).serialize() == text


@pytest.mark.unit
def test_surrounding_blank_lines_dropped():
    store = WordStore.from_text("\n  \n apple|||||0|0|0\r\n\r\n")
    assert store.count == 1
    assert store[0].word == " apple"
