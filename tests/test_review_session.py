from datetime import datetime

import pytest

from vocabloop.errors import EmptyStoreError, IndexOutOfRangeError
from vocabloop.models import ViewStage
from vocabloop.services import ReviewSession


@pytest.mark.unit
def test_import_positions_on_first_eligible(session):
    assert session.is_loaded
    assert session.current_index == 1
    assert session.current_record.word == "run"
    assert session.stage is ViewStage.WORD


@pytest.mark.unit
def test_reimport_resets_position(session):
    session.next()
    session.next()
    session.next()
    assert session.current_index == 2

    count = session.import_text("a|||||1|0|0\nb|||||1|0|0\nc|||||0|0|0")
    assert count == 3
    assert session.current_index == 2
    assert session.stage is ViewStage.WORD


@pytest.mark.unit
def test_reimport_keeps_learn_favorites_setting(session):
    session.toggle_learn_favorites()
    session.import_text("a|||||1|1|0\nb|||||0|0|0")
    assert not session.learn_favorites_enabled
    assert session.current_index == 0


@pytest.mark.unit
def test_keyboard_flow(session):
    session.next()
    session.next()
    assert session.stage is ViewStage.STATUS
    assert session.toggle_learned()
    assert session.current_record.is_learned

    session.next()
    assert session.current_index == 2
    assert session.stage is ViewStage.WORD

    # "run" and "apple" are learned and not favorited, "quit" is mastered
    session.previous()
    assert session.current_record.word == "vast"
    assert session.stage is ViewStage.STATUS


@pytest.mark.unit
def test_toggle_learned_ignored_outside_status(session):
    assert not session.toggle_learned()
    assert not session.current_record.is_learned


@pytest.mark.unit
def test_favorite_and_master_current(session):
    assert session.toggle_favorited()
    assert session.current_record.is_favorited
    assert session.toggle_mastered()
    assert session.current_record.is_mastered
    assert session.current_index == 1


@pytest.mark.unit
def test_word_actions_on_empty_session():
    session = ReviewSession()
    assert not session.toggle_favorited()
    assert not session.toggle_mastered()
    assert not session.toggle_learned()
    assert not session.edit_current_field("meaning", "x")
    assert session.progress.label == "0/0 (0/0)"


@pytest.mark.unit
def test_edit_current_field(session):
    assert session.edit_current_field("mnemonic", "run a marathon")
    assert session.current_record.mnemonic == "run a marathon"
    assert not session.edit_current_field("mnemonic", "run a marathon")


@pytest.mark.unit
@pytest.mark.parametrize("text,index", [("1", 0), (" 5 ", 4), ("3\n", 2)])
def test_jump_parses_text(session, text, index):
    session.next()
    assert session.jump(text) == index
    assert session.current_index == index
    assert session.stage is ViewStage.WORD


@pytest.mark.unit
@pytest.mark.parametrize("text", ["0", "6", "-1", "abc", "", "2.5", "1_0", "+3", "\u0663"])
def test_jump_rejects_bad_text(session, text):
    session.next()
    with pytest.raises(IndexOutOfRangeError):
        session.jump(text)
    assert session.current_index == 1
    assert session.stage is ViewStage.DETAILS


@pytest.mark.unit
def test_jump_on_empty_session():
    with pytest.raises(EmptyStoreError):
        ReviewSession().jump("1")


@pytest.mark.unit
def test_export(session, canonical_text):
    content, filename = session.export(now=datetime(2024, 1, 31, 23, 59, 59))
    assert content == canonical_text
    assert filename == "words_2_20240131_235959.txt"


@pytest.mark.unit
def test_export_reflects_changes(session):
    session.toggle_favorited()
    content, _ = session.export()
    assert content.splitlines()[1] == "run|rʌn|v.|to move fast|run, Forrest, run|0|1|0"


@pytest.mark.unit
def test_export_empty_session():
    with pytest.raises(EmptyStoreError):
        ReviewSession().export()


@pytest.mark.unit
def test_completion_state():
    session = ReviewSession()
    session.import_text("a|||||0|0|0\nb|||||1|0|0")
    assert not session.is_complete
    session.toggle_mastered()
    assert session.is_complete

    session.next()
    session.next()
    session.next()
    assert session.current_index == 0
    assert session.stage is ViewStage.WORD
