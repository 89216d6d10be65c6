import pytest

from vocabloop.config import SettingsManager
from vocabloop.services import ReviewSession, WordStore


CANONICAL_TEXT = "\n".join([
    "apple|ˈæpəl|n.|a round fruit|think of Adam's apple|1|0|0",
    "run|rʌn|v.|to move fast|run, Forrest, run|0|0|0",
    "bright|braɪt|adj.|full of light||0|1|0",
    "vast|væst|adj.|very large|vast ocean|1|1|0",
    "quit|kwɪt|v.|to stop||0|0|1",
])


@pytest.fixture
def canonical_text():
    return CANONICAL_TEXT


@pytest.fixture
def make_text():
    """Build word file text with one word per (learned, favorited, mastered) triple."""
    def build(*flags):
        lines = []
        for i, (learned, favorited, mastered) in enumerate(flags):
            lines.append(f"w{i}|p{i}|n.|m{i}|h{i}|{int(learned)}|{int(favorited)}|{int(mastered)}")
        return "\n".join(lines)
    return build


@pytest.fixture
def store(canonical_text):
    return WordStore.from_text(canonical_text)


@pytest.fixture
def session(canonical_text):
    s = ReviewSession()
    s.import_text(canonical_text)
    return s


@pytest.fixture
def settings_file(tmp_path):
    SettingsManager.reset_instance()
    path = tmp_path / "settings.json"
    yield path
    SettingsManager.reset_instance()
