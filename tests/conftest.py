import pytest

SAMPLE = """\
[PLAYER_DATA]
; player stuff
name = Hero
score = 100
positionX = 12.5
positionY = 7.25

[VISITED_PLACES]
tavern = true
castle = FALSE
"""


@pytest.fixture
def write_ini(tmp_path):
    def _write(text: str, name: str = 'sample.ini', encoding: str = 'utf-8'):
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path
    return _write


@pytest.fixture
def sample_ini(write_ini):
    return write_ini(SAMPLE)
