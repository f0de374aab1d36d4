import pytest

from enumgen.core.config import config

GENDER_SOURCE = '''package enum

// @enumGenerated
type gender string

const (
	male    gender = "male"
	female  gender = "female"
	unknown gender = "unknown"
)
'''


@pytest.fixture
def gender_source():
    return GENDER_SOURCE


@pytest.fixture
def write_go(tmp_path):
    """Write ``text`` to a .go file under tmp_path and return its path."""
    def _write(text, name="enum.go"):
        path = tmp_path / name
        path.write_text(text, encoding="utf8")
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_config():
    yield
    config.reset()
