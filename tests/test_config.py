import json

import pytest

from peerpairing.config import PairingConfig, load_configuration
from peerpairing.exceptions import InvalidConfigurationException


def test_defaults():
    config = load_configuration(None)

    assert config == PairingConfig()
    assert config.attempts == 1000
    assert config.recent_penalty == 100
    assert config.repeat_penalty == 1
    assert config.seed is None


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"seed": 4, "recent_penalty": 500}), encoding="utf-8")

    config = load_configuration(path)

    assert config.seed == 4
    assert config.recent_penalty == 500
    assert config.attempts == 1000


def test_unknown_keys_are_ignored():
    config = PairingConfig.from_dict({"attempts": 10, "colour": "blue"})

    assert config.attempts == 10


@pytest.mark.parametrize(
    "data",
    [
        {"attempts": 0},
        {"attempts": "many"},
        {"recent_penalty": 0},
        {"repeat_penalty": -1},
        {"recent_penalty": 5, "repeat_penalty": 5},
        {"seed": 1.5},
        {"seed": True},
    ],
)
def test_invalid_values(data):
    with pytest.raises(InvalidConfigurationException):
        PairingConfig.from_dict(data)


@pytest.mark.parametrize("content", ["{", "[1]"])
def test_invalid_files(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(InvalidConfigurationException):
        load_configuration(path)


def test_missing_file(tmp_path):
    with pytest.raises(InvalidConfigurationException):
        load_configuration(tmp_path / "missing.json")


def test_merged_skips_none_overrides():
    config = PairingConfig(seed=1, attempts=20).merged(seed=None, attempts=5)

    assert config.seed == 1
    assert config.attempts == 5


def test_round_trip():
    config = PairingConfig(attempts=3, recent_penalty=50, repeat_penalty=2, seed=9)

    assert PairingConfig.from_dict(config.to_dict()) == config
