# tests/conftest.py
from configparser import ConfigParser

import pytest

from utils.config import Config


@pytest.fixture
def config(tmp_path):
    cparser = ConfigParser()
    cparser.read_dict({"LOGGING": {"LOGDIR": str(tmp_path / "Logs")}})
    return Config(cparser)
