# tests/test_utils.py
import logging
import os
from configparser import ConfigParser

from tagcloud import TagCloud
from utils import get_logger
from utils.config import Config


def config_with_log_dir(path):
    cparser = ConfigParser()
    cparser.read_dict({"LOGGING": {"LOGDIR": str(path)}})
    return Config(cparser)


def file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_second_log_dir_replaces_first(tmp_path):
    first = TagCloud(config_with_log_dir(tmp_path / "A"))
    second = TagCloud(config_with_log_dir(tmp_path / "B"))

    assert (tmp_path / "A" / "TAGCLOUD.log").exists()
    assert (tmp_path / "B" / "TAGCLOUD.log").exists()
    assert first.logger is second.logger
    handlers = file_handlers(second.logger)
    assert len(handlers) == 1
    assert handlers[0].baseFilename == os.path.abspath(tmp_path / "B" / "TAGCLOUD.log")


def test_same_log_file_keeps_handlers(tmp_path):
    logger = get_logger("UTILS-TEST", log_dir=str(tmp_path))
    before = list(logger.handlers)
    assert get_logger("UTILS-TEST", log_dir=str(tmp_path)) is logger
    assert logger.handlers == before
    assert len(before) == 2


def test_filename_overrides_name(tmp_path):
    get_logger("Worker-1", "Worker", log_dir=str(tmp_path))
    assert (tmp_path / "Worker.log").exists()
