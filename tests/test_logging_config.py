import logging

from hourcast.logging_config import configure_logging


def test_configure_twice_installs_one_handler():
    root = logging.getLogger()
    configure_logging("INFO")
    before = len(root.handlers)
    configure_logging("DEBUG")
    assert len(root.handlers) == before
    assert root.level == logging.DEBUG
    configure_logging("INFO")
