import logging

from rich.logging import RichHandler

from pojogen.logging_config import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_nests_names_under_package() -> None:
    assert get_logger().name == "pojogen"
    assert get_logger("pojogen.generator").name == "pojogen.generator"
    assert get_logger("tools.build").name == "pojogen.tools.build"


def test_configure_logging_installs_single_rich_handler() -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    try:
        configure_logging(logging.DEBUG)
        configure_logging(logging.WARNING)

        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logger.level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            if isinstance(handler, RichHandler):
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
