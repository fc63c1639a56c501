# product_browser/core/logging.py
import logging
import sys
import colorlog

# HTTP client libraries log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level=logging.INFO, *, quiet=NOISY_LOGGERS):
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s.%(msecs)03d %(levelname)-8s%(reset)s %(blue)s%(name)s%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in quiet:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
