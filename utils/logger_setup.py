# utils/logger_setup.py
import logging
import sys
import os # For creating log directory
from datetime import datetime, timezone

from .timestamps import current_iso_timestamp

DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class IsoUtcFormatter(logging.Formatter):
    """Formatter whose %(asctime)s is an ISO 8601 UTC timestamp with milliseconds."""

    def formatTime(self, record, datefmt=None):
        return current_iso_timestamp(datetime.fromtimestamp(record.created, tz=timezone.utc))


def setup_logging(log_level=logging.INFO,
                  log_file_path=None,
                  log_format=DEFAULT_LOG_FORMAT,
                  service_name="WaitServer",
                  stream=None):
    """
    Sets up logging for the server.

    stdout carries the MCP protocol, so console output always goes to stderr.

    Args:
        log_level (int): Logging level for all handlers.
        log_file_path (str): Optional path to an additional log file.
        log_format (str): Format string for log messages.
        service_name (str): The root logger name.
        stream: Stream for the console handler. Defaults to sys.stderr.
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(log_level)
    logger.propagate = False

    # Reconfiguring replaces earlier handlers instead of duplicating output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = IsoUtcFormatter(log_format)

    if log_file_path:
        # Ensure log directory exists
        log_dir = os.path.dirname(log_file_path)
        if log_dir and not os.path.exists(log_dir):
            try:
                os.makedirs(log_dir)
            except OSError as e:
                print(f"Warning: Could not create log directory {log_dir}: {e}", file=sys.stderr)
                # Fallback to current directory if log dir creation fails
                log_file_path = os.path.basename(log_file_path)

        # File Handler
        try:
            fh = logging.FileHandler(log_file_path)
            fh.setLevel(log_level)
            fh.setFormatter(formatter)
            logger.addHandler(fh)
        except OSError as e:
            print(f"Warning: Could not set up file logging to {log_file_path}: {e}", file=sys.stderr)

    # Console Handler
    ch = logging.StreamHandler(stream if stream is not None else sys.stderr)
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    logger.debug(f"Logging setup complete. Level: {logging.getLevelName(log_level)}, file: {log_file_path or 'none'}")
    return logger
