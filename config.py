# config.py
import os
import math
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME = "WaitServer"

logger = logging.getLogger(f"{SERVICE_NAME}.Config")

# --- MCP Server Identity ---
SERVER_NAME = "wait_server"
SERVER_VERSION = "1.0.0"

# --- Environment Variable Names ---
ENV_MAX_DURATION = "MCP_WAIT_MAX_DURATION_SECONDS"
ENV_MAX_DURATION_ALIAS = "MAX_DURATION_SECONDS"
ENV_TOOL_DESCRIPTION = "MCP_WAIT_TOOL_DESCRIPTION"
ENV_TOOL_DESCRIPTION_ALIAS = "TOOL_DESCRIPTION"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_FILE_PATH = "LOG_FILE_PATH"

# --- Defaults ---
DEFAULT_MAX_DURATION = 210.0
MIN_MAX_DURATION = 1.0
DEFAULT_TOOL_DESCRIPTION = (
    "Waits for a specified number of seconds. Use this to create a delay after starting "
    "a long-running operation (like a script or download via another tool), allowing it "
    "time to complete before you proceed or check its status."
)
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ServerConfig:
    """Process-wide settings, read once at startup and passed to the tools."""
    max_duration_seconds: float = DEFAULT_MAX_DURATION
    tool_description: str = DEFAULT_TOOL_DESCRIPTION


def _lookup(environ: Mapping[str, str], *names: str):
    """Returns (name, value) for the first name that is set to a non-empty value."""
    for name in names:
        value = environ.get(name)
        if value:
            return name, value
    return None, None


def parse_max_duration(environ: Mapping[str, str]) -> float:
    """
    Reads the per-call ceiling.
    Invalid or missing values fall back to the default; the result is never below 1.0.
    """
    name, raw_value = _lookup(environ, ENV_MAX_DURATION, ENV_MAX_DURATION_ALIAS)
    max_duration = DEFAULT_MAX_DURATION
    if raw_value is None:
        logger.info(f"Env var {ENV_MAX_DURATION} not set. Using default max duration per call: {DEFAULT_MAX_DURATION:.0f} seconds.")
    else:
        try:
            parsed = float(raw_value.strip())
            if not math.isfinite(parsed):
                raise ValueError(f"non-finite value {parsed}")
            max_duration = parsed
            logger.info(f"Using max duration per call from env {name}: {max_duration:.0f} seconds.")
        except ValueError:
            logger.warning(f"Invalid value in {name} ('{raw_value}'). Using default: {DEFAULT_MAX_DURATION:.0f} seconds.")

    max_duration = max(MIN_MAX_DURATION, max_duration)
    logger.info(f"Effective max duration per call: {max_duration:.0f} seconds.")
    return max_duration


def parse_tool_description(environ: Mapping[str, str]) -> str:
    name, description = _lookup(environ, ENV_TOOL_DESCRIPTION, ENV_TOOL_DESCRIPTION_ALIAS)
    if description is None:
        logger.info(f"Env var {ENV_TOOL_DESCRIPTION} not set. Using default tool description.")
        return DEFAULT_TOOL_DESCRIPTION
    logger.info(f"Using custom tool description from env {name}.")
    return description


# Logging settings are read before setup_logging(), so these parsers stay silent
def parse_log_level(environ: Mapping[str, str]) -> int:
    level_str = environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_str)
    return level if isinstance(level, int) else logging.INFO


def parse_log_file_path(environ: Mapping[str, str]) -> Optional[str]:
    return environ.get(ENV_LOG_FILE_PATH) or None


def load_config(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """
    Builds the immutable server configuration.
    Args:
        environ (Mapping): Variables to read. Defaults to os.environ (with .env already loaded).
    Returns:
        ServerConfig: The effective configuration.
    """
    if environ is None:
        environ = os.environ
    return ServerConfig(
        max_duration_seconds=parse_max_duration(environ),
        tool_description=parse_tool_description(environ),
    )
