"""
Logging setup shared by every context.

Each CLI run gets its own session directory holding one log file. The file
keeps the full DEBUG trail; stderr shows the console level only, leaving
stdout free for html piped to a file or browser. Context-specific prefix
wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from quill import __version__
from quill.utils.timestamp import format_timestamp, now

load_dotenv()

SESSION_RULE = "-" * 60

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> <level>{level: <7}</level> {message}"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = {},
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output for one session to {log_dir}/{context_name}.log and stderr.

    Existing sinks are removed first, so calling this again starts a fresh
    session instead of duplicating output.

    Args:
        context_name: Log file stem (e.g., "compile")
        log_dir: Session directory, created if missing
        extra_provenance: Extra header lines (e.g., {"Source": "resume.tex"})
        level_colors: Console color overrides per level
        console_level: Minimum level echoed to stderr

    Returns:
        Path to the session log file

    Example:
        setup_logger(
            context_name="compile",
            log_dir=Path("outs/logs/compile_20251114_123456"),
            extra_provenance={"Source": "resume.tex"},
            console_level="DEBUG",
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **level_colors}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    session = {"Log file": log_file, "Console level": console_level}
    log_provenance({**session, **(extra_provenance or {})})

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Write a session header at DEBUG level: quill version, start time, argv, cwd
    and interpreter, followed by any extra key-value pairs.
    """
    logger.debug(SESSION_RULE)
    logger.debug(f"quill {__version__} session started {format_timestamp(now())} UTC")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]} ({sys.executable})")

    for key, value in (extra_context or {}).items():
        logger.debug(f"{key}: {value}")

    logger.debug(SESSION_RULE)
