"""
Compiling context logger.

Provides logging interface for compiling context with automatic [compile] prefix.
All compiling modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from quill.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[compile]"


def setup_compiling_logger(log_dir: Path, source_name: str, console_level: str = "INFO") -> Path:
    """
    Setup logger for compiling context.

    Args:
        log_dir: Directory for this compile session
        source_name: Name of the source being compiled (for provenance)
        console_level: Minimum console level ("DEBUG" for verbose runs)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="compile",
        log_dir=log_dir,
        extra_provenance={"Source": source_name},
        console_level=console_level,
    )


# Wrapper functions with automatic [compile] prefix


def _log_success(message: str) -> None:
    """Log success message with [compile] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [compile] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compile] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level compiling-specific logging helpers


def log_compile_result(result, elapsed_time: float) -> None:
    """
    Log a compile result.

    Args:
        result: CompileResult from compile_latex()
        elapsed_time: Time taken in seconds
    """
    if result.error:
        _log_error(f"Compilation failed ({elapsed_time * 1000:.1f}ms): {result.error}")
        return

    dialect = result.dialect.value if result.dialect else "none"
    _log_success(
        f"Compiled {result.word_count} words as {dialect} ({elapsed_time * 1000:.1f}ms)"
    )
