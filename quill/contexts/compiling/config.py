"""
Compiler configuration.

Loads compiler_config.yaml with OmegaConf. The file location can be
overridden with the QUILL_COMPILER_CONFIG environment variable.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
COMPILER_CONFIG_PATH = Path(
    os.getenv("QUILL_COMPILER_CONFIG", Path(__file__).parent / "compiler_config.yaml")
)


@dataclass(frozen=True)
class CompilerConfig:
    """Typed view of compiler_config.yaml."""

    article_section_names: Tuple[str, ...]
    article_max_title_length: int
    freeform_min_heading_length: int
    fallback_section_title: str


def load_compiler_config(config_path: Path = None) -> CompilerConfig:
    """
    Load compiler settings from YAML.

    Args:
        config_path: Optional path to config file (defaults to QUILL_COMPILER_CONFIG)

    Returns:
        CompilerConfig
    """
    if config_path is None:
        config_path = COMPILER_CONFIG_PATH

    raw = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    return CompilerConfig(
        article_section_names=tuple(name.lower() for name in raw["article"]["section_names"]),
        article_max_title_length=int(raw["article"]["max_title_length"]),
        freeform_min_heading_length=int(raw["freeform"]["min_heading_length"]),
        fallback_section_title=str(raw["fallback_section_title"]),
    )


# Read-only settings shared by every compile call
COMPILER_CONFIG = load_compiler_config()
