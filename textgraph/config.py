"""
    Viewer configuration - default input file, payload type, logging.

    Graphs themselves take no configuration beyond their value codec;
    these settings only drive the ``textgraph`` console viewer.
"""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .codecs import ValueType

SAMPLE_PATH = Path(__file__).parent / "data" / "sample.tgf"

# Environment variable overriding ``default_path``
FILE_ENV_VAR = "TEXTGRAPH_FILE"


@dataclass
class ViewerConfig:
    """
    Settings for the console viewer.

    Attributes:
        default_path: File read when no path argument is given.
        value_type:   Payload type used to decode node values.
        encoding:     Text encoding of input files.
        log_level:    Logging level when ``--verbose`` is not given.
    """
    default_path: Path = field(default_factory=lambda: SAMPLE_PATH)
    value_type: ValueType = ValueType.UINT
    encoding: str = "utf-8"
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls) -> 'ViewerConfig':
        """Defaults, with ``default_path`` taken from TEXTGRAPH_FILE when set."""
        config = cls()
        env_path = os.environ.get(FILE_ENV_VAR)
        if env_path:
            config.default_path = Path(env_path)
        return config
