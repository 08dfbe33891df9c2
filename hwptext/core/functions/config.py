# hwptext/core/functions/config.py
"""
Extraction Configuration

Handlers receive configuration either as an ExtractionConfig instance or as
a plain dict (keys matching the dataclass fields). Unknown keys are ignored
with a warning so one config dict can be shared with other components.
"""
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Union

logger = logging.getLogger("hwptext")

# Decompressed stream size limit (bytes)
DEFAULT_MAX_STREAM_SIZE = 256 * 1024 * 1024


@dataclass
class ExtractionConfig:
    """Text extraction options.

    Attributes:
        include_placeholders: Emit [Image]/[Object]/[Table] tokens for inline
            objects that carry no text of their own
        paragraph_separator: String placed between paragraphs of a section
        section_separator: String placed between sections
        max_stream_size: Upper bound on a single decompressed stream
        max_workers: Default thread count for batch extraction (None = executor default)
    """
    include_placeholders: bool = True
    paragraph_separator: str = "\n"
    section_separator: str = "\n\n"
    max_stream_size: int = DEFAULT_MAX_STREAM_SIZE
    max_workers: Optional[int] = None

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]]) -> "ExtractionConfig":
        """Build config from a plain dictionary."""
        if not config:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = [key for key in config if key not in known]
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {unknown}")
        return cls(**{key: value for key, value in config.items() if key in known})


def resolve_config(
    config: Union[ExtractionConfig, Dict[str, Any], None]
) -> ExtractionConfig:
    if isinstance(config, ExtractionConfig):
        return config
    return ExtractionConfig.from_dict(config)


__all__ = [
    'ExtractionConfig',
    'DEFAULT_MAX_STREAM_SIZE',
    'resolve_config',
]
