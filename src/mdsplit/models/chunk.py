"""Chunk model shared by the markdown splitter and the fallback splitter."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Chunk:
    """One unit of output text plus its metadata.

    Attributes:
        text: The chunk text.
        metadata: Metadata mapping, typically the active heading context
            produced by a level-header function. Empty when no function
            is configured.

    Example:
        >>> chunk = Chunk(text="## Install\\nRun the installer.\\n",
        ...               metadata={"h2": "Install"})
        >>> chunk.metadata["h2"]
        'Install'
    """

    text: str
    metadata: dict[str, Any] = field(default_factory=dict)
