"""Default configuration values for mdsplit."""

DEFAULT_CHUNK_SIZE = 512
DEFAULT_CHUNK_OVERLAP = 100

# Tiers tried by the fallback splitter, most preferred first
DEFAULT_SEPARATORS: list[str] = [
    "\n\n",  # paragraph break
    "\n",  # line break
    " ",  # word
]

DEFAULT_LENGTH_UNIT = "chars"
DEFAULT_ENCODING_NAME = "cl100k_base"

# Environment variable to field name mapping
ENV_VAR_MAP: dict[str, str] = {
    "chunk_size": "MDSPLIT_CHUNK_SIZE",
    "chunk_overlap": "MDSPLIT_CHUNK_OVERLAP",
    "length_unit": "MDSPLIT_LENGTH_UNIT",
    "encoding_name": "MDSPLIT_ENCODING_NAME",
}
