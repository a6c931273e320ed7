"""Splitting engine: dispatcher, renderers, writer and fallback splitter."""
