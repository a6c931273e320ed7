"""Data models for chunks and splitter configuration."""
