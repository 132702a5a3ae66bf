"""Unit tests for the codecs, the bounding box and the CLI."""
