"""Tests run without optional dependencies."""
