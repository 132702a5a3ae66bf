"""Tests for GeoCryptor module."""
