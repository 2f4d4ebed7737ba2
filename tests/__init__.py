"""Test suite for pwalign."""
