"""Integration tests: file-backed self-logging and the example scripts."""
