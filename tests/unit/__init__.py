"""Unit tests for the Prototype Object System.

Fast, isolated tests for individual components.
No filesystem (self-logging stays in memory).
"""
