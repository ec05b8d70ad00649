"""
Test suite for the Prototype Object System.

Test structure:
- unit/ - Unit tests (fast, isolated, in-memory logs)
- integration/ - Integration tests (file-backed logs, example scripts)
- fixtures/ - Shared prototypes and helpers

Run tests:
    pytest                    # All tests
    pytest tests/unit         # Unit tests only
    pytest tests/integration  # Integration tests only
    pytest -k "extend"        # Tests matching name
    pytest --cov              # With coverage
"""
