"""Test suite for option-state.

Test organization:
- fixtures/: Shared options and prebuilt states
- unit/: Unit tests for individual modules

Run tests with:
    pytest tests/
    pytest tests/unit/
    pytest tests/ -v --tb=short
"""
