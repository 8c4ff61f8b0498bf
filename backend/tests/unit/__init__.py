"""
Unit Tests

Unit tests run in isolation without external dependencies.
The database and the LLM backend are mocked or replaced by fakes.

These tests are fast and need no running services.
"""
