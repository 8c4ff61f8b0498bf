"""
EduContent AI Test Suite

Test Structure:
    tests/
    ├── conftest.py          # Test environment and shared fixtures
    └── unit/                # Unit tests (isolated, no external dependencies)
        ├── test_streaks.py        # Study streak rules
        ├── test_aggregation.py    # Daily series and breakdowns
        ├── test_augmenter.py      # Markdown augmentation passes
        ├── test_api_routes.py     # Routes against in-memory fakes
        └── ...

Running Tests:
    # Run all tests
    pytest backend/tests/ -v
"""
