"""UI testing: framework helpers, page objects and browser tests."""
