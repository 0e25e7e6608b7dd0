"""
Login UI automation package.

Kept importable so that page objects and framework helpers can be used from
IDE navigation, `run_tests.py` and CI jobs alike.
"""
