"""
CloudQA form test suites package.

Kept importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - sharing the framework between unit and UI tests
"""
