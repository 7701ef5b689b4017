"""Browser-driven testing: framework, page objects and live form tests."""
