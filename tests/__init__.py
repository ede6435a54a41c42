"""
Test suite for the TaskFlow AI browser test kit.

This package contains:
- unit/: Fast tests of the kit with mocked browser objects
- ui/: Browser tests of the kit against fixture pages
- e2e/: Feature specs against a running TaskFlow AI instance
"""
