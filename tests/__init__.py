"""
shopify-theme-setup test suite
==============================

Test Modules
------------
- test_models.py: Configuration model and config file table
- test_runner.py: External command execution
- test_prompts.py: Overwrite confirmation
- test_manifest.py: package.json handling
- test_bootstrap.py: Individual stages and the full pipeline
- test_cli.py: Command-line interface

No test runs the real npm, npx, git or node; ``conftest.FakeRunner``
stands in for them.

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_bootstrap.py

    # Run specific test class
    pytest tests/test_bootstrap.py::TestRunSetup
"""
