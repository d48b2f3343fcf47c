"""Run the context_loader test suite under coverage.

Covers the unit tests in tests/unit/ and the loading scenarios in
tests/features/, then prints a line-by-line report for the package.
"""

import sys
from pathlib import Path
import coverage
import pytest

# The suite imports tests.* and context_loader from the project root
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

cov = coverage.Coverage(source=["context_loader"])
cov.start()

exit_code = pytest.main([str(project_root / "tests")])

cov.stop()
cov.save()

# Missing lines point at untested scanner and loader branches
cov.report(show_missing=True)
sys.exit(exit_code)
