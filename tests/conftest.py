from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def keep_log_sinks():
    """Stop the CLI from replacing log sinks with ones bound to captured streams."""
    with patch("passgen.cli.configure_logging") as configure:
        yield configure
