"""Command-line entry points (``companies`` and ``employees``)."""
