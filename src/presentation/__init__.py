"""Presentation layer - command-line interface.

Thin verb dispatchers that call the application services and print their
results. No business logic lives here.

Structure:
- cli/: ``companies`` and ``employees`` commands, shared runner and output
"""
