"""Command line interface for apicompare."""
