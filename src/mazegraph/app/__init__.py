# src/mazegraph/app/__init__.py
"""Command line report and pygame step viewer."""
