"""Command line app for rendering icons."""
