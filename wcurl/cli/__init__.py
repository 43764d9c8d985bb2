"""
Command-Line Layer.

This package holds the Typer application, the wcurl argument grammar and the
console output helpers.
"""
