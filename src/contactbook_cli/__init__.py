"""Command-line driver for the contact book (Typer + Rich)."""
