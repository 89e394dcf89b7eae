"""Run a chain of commands between an input and an output file, as a shell pipeline does."""

__version__ = "0.1.0"
__all__ = ["splitting", "commands", "cli"]