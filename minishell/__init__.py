"""A small interactive command shell with builtins, pipes, redirections and variable expansion."""

__version__ = "0.1.0"

__all__ = ["__version__"]