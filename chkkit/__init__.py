"""Test helpers: simulated I/O failures, got/want markup, regex substitutions and temporary file cleanup."""

__version__ = "0.1.0"

__all__ = ["errors", "markup", "iosim", "substitution", "tmpdir"]