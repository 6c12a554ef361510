"""tiny_color.core — Color type, image sampling, report formatting, CLI settings.

types.py has no third-party dependencies. numpy and PIL are only imported
by sample.py.
"""
