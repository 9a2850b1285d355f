"""Errors.

Language-level failures never raise: the parser collects messages and the
evaluator returns ``Error`` values. The exceptions here are for host code
that wants to stop on those failures.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ParseError(Exception):
    """
    Error for source that did not parse cleanly.
    """
    def __init__(self, errors, file=None):
        self.errors = list(errors)
        self.file = file
        message = "; ".join(self.errors)
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
