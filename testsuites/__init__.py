"""
Test suites package.

Kept importable so unit tests can share fakes (``testsuites.unit.fakes``).
"""
