"""Command-line interface for synctime.

The typer app lives in :mod:`synctime.cli.app`; it is not imported here so
that the sync flow can use :mod:`synctime.cli.helpers` without pulling in the
CLI.
"""
