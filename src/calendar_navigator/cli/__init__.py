"""Command-line interface for calendar_navigator.

Provides the `calnav` command for driving a Calendar from the shell.
"""
