"""CLI command groups for calendar_navigator.

Command groups:
- nav: Show, step through, and inspect calendar navigation
- config: Stored default settings
"""
