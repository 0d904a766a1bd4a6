"""Timesheet Calendar package.

Feature modules (entries, accounting, calendar_view) keep the time-accounting
rules independent from the thin Flask controller layer that renders them.
"""
