"""Timesheet Payroll package.

Turns a vendor attendance CSV export into typed per-day attendance records,
monthly attendance statistics and salary breakdowns. Organized by feature
modules (timesheet, attendance, payroll, history) with a thin Flask
controller layer over service/repository layers.
"""
