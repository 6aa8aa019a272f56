"""
Command Line Interface Package

Entry point: financial-year

Command Structure:
- financial-year: Main entry point with global year options (--type, --start,
  --fifty-three-weeks) and utility commands (version, config)
- financial-year summary / periods / weeks: Print the year's boundaries
- financial-year period-of / week-of: Resolve a date to its period or week
"""
