# src/moneycalc/__init__.py
"""
MoneyCalc - Desktop Money Calculator

A Tkinter desktop application that converts an amount between two currencies
using live Frankfurter exchange rates and draws an animated one-year chart
of the rate history.
"""

__version__ = "1.0.0"
