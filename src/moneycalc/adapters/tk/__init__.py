# src/moneycalc/adapters/tk/__init__.py
"""
Tk Adapters - Desktop UI Shell

This package contains the Tkinter window, dialogs and displays. Importing
it requires a Tk-enabled Python build.
"""
