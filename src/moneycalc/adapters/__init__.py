# src/moneycalc/adapters/__init__.py
"""
Adapters Layer - External System Integrations

This package contains adapters for external systems:
- Providers (Frankfurter REST API)
- Formatting (money display text, help page)
- Charting (Matplotlib)
- Tk (desktop UI shell)
"""
