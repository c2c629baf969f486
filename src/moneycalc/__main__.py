# src/moneycalc/__main__.py
"""Allow ``python -m moneycalc``."""
from moneycalc.app import main

if __name__ == "__main__":
    main()
