"""
Main entry point for the mvc_generator package.

When run as `python -m mvc_generator <resource-name>`, it behaves exactly
like the ``generate`` console script.
"""

from mvc_generator.cli import main

if __name__ == "__main__":
    main()
