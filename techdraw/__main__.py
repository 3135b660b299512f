"""CLI entry point: python -m techdraw"""

from techdraw.cli import main

if __name__ == "__main__":
    main()
