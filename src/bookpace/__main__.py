"""Allow running as ``python -m bookpace``."""

from .tracker.cli import main

if __name__ == "__main__":
    main()
