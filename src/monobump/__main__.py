"""Allow running as ``python -m monobump``."""

from monobump.cli.app import main

main()
