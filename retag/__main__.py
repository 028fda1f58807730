"""Allow running as ``python -m retag``."""

from retag.main import main

main()
