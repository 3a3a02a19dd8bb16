"""
krx18 Main Entry Point - allows ``python -m krx18``.
"""

from krx18.cli.main import cli_main

if __name__ == "__main__":
    cli_main()
