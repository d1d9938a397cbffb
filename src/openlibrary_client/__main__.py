"""Main entry point for ``python -m openlibrary_client``."""

from openlibrary_client.cli import main

if __name__ == "__main__":
    main()
