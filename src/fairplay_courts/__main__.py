"""Main entry point for the FairPlay courts server."""

from .combined_server import main

if __name__ == "__main__":
    main()
