#!/usr/bin/env python3
"""Main entry point for Cavern Quest."""

import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

def run():
    """Run the game."""
    from cavern.main import main

    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nGoodbye!")

if __name__ == "__main__":
    run()
