"""
Entry point for the Hermetic Compressor Simulator

Allows running the application with: python -m app_hermetic

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from app_hermetic.ui.app import main

if __name__ == "__main__":
    main()
