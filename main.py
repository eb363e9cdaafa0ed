"""
Main entry point for the Hermetic Compressor Simulator

Launch the application with: python main.py

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from app_hermetic.ui.app import main

if __name__ == "__main__":
    main()
