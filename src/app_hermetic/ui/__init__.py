"""
UI Package - Graphical User Interface of the compressor simulator

This package provides the Tkinter main window of the simulation modules.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from app_hermetic.ui.app import MainWindow

__all__ = ["MainWindow"]
