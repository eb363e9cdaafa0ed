"""
Main Application Window - Hermetic Compressor Simulator

Provides the main window with buttons to access the simulation modules.
Each module window owns its own controller; they share no state.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import logging
import tkinter as tk
from tkinter import ttk


class MainWindow:
    """
    Main application window of the compressor simulator.

    Provides access to individual module simulations through buttons.
    """

    def __init__(self):
        """Initialize the main application window."""
        self.root = tk.Tk()
        self.root.title("Hermetic Compressor Simulator")
        self.root.geometry("560x360")

        self._setup_ui()

    def _setup_ui(self):
        """Set up the user interface components."""
        # Header
        header = ttk.Label(
            self.root,
            text="Hermetic Refrigeration Compressor",
            font=("Arial", 16, "bold"),
        )
        header.pack(pady=20)

        # Description
        desc = ttk.Label(
            self.root,
            text="Slider-crank motor and vapor-compression cycle simulation",
            font=("Arial", 10),
        )
        desc.pack(pady=10)

        ttk.Separator(self.root, orient="horizontal").pack(fill="x", pady=20)

        # Module buttons frame
        modules_frame = ttk.LabelFrame(
            self.root,
            text="Simulation Modules",
            padding=20,
        )
        modules_frame.pack(padx=20, pady=10, fill="both", expand=True)

        self._create_module_buttons(modules_frame)

        # Footer
        footer = ttk.Label(
            self.root,
            text="Hermetic Compressor Simulator Project - 2026",
            font=("Arial", 8),
            foreground="gray",
        )
        footer.pack(side="bottom", pady=10)

    def _create_module_buttons(self, parent):
        """
        Create buttons for each simulation module.

        Args:
            parent: Parent frame widget
        """
        button_style = {"width": 30, "padding": 10}

        btn_motor = ttk.Button(
            parent,
            text="⚙️ Hermetic Motor",
            command=self._open_motor,
            **button_style,
        )
        btn_motor.grid(row=0, column=0, padx=10, pady=5, sticky="ew")

        btn_refrigeration = ttk.Button(
            parent,
            text="❄️ Refrigeration Cycle (Dashboard)",
            command=self._open_refrigeration,
            **button_style,
        )
        btn_refrigeration.grid(row=1, column=0, padx=10, pady=5, sticky="ew")

        parent.columnconfigure(0, weight=1)

    def _open_motor(self):
        """Open the motor simulation window."""
        # Import here to avoid circular dependencies and allow headless testing
        from app_hermetic.modules.motor.view import MotorTkView

        MotorTkView.open_window(self.root)

    def _open_refrigeration(self):
        """Open the refrigeration dashboard."""
        # Import here to avoid circular dependencies and allow headless testing
        from app_hermetic.modules.refrigeration.view import RefrigerationTkView

        RefrigerationTkView.open_window(self.root)

    def run(self):
        """Start the application main loop."""
        self.root.mainloop()


def main():
    """Entry point for the UI application."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = MainWindow()
    app.run()


if __name__ == "__main__":
    main()
