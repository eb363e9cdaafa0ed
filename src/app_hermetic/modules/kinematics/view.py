"""
Kinematics View - Crank mechanism display

Console output of a CrankFrame and the Tkinter canvas drawing of the
compressor cross-section (housing, cylinder, piston, rod, crank).

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import math

from app_hermetic.modules.kinematics.controller import CrankFrame, CrankMechanism


class CrankMechanismView:
    """
    View component for the crank mechanism.

    No computation of physics here: every position comes from the frame.
    """

    @staticmethod
    def display_frame(frame: CrankFrame) -> None:
        """
        Print one animation frame.

        Args:
            frame: Frame to display
        """
        print("=" * 60)
        print("CRANK MECHANISM")
        print("=" * 60)
        print(f"\nShaft speed: {frame.rpm:.0f} rpm")
        print(f"Crank angle: {math.degrees(frame.crank_angle):.1f}°")
        print(f"Piston offset: {frame.piston_position * 1e3:.1f} mm from TDC")
        print(f"Piston acceleration: {frame.piston_acceleration:.1f} m/s²")
        print(f"Rod angle: {math.degrees(frame.rod_angle):.1f}°")
        print(f"Cylinder pressure: {frame.cylinder_pressure:.2f} atm")
        print(f"Vibration: {frame.vibration_amplitude * 1e3:.3f} mm @ {frame.vibration_frequency:.1f} Hz")
        print(f"Thermal growth: {frame.thermal_growth * 1e6:.1f} µm/m")
        print("=" * 60)

    @staticmethod
    def draw(canvas, frame: CrankFrame, mechanism: CrankMechanism, pixels_per_metre: float = 300.0) -> None:
        """
        Draw the mechanism on a Tkinter canvas.

        The crank centre sits in the lower middle of the canvas, the
        cylinder points up. The housing is shifted by the frame's
        vibration offsets.

        Args:
            canvas: tk.Canvas to draw on (cleared first)
            frame: Current animation frame
            mechanism: Geometry used to compute the frame
            pixels_per_metre: Drawing scale
        """
        canvas.delete("all")
        w = canvas.winfo_width() if canvas.winfo_width() > 1 else 400
        h = canvas.winfo_height() if canvas.winfo_height() > 1 else 400

        r = mechanism.crank_radius * pixels_per_metre
        l = mechanism.rod_length * pixels_per_metre

        # Shake is in metres, exaggerated for visibility
        dx = frame.housing_offset_x * pixels_per_metre * 50
        dy = frame.housing_offset_y * pixels_per_metre * 50
        cx = w / 2 + dx
        cy = h * 0.72 + dy

        # Housing
        canvas.create_oval(cx - r - 30, cy - r - 30, cx + r + 30, cy + r + 30,
                           outline='#555555', width=3, fill='#eeeeee')

        # Cylinder bore, TDC at l + r above the crank centre
        piston_w = 0.6 * r + 20
        top = cy - (l + r) - 40
        canvas.create_rectangle(cx - piston_w, top, cx + piston_w, cy - l + r,
                                outline='#333333', width=2, fill='#f8f8ff')

        # Crank pin
        pin_x = cx + r * math.sin(frame.crank_angle)
        pin_y = cy - r * math.cos(frame.crank_angle)

        # Piston (offset is 0 at TDC, negative downward)
        piston_y = cy - (l + r + frame.piston_position * pixels_per_metre)
        canvas.create_rectangle(cx - piston_w + 4, piston_y - 25, cx + piston_w - 4, piston_y + 5,
                                fill='#a0a0a0', outline='#404040', width=2)

        # Gas above the piston, colored by pressure
        shade = max(0, min(255, int(255 - frame.cylinder_pressure * 12)))
        canvas.create_rectangle(cx - piston_w + 2, top + 2, cx + piston_w - 2, piston_y - 26,
                                fill=f'#ff{shade:02x}{shade:02x}', outline='')

        # Connecting rod and crank web
        canvas.create_line(pin_x, pin_y, cx, piston_y, fill='#2060c0', width=6)
        canvas.create_line(cx, cy, pin_x, pin_y, fill='#c04020', width=8)
        canvas.create_oval(cx - 8, cy - 8, cx + 8, cy + 8, fill='black')
        canvas.create_oval(pin_x - 5, pin_y - 5, pin_x + 5, pin_y + 5, fill='white')

        canvas.create_text(10, 10, anchor='nw', font=('Arial', 9),
                           text=f"{frame.rpm:.0f} rpm   {frame.cylinder_pressure:.2f} atm")
