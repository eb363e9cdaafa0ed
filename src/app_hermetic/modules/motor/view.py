"""
Motor View - Display and motor window

Console output of the motor-side snapshot, and the Tkinter window with
controls, metric cards, an animated crank mechanism and history charts.

Two loops run on the Tk event loop: the 1 s simulation tick and the
frame-rate crank animation, which only reads the simulation state.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from app_hermetic.core.state import CycleState


class MotorView:
    """
    View component for the motor simulation.

    No computation should occur here - only presentation.
    """

    @staticmethod
    def display_result(state: CycleState) -> None:
        """
        Display a motor snapshot.

        Args:
            state: Snapshot to display
        """
        print("=" * 60)
        print("HERMETIC MOTOR")
        print("=" * 60)

        status = "RUNNING" if state.is_running else "STOPPED"
        print(f"\nStatus: {status}  |  {state.compressor_rpm:.0f} rpm")
        print(f"Motor temperature: {state.motor_temperature:.1f} °C")
        print(f"Power: {state.power_consumption:.0f} W")
        print(f"Efficiency: {state.motor_efficiency:.1f} %")
        print(f"Load: {state.motor_load * 100:.0f} %")
        print(f"Vibration: {state.vibration_level * 1e3:.3f} mm")
        print(f"Thermal growth: {state.thermal_expansion * 1e6:.1f} µm/m")

        print("\nCycle:")
        print(f"  System temperature: {state.system_temperature:.2f} °C "
              f"(target {state.target_temperature:.1f} °C)")
        print(f"  Pressures: comp {state.compressor_pressure:.2f}, "
              f"cond {state.condenser_pressure:.2f}, evap {state.evaporator_pressure:.2f} bar")
        print("=" * 60)


class MotorTkView:
    """
    Tkinter GUI view for the motor simulation.
    """

    TICK_MS = 1000
    FRAME_MS = 33

    @staticmethod
    def open_window(parent):
        """
        Open motor simulation window.

        Args:
            parent: Parent Tkinter window
        """
        # Import Tkinter and Matplotlib here to avoid issues in headless environments
        import math
        import time
        import tkinter as tk
        from tkinter import ttk, messagebox
        import matplotlib
        matplotlib.use('TkAgg')
        from matplotlib.figure import Figure
        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
        import numpy as np

        from app_hermetic.modules.kinematics import (
            CrankMechanismController,
            CrankMechanismView,
            model as kinematics,
        )
        from app_hermetic.modules.motor.controller import MotorController

        # Create Toplevel window
        window = tk.Toplevel(parent)
        window.title("Hermetic Motor - Simulation")
        window.geometry("1250x800")

        # Controller instances
        controller = MotorController()
        crank = CrankMechanismController()
        defaults = controller.get_default_params()

        # Variables
        var_rpm = tk.DoubleVar(value=defaults['compressor_rpm'])
        var_target = tk.DoubleVar(value=defaults['target_temperature'])
        var_balance = tk.DoubleVar(value=defaults['motor_balance'])
        var_friction = tk.DoubleVar(value=defaults['friction_coefficient'])
        var_defrost = tk.BooleanVar(value=defaults['defrost_mode'])

        loops = {
            "tick_last": time.monotonic(),
            "frame_last": time.monotonic(),
            "start": time.monotonic(),
            "tick_job": None,
            "frame_job": None,
        }

        # ========== LEFT PANEL: Controls ==========
        left_frame = ttk.Frame(window, padding=10)
        left_frame.grid(row=0, column=0, rowspan=2, sticky="nsew", padx=5, pady=5)

        ttk.Label(
            left_frame,
            text="Motor control",
            font=("Arial", 12, "bold"),
        ).grid(row=0, column=0, columnspan=2, pady=10)

        def toggle():
            running = controller.toggle_running()
            btn_toggle.config(text="⏹ Stop" if running else "▶ Start")
            if running:
                var_rpm.set(controller.state.compressor_rpm)
            loops["tick_last"] = time.monotonic()
            refresh()

        btn_toggle = ttk.Button(left_frame, text="▶ Start", command=toggle, width=25)
        btn_toggle.grid(row=1, column=0, columnspan=2, pady=5)

        def apply_rpm(_event=None):
            try:
                controller.set_compressor_rpm(var_rpm.get())
            except (ValueError, tk.TclError) as e:
                messagebox.showerror("Error", f"Invalid speed:\n{str(e)}")
                return
            refresh()

        def apply_target(_event=None):
            try:
                controller.set_target_temperature(var_target.get())
            except (ValueError, tk.TclError) as e:
                messagebox.showerror("Error", f"Invalid target temperature:\n{str(e)}")
                return
            refresh()

        def apply_defrost():
            controller.set_defrost_mode(var_defrost.get())
            refresh()

        def apply_mechanics():
            try:
                controller.set_parameters(
                    motor_balance=var_balance.get(),
                    friction_coefficient=var_friction.get(),
                )
            except (ValueError, tk.TclError) as e:
                messagebox.showerror("Error", f"Invalid parameter:\n{str(e)}")
                return
            var_balance.set(controller.state.motor_balance)
            var_friction.set(controller.state.friction_coefficient)
            refresh()

        ttk.Label(left_frame, text="Speed [rpm]:").grid(row=2, column=0, sticky="w", pady=2)
        rpm_entry = ttk.Entry(left_frame, textvariable=var_rpm, width=10)
        rpm_entry.grid(row=2, column=1, pady=2)
        rpm_entry.bind("<Return>", apply_rpm)
        rpm_scale = ttk.Scale(left_frame, from_=0, to=3000, variable=var_rpm, orient=tk.HORIZONTAL)
        rpm_scale.grid(row=3, column=0, columnspan=2, sticky="ew")
        rpm_scale.bind("<ButtonRelease-1>", apply_rpm)

        ttk.Label(left_frame, text="Target temperature [°C]:").grid(row=4, column=0, sticky="w", pady=2)
        target_entry = ttk.Entry(left_frame, textvariable=var_target, width=10)
        target_entry.grid(row=4, column=1, pady=2)
        target_entry.bind("<Return>", apply_target)

        ttk.Checkbutton(
            left_frame, text="Defrost mode", variable=var_defrost, command=apply_defrost,
        ).grid(row=5, column=0, columnspan=2, sticky="w", pady=5)

        ttk.Separator(left_frame, orient="horizontal").grid(
            row=6, column=0, columnspan=2, sticky="ew", pady=10
        )

        ttk.Label(left_frame, text="Mechanics:", font=("Arial", 10, "bold")).grid(
            row=7, column=0, columnspan=2, pady=5, sticky="w"
        )
        ttk.Label(left_frame, text="Rotor balance [0-1]:").grid(row=8, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_balance, width=10).grid(row=8, column=1, pady=2)
        ttk.Label(left_frame, text="Friction coefficient:").grid(row=9, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_friction, width=10).grid(row=9, column=1, pady=2)
        ttk.Button(left_frame, text="✔ Apply", command=apply_mechanics, width=25).grid(
            row=10, column=0, columnspan=2, pady=5
        )

        # Frame readout
        frame_text = tk.Text(left_frame, width=34, height=9, wrap="word")
        frame_text.grid(row=11, column=0, columnspan=2, pady=10, sticky="nsew")

        # ========== TOP RIGHT: Cards, alerts, crank canvas ==========
        top_frame = ttk.Frame(window, padding=5)
        top_frame.grid(row=0, column=1, sticky="nsew", padx=5, pady=5)
        for i in range(4):
            top_frame.columnconfigure(i, weight=1)

        card_style = {'relief': tk.RAISED, 'borderwidth': 2, 'padding': 8}
        cards = {}
        for i, (key, title) in enumerate((
            ("rpm", "Speed"),
            ("temperature", "Motor temperature"),
            ("power", "Power"),
            ("efficiency", "Efficiency"),
        )):
            card = ttk.LabelFrame(top_frame, text=title, **card_style)
            card.grid(row=0, column=i, padx=5, pady=5, sticky="nsew")
            value = ttk.Label(card, text="--", font=('Arial', 18, 'bold'))
            value.pack()
            cards[key] = value

        crank_canvas = tk.Canvas(top_frame, bg='white', width=360, height=300)
        crank_canvas.grid(row=1, column=0, columnspan=2, sticky="nsew", pady=5)

        alerts_frame = ttk.LabelFrame(top_frame, text="Alerts", padding=5)
        alerts_frame.grid(row=1, column=2, columnspan=2, sticky="nsew", padx=5, pady=5)
        alerts_list = tk.Listbox(alerts_frame, height=10)
        alerts_list.pack(fill="both", expand=True)

        # ========== BOTTOM RIGHT: Charts ==========
        plot_frame = ttk.LabelFrame(window, text="Motor history and stroke", padding=10)
        plot_frame.grid(row=1, column=1, sticky="nsew", padx=5, pady=5)

        fig = Figure(figsize=(10, 3.5), dpi=90)
        ax_temp = fig.add_subplot(131)
        ax_power = fig.add_subplot(132)
        ax_stroke = fig.add_subplot(133)

        canvas = FigureCanvasTkAgg(fig, master=plot_frame)
        canvas.get_tk_widget().pack(fill="both", expand=True)

        mech = crank.mechanism
        theta, offset = kinematics.stroke_profile(mech.crank_radius, mech.rod_length)

        severity_colors = {"error": "red", "warning": "#cc7a00", "info": "#00539F"}

        def refresh():
            """Update cards, alerts and charts from the current snapshot."""
            s = controller.snapshot()
            cards["rpm"].config(text=f"{s.compressor_rpm:.0f} rpm")
            cards["temperature"].config(text=f"{s.motor_temperature:.1f} °C")
            cards["power"].config(text=f"{s.power_consumption:.0f} W")
            cards["efficiency"].config(text=f"{s.motor_efficiency:.1f} %")

            alerts_list.delete(0, "end")
            for msg in controller.alert_messages():
                alerts_list.insert("end", f"{msg.title}: {msg.message}")
                alerts_list.itemconfig("end", foreground=severity_colors[msg.severity])
            if controller.last_error:
                alerts_list.insert("end", f"Tick rejected: {controller.last_error}")
                alerts_list.itemconfig("end", foreground="red")

            plot_history()

        def plot_history():
            history = controller.history
            for ax in (ax_temp, ax_power, ax_stroke):
                ax.clear()

            if len(history) > 0:
                t = history.series("timestamp")
                t = t - t[0]
                ax_temp.plot(t, history.series("motor_temperature"), 'r-', linewidth=2, label='Motor')
                ax_temp.plot(t, history.series("system_temperature"), 'b-', linewidth=1.5, label='System')
                ax_temp.legend(loc='best', fontsize=8)
                ax_power.plot(t, history.series("power_consumption"), 'k-', linewidth=2)

            ax_stroke.plot(np.degrees(theta), offset * 1e3, 'g-', linewidth=2)
            ax_stroke.axvline(math.degrees(crank.crank_angle), color='gray', linestyle='--')

            ax_temp.set_title('Temperature [°C]', fontsize=10, fontweight='bold')
            ax_power.set_title('Power [W]', fontsize=10, fontweight='bold')
            ax_stroke.set_title('Piston offset [mm]', fontsize=10, fontweight='bold')
            ax_stroke.set_xlabel('Crank angle [°]')
            for ax in (ax_temp, ax_power):
                ax.set_xlabel('Time [s]')
            for ax in (ax_temp, ax_power, ax_stroke):
                ax.grid(True, alpha=0.3)

            fig.tight_layout()
            canvas.draw()

        def tick():
            now = time.monotonic()
            if controller.advance(now - loops["tick_last"]):
                refresh()
            loops["tick_last"] = now
            loops["tick_job"] = window.after(MotorTkView.TICK_MS, tick)

        def animate():
            now = time.monotonic()
            s = controller.state
            frame = crank.advance(
                dt=now - loops["frame_last"],
                rpm=s.compressor_rpm,
                temperature=s.motor_temperature,
                load=s.motor_load,
                elapsed=now - loops["start"],
            )
            loops["frame_last"] = now
            CrankMechanismView.draw(crank_canvas, frame, mech)

            frame_text.delete("1.0", "end")
            frame_text.insert("1.0", "\n".join([
                f"Shaft: {frame.rpm:.0f} rpm",
                f"Crank angle: {math.degrees(frame.crank_angle):.0f}°",
                f"Piston: {frame.piston_position * 1e3:.1f} mm",
                f"Acceleration: {frame.piston_acceleration:.0f} m/s²",
                f"Cylinder: {frame.cylinder_pressure:.2f} atm",
                f"Vibration: {frame.vibration_amplitude * 1e3:.3f} mm",
                f"Frequency: {frame.vibration_frequency:.1f} Hz",
                f"Thermal growth: {frame.thermal_growth * 1e6:.1f} µm/m",
            ]))
            loops["frame_job"] = window.after(MotorTkView.FRAME_MS, animate)

        def on_close():
            for job in ("tick_job", "frame_job"):
                if loops[job] is not None:
                    window.after_cancel(loops[job])
            window.destroy()

        window.protocol("WM_DELETE_WINDOW", on_close)

        # Configure grid weights
        window.columnconfigure(0, weight=0)
        window.columnconfigure(1, weight=1)
        window.rowconfigure(0, weight=1)
        window.rowconfigure(1, weight=1)

        refresh()
        loops["tick_job"] = window.after(MotorTkView.TICK_MS, tick)
        loops["frame_job"] = window.after(MotorTkView.FRAME_MS, animate)
