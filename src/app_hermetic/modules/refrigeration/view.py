"""
Refrigeration View - Display and dashboard

Console output of a cycle snapshot, and the Tkinter dashboard with
operator controls, metric cards, alert list and history charts
(Matplotlib). The dashboard ticks the controller once per second.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from typing import List, Optional

from app_hermetic.core.state import AlertMessage, CycleState


class RefrigerationView:
    """
    View component for the refrigeration cycle.

    Responsible for formatting and displaying snapshots.
    No computation should occur here - only presentation.
    """

    @staticmethod
    def display_result(
        state: CycleState,
        messages: Optional[List[AlertMessage]] = None,
        verbose: bool = True,
    ) -> None:
        """
        Display a cycle snapshot.

        Args:
            state: Snapshot to display
            messages: Operator alerts to list after the flags
            verbose: If True, show refrigerant phase labels
        """
        print("=" * 60)
        print("REFRIGERATION CYCLE")
        print("=" * 60)

        status = "RUNNING" if state.is_running else "STOPPED"
        if state.defrost_mode:
            status += " (defrost)"
        print(f"\nStatus: {status}  |  {state.compressor_rpm:.0f} rpm  |  {state.refrigerant_type}")
        print(f"Temperature: {state.system_temperature:.2f} °C (target {state.target_temperature:.1f} °C)")

        print("\nPressures:")
        print(f"  Compressor: {state.compressor_pressure:.2f} bar")
        print(f"  Condenser:  {state.condenser_pressure:.2f} bar")
        print(f"  Evaporator: {state.evaporator_pressure:.2f} bar")

        print("\nPerformance:")
        print(f"  Flow: {state.refrigerant_flow:.2f}")
        print(f"  Power: {state.power_consumption:.1f} W")
        print(f"  Cooling capacity: {state.cooling_capacity:.1f} W")
        print(f"  COP: {state.cop:.2f}")
        print(f"  Superheat: {state.superheat:.1f} °C, subcooling: {state.subcooling:.1f} °C")

        if verbose:
            print("\nRefrigerant state:")
            for point, label in state.refrigerant_state.items():
                print(f"  {point}: {label}")

        print("\nDiagnostic Flags:")
        for flag_name, flag_value in state.alerts.items():
            status = "⚠️  ACTIVE" if flag_value else "✓ OK"
            print(f"  {flag_name}: {status}")

        if messages:
            print("\nAlerts:")
            for msg in messages:
                print(f"  [{msg.severity.upper()}] {msg.title}: {msg.message}")

        print("=" * 60)

    @staticmethod
    def display_summary(state: CycleState) -> None:
        """
        Display compact summary of a snapshot.

        Args:
            state: Snapshot to summarize
        """
        print(f"Cycle: T={state.system_temperature:.2f} °C, "
              f"P_cond={state.condenser_pressure:.2f} bar, "
              f"COP={state.cop:.2f}", end="")

        active = state.active_alerts()
        if active:
            print(f" [WARNINGS: {', '.join(active)}]")
        else:
            print()


class RefrigerationTkView:
    """
    Tkinter dashboard for the refrigeration cycle.

    Provides on/off, setpoint, speed and defrost controls, cycle parameters,
    metric cards, an alert list and live history charts.
    """

    TICK_MS = 1000

    SEVERITY_COLORS = {
        "error": "red",
        "warning": "#cc7a00",
        "info": "#00539F",
    }

    @staticmethod
    def open_window(parent):
        """
        Open the refrigeration dashboard window.

        Args:
            parent: Parent Tkinter window
        """
        # Import Tkinter and Matplotlib here to avoid issues in headless environments
        import time
        import tkinter as tk
        from tkinter import ttk, messagebox
        import matplotlib
        matplotlib.use('TkAgg')
        from matplotlib.figure import Figure
        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

        from app_hermetic.modules.refrigeration.controller import RefrigerationController

        # Create Toplevel window
        window = tk.Toplevel(parent)
        window.title("Refrigeration Cycle - Dashboard")
        window.geometry("1300x850")

        # Controller instance
        controller = RefrigerationController()
        defaults = controller.get_default_params()

        # Variables
        var_target = tk.DoubleVar(value=defaults['target_temperature'])
        var_rpm = tk.DoubleVar(value=defaults['compressor_rpm'])
        var_defrost = tk.BooleanVar(value=defaults['defrost_mode'])
        param_vars = {
            key: tk.DoubleVar(value=defaults[key])
            for key in (
                'refrigerant_charge',
                'expansion_valve_opening',
                'compressor_efficiency',
                'condenser_efficiency',
                'evaporator_efficiency',
                'ambient_temperature',
            )
        }

        # Tick loop bookkeeping
        loop = {"last": time.monotonic(), "job": None}

        # ========== LEFT PANEL: Controls ==========
        left_frame = ttk.Frame(window, padding=10)
        left_frame.grid(row=0, column=0, rowspan=2, sticky="nsew", padx=5, pady=5)

        ttk.Label(
            left_frame,
            text="Operation",
            font=("Arial", 12, "bold"),
        ).grid(row=0, column=0, columnspan=2, pady=10)

        def toggle():
            running = controller.toggle_running()
            btn_toggle.config(text="⏹ Stop" if running else "▶ Start")
            if running:
                var_rpm.set(controller.state.compressor_rpm)
            loop["last"] = time.monotonic()
            refresh()

        btn_toggle = ttk.Button(left_frame, text="▶ Start", command=toggle, width=25)
        btn_toggle.grid(row=1, column=0, columnspan=2, pady=5)

        def apply_target(_event=None):
            try:
                controller.set_target_temperature(var_target.get())
            except (ValueError, tk.TclError) as e:
                messagebox.showerror("Error", f"Invalid target temperature:\n{str(e)}")
                return
            var_target.set(round(controller.state.target_temperature, 1))
            refresh()

        def apply_rpm(_event=None):
            try:
                controller.set_compressor_rpm(var_rpm.get())
            except (ValueError, tk.TclError) as e:
                messagebox.showerror("Error", f"Invalid speed:\n{str(e)}")
                return
            refresh()

        def apply_defrost():
            controller.set_defrost_mode(var_defrost.get())
            refresh()

        ttk.Label(left_frame, text="Target temperature [°C]:").grid(row=2, column=0, sticky="w", pady=2)
        target_entry = ttk.Entry(left_frame, textvariable=var_target, width=10)
        target_entry.grid(row=2, column=1, pady=2)
        target_entry.bind("<Return>", apply_target)
        target_scale = ttk.Scale(left_frame, from_=-30, to=20, variable=var_target, orient=tk.HORIZONTAL)
        target_scale.grid(row=3, column=0, columnspan=2, sticky="ew")
        target_scale.bind("<ButtonRelease-1>", apply_target)

        ttk.Label(left_frame, text="Compressor speed [rpm]:").grid(row=4, column=0, sticky="w", pady=2)
        rpm_entry = ttk.Entry(left_frame, textvariable=var_rpm, width=10)
        rpm_entry.grid(row=4, column=1, pady=2)
        rpm_entry.bind("<Return>", apply_rpm)
        rpm_scale = ttk.Scale(left_frame, from_=0, to=3000, variable=var_rpm, orient=tk.HORIZONTAL)
        rpm_scale.grid(row=5, column=0, columnspan=2, sticky="ew")
        rpm_scale.bind("<ButtonRelease-1>", apply_rpm)

        ttk.Checkbutton(
            left_frame, text="Defrost mode", variable=var_defrost, command=apply_defrost,
        ).grid(row=6, column=0, columnspan=2, sticky="w", pady=5)

        ttk.Separator(left_frame, orient="horizontal").grid(
            row=7, column=0, columnspan=2, sticky="ew", pady=10
        )

        ttk.Label(left_frame, text="Cycle parameters:", font=("Arial", 10, "bold")).grid(
            row=8, column=0, columnspan=2, pady=5, sticky="w"
        )

        labels = {
            'refrigerant_charge': "Refrigerant charge [%]:",
            'expansion_valve_opening': "Expansion valve [%]:",
            'compressor_efficiency': "Compressor efficiency [%]:",
            'condenser_efficiency': "Condenser efficiency [%]:",
            'evaporator_efficiency': "Evaporator efficiency [%]:",
            'ambient_temperature': "Ambient temperature [°C]:",
        }
        for i, (key, text) in enumerate(labels.items()):
            ttk.Label(left_frame, text=text).grid(row=9 + i, column=0, sticky="w", pady=2)
            ttk.Entry(left_frame, textvariable=param_vars[key], width=10).grid(row=9 + i, column=1, pady=2)

        def apply_parameters():
            try:
                controller.set_parameters(**{key: var.get() for key, var in param_vars.items()})
            except (ValueError, tk.TclError) as e:
                messagebox.showerror("Error", f"Invalid parameter:\n{str(e)}")
                return
            for key, var in param_vars.items():
                var.set(getattr(controller.state, key))
            refresh()

        def reset():
            controller.reset()
            btn_toggle.config(text="▶ Start")
            for key, var in param_vars.items():
                var.set(defaults[key])
            var_target.set(defaults['target_temperature'])
            var_rpm.set(defaults['compressor_rpm'])
            var_defrost.set(False)
            refresh()

        ttk.Button(left_frame, text="✔ Apply parameters", command=apply_parameters, width=25).grid(
            row=15, column=0, columnspan=2, pady=5
        )
        ttk.Button(left_frame, text="🔄 Reset", command=reset, width=25).grid(
            row=16, column=0, columnspan=2, pady=2
        )

        # ========== TOP RIGHT: Metric cards + alerts ==========
        top_frame = ttk.Frame(window, padding=5)
        top_frame.grid(row=0, column=1, sticky="nsew", padx=5, pady=5)
        for i in range(4):
            top_frame.columnconfigure(i, weight=1)

        card_style = {'relief': tk.RAISED, 'borderwidth': 2, 'padding': 10}
        cards = {}
        for i, (key, title) in enumerate((
            ("temperature", "System temperature"),
            ("pressure", "Condenser / evaporator"),
            ("power", "Power consumption"),
            ("cop", "COP"),
        )):
            card = ttk.LabelFrame(top_frame, text=title, **card_style)
            card.grid(row=0, column=i, padx=5, pady=5, sticky="nsew")
            value = ttk.Label(card, text="--", font=('Arial', 20, 'bold'))
            value.pack()
            sub = ttk.Label(card, text="", foreground='gray')
            sub.pack()
            cards[key] = (value, sub)

        alerts_frame = ttk.LabelFrame(top_frame, text="Alerts", padding=5)
        alerts_frame.grid(row=1, column=0, columnspan=4, sticky="nsew", pady=5)
        alerts_list = tk.Listbox(alerts_frame, height=5)
        alerts_list.pack(fill="both", expand=True)

        # ========== BOTTOM RIGHT: History charts ==========
        plot_frame = ttk.LabelFrame(window, text="Performance history", padding=10)
        plot_frame.grid(row=1, column=1, sticky="nsew", padx=5, pady=5)

        fig = Figure(figsize=(10, 5), dpi=90)
        ax_temp = fig.add_subplot(131)
        ax_press = fig.add_subplot(132)
        ax_power = fig.add_subplot(133)
        ax_cop = ax_power.twinx()

        canvas = FigureCanvasTkAgg(fig, master=plot_frame)
        canvas.get_tk_widget().pack(fill="both", expand=True)

        cop_colors = {"low": "red", "medium": "#cc7a00", "good": "green"}

        def refresh():
            """Redraw cards, alerts and charts from the current snapshot."""
            s = controller.snapshot()

            value, sub = cards["temperature"]
            value.config(text=f"{s.system_temperature:.1f} °C")
            sub.config(text=f"target {s.target_temperature:.1f} °C"
                            + ("  (defrost)" if s.defrost_mode else ""))

            value, sub = cards["pressure"]
            value.config(text=f"{s.condenser_pressure:.1f} / {s.evaporator_pressure:.1f}")
            sub.config(text=f"compressor {s.compressor_pressure:.1f} bar")

            value, sub = cards["power"]
            value.config(text=f"{s.power_consumption:.0f} W")
            sub.config(text=f"{s.compressor_rpm:.0f} rpm")

            value, sub = cards["cop"]
            rating = controller.cop_rating()
            value.config(text=f"{s.cop:.2f}")
            sub.config(text=rating, foreground=cop_colors[rating])

            alerts_list.delete(0, "end")
            for msg in controller.alert_messages():
                alerts_list.insert("end", f"{msg.title}: {msg.message}")
                alerts_list.itemconfig("end", foreground=RefrigerationTkView.SEVERITY_COLORS[msg.severity])
            if controller.last_error:
                alerts_list.insert("end", f"Tick rejected: {controller.last_error}")
                alerts_list.itemconfig("end", foreground="red")

            plot_history()

        def plot_history():
            history = controller.history
            for ax in (ax_temp, ax_press, ax_power, ax_cop):
                ax.clear()

            if len(history) == 0:
                ax_temp.text(0.5, 0.5, 'Start the system',
                             transform=ax_temp.transAxes, ha='center', va='center',
                             fontsize=12, color='gray')
            else:
                t = history.series("timestamp")
                t = t - t[0]

                ax_temp.plot(t, history.series("system_temperature"), 'b-', linewidth=2, label='System')
                ax_temp.plot(t, history.series("target_temperature"), 'g--', linewidth=1.5, label='Target')
                ax_temp.legend(loc='best', fontsize=8)

                ax_press.plot(t, history.series("condenser_pressure"), 'r-', label='Condenser')
                ax_press.plot(t, history.series("compressor_pressure"), 'm-', label='Compressor')
                ax_press.plot(t, history.series("evaporator_pressure"), 'c-', label='Evaporator')
                ax_press.legend(loc='best', fontsize=8)

                ax_power.plot(t, history.series("power_consumption"), 'k-', label='Power')
                ax_cop.plot(t, history.series("cop"), 'g-', label='COP')

            ax_temp.set_title('Temperature [°C]', fontsize=10, fontweight='bold')
            ax_press.set_title('Pressures [bar]', fontsize=10, fontweight='bold')
            ax_power.set_title('Power [W] / COP', fontsize=10, fontweight='bold')
            for ax in (ax_temp, ax_press, ax_power):
                ax.set_xlabel('Time [s]')
                ax.grid(True, alpha=0.3)

            fig.tight_layout()
            canvas.draw()

        def tick():
            now = time.monotonic()
            if controller.advance(now - loop["last"]):
                refresh()
            loop["last"] = now
            loop["job"] = window.after(RefrigerationTkView.TICK_MS, tick)

        def on_close():
            if loop["job"] is not None:
                window.after_cancel(loop["job"])
            window.destroy()

        window.protocol("WM_DELETE_WINDOW", on_close)

        # Configure grid weights
        window.columnconfigure(0, weight=0)
        window.columnconfigure(1, weight=1)
        window.rowconfigure(0, weight=0)
        window.rowconfigure(1, weight=1)

        refresh()
        loop["job"] = window.after(RefrigerationTkView.TICK_MS, tick)
