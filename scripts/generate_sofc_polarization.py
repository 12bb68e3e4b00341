"""
Generate SOFC Polarization Curve and Loss Decomposition
Writes the curve to CSV and plots voltage, power density and each overpotential.
"""

import os
import sys
import json
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.sofc_model import SOFCEvaluator
from src.physics_validator import PhysicsValidator


def generate_sofc_polarization(
    output_dir: str = "results",
    i_min: float = 0.1,
    i_max: float = 2.5,
    n_points: int = 25,
    i_ref: float = 1.0
):
    evaluator = SOFCEvaluator(verbose=True)
    df = evaluator.polarization_curve(i_min, i_max, n_points)

    validation = PhysicsValidator(verbose=False).validate_polarization_data(df)
    checks = evaluator.validate_data(df)

    print("\nValidation Results:")
    for check, passed in checks.items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}: {passed}")
    for warning in validation.warnings:
        print(f"  ⚠ {warning}")

    table_dir = os.path.join(output_dir, "tables")
    figure_dir = os.path.join(output_dir, "figures")
    os.makedirs(table_dir, exist_ok=True)
    os.makedirs(figure_dir, exist_ok=True)

    csv_path = os.path.join(table_dir, "sofc_polarization.csv")
    df.to_csv(csv_path, index=False)
    print(f"\n✓ Saved polarization curve to: {csv_path}")

    i = df["current_density_A_cm2"].to_numpy()
    V = df["voltage_V"].to_numpy()

    fig = plt.figure(figsize=(12, 8))
    gs = fig.add_gridspec(2, 2, height_ratios=[2, 1], width_ratios=[2, 1])

    # Polarization and power density
    ax_main = fig.add_subplot(gs[0, :])
    ax_main.plot(i, V, 'r-', linewidth=3, label='Operating Voltage')
    ax_main.axhline(y=df["E_nernst_V"].iloc[0], color='green', linestyle='--', linewidth=2,
                    label=f'$E_{{Nernst}}$ = {df["E_nernst_V"].iloc[0]:.3f} V')
    ax_main.set_xlabel('Current Density (A/cm²)', fontsize=13, fontweight='bold')
    ax_main.set_ylabel('Voltage (V)', fontsize=13, fontweight='bold')
    ax_main.set_title(
        f'SOFC Polarization Curve ({df["temperature_C"].iloc[0]:.0f}°C)',
        fontsize=14, fontweight='bold'
    )
    ax_main.grid(True, alpha=0.3)

    ax_power = ax_main.twinx()
    ax_power.plot(i, df["power_density_W_cm2"], 'b:', linewidth=2, label='Power Density')
    ax_power.set_ylabel('Power Density (W/cm²)', fontsize=13, fontweight='bold')

    lines = ax_main.get_legend_handles_labels()
    power_lines = ax_power.get_legend_handles_labels()
    ax_main.legend(lines[0] + power_lines[0], lines[1] + power_lines[1],
                   loc='upper right', fontsize=10, framealpha=0.9)

    # Overpotential components
    ax_loss = fig.add_subplot(gs[1, 0])
    components = {
        'Activation (cathode)': "eta_act_cathode_V",
        'Activation (anode)': "eta_act_anode_V",
        'Diffusion (cathode)': "eta_diff_cathode_V",
        'Diffusion (anode)': "eta_diff_anode_V",
        'Ohmic': "eta_ohm_V",
    }
    for label, column in components.items():
        ax_loss.plot(i, df[column] * 1000, linewidth=2, label=label)
    ax_loss.set_xlabel('Current Density (A/cm²)', fontsize=11, fontweight='bold')
    ax_loss.set_ylabel('η (mV)', fontsize=11, fontweight='bold')
    ax_loss.set_title('Overpotential Components', fontsize=12, fontweight='bold')
    ax_loss.legend(fontsize=8)
    ax_loss.grid(True, alpha=0.3)

    # Loss breakdown at the reference current density
    ax_bar = fig.add_subplot(gs[1, 1])
    point = evaluator.evaluate(i_ref)
    losses_at_ref = {
        'Act. c': point.eta_act_cathode * 1000,  # mV
        'Act. a': point.eta_act_anode * 1000,
        'Diff. c': point.eta_diff_cathode * 1000,
        'Diff. a': point.eta_diff_anode * 1000,
        'Ohmic': point.eta_ohm * 1000,
    }
    colors_bar = ['#ff9999', '#ffcc99', '#99ff99', '#66b3ff', '#c2c2f0']
    ax_bar.bar(list(losses_at_ref.keys()), list(losses_at_ref.values()), color=colors_bar)
    ax_bar.axhline(y=0, color='black', linewidth=1)
    ax_bar.set_ylabel('η (mV)', fontsize=11, fontweight='bold')
    ax_bar.set_title(f'Loss Breakdown\nat i={i_ref:.1f} A/cm²', fontsize=12, fontweight='bold')

    plt.tight_layout()
    figure_path = os.path.join(figure_dir, "sofc_polarization.png")
    plt.savefig(figure_path, dpi=300, bbox_inches='tight')
    print(f"✓ Figure saved: {figure_path}")
    plt.close()

    limits = evaluator.limiting_current_densities()
    summary = {
        "temperature_K": evaluator.parameters.conditions.T,
        "i0_cathode": evaluator.i0.i0_cathode,
        "i0_anode": evaluator.i0.i0_anode,
        "i_lim_cathode": limits["cathode"],
        "i_lim_anode": limits["anode"],
        "max_power_density_W_cm2": float(df["power_density_W_cm2"].max()),
        "i_at_max_power_A_cm2": float(i[np.argmax(df["power_density_W_cm2"].to_numpy())]),
        "validation": checks,
    }
    summary_path = os.path.join(table_dir, "sofc_summary.json")
    with open(summary_path, "w") as f:
        json.dump(summary, f, indent=2)

    print("\n" + "="*70)
    print("SOFC POLARIZATION SUMMARY")
    print("="*70)
    print(f"  i₀ cathode: {summary['i0_cathode']:.4e}")
    print(f"  i₀ anode:   {summary['i0_anode']:.4e}")
    print(f"  i_lim cathode: {summary['i_lim_cathode']:.4e}")
    print(f"  i_lim anode:   {summary['i_lim_anode']:.4e}")
    print(f"\nLoss Breakdown at i={i_ref:.1f} A/cm²:")
    for loss_type, loss_value in losses_at_ref.items():
        print(f"  {loss_type:10s}: {loss_value:9.2f} mV")
    print(f"  {'Total':10s}: {sum(losses_at_ref.values()):9.2f} mV")
    print("="*70)

    return df, summary


if __name__ == "__main__":
    generate_sofc_polarization()
