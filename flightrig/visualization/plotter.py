# flightrig/visualization/plotter.py
"""
Contains the FlightVisualizer class for offline tuning: a headless scroll
replay, an interactive 3D view of the path and trajectories, and a static
plot of the smoothed attitude angles.
"""
import logging
import math
from typing import Dict, List, Sequence

import matplotlib.pyplot as plt
import numpy as np
import plotly.graph_objects as go

from ..path.core import PathCurve
from ..rig.core import FlightRig

logger = logging.getLogger(__name__)

def simulate_scroll(rig: FlightRig, progress_series: Sequence[float], delta_time: float = 1 / 60) -> List[Dict]:
    """
    Drives `rig` with one raw progress value per frame.

    Returns:
        One record per frame with progress, vehicle/camera positions and angles in degrees
    """
    records = []
    for raw_progress in progress_series:
        output = rig.step(raw_progress, delta_time)
        records.append({
            'frame': output.frame,
            'raw_progress': float(raw_progress),
            'progress': output.progress,
            'position': output.vehicle.position,
            'orientation': output.vehicle.orientation,
            'camera_position': output.camera.position,
            'camera_look_at': output.camera.look_at,
            'bank_deg': math.degrees(rig.state.bank_angle),
            'pitch_deg': math.degrees(rig.state.pitch_angle),
            'yaw_deg': math.degrees(rig.state.yaw_angle),
        })
    return records

class FlightVisualizer:
    """Generates tuning plots from a curve and a recorded flight."""

    def create_3d_plot(self, curve: PathCurve, records: Sequence[Dict]) -> go.Figure:
        fig = go.Figure()
        samples = curve.samples
        fig.add_trace(go.Scatter3d(x=samples[:, 0], y=samples[:, 2], z=samples[:, 1], mode='lines', line=dict(width=2, color='lightgray'), name='Curve Samples'))

        points = np.array([p.as_array() for p in curve.control_points])
        fig.add_trace(go.Scatter3d(x=points[:, 0], y=points[:, 2], z=points[:, 1], mode='markers', marker=dict(size=5, color='black', symbol='diamond'), name='Control Points'))

        if records:
            vehicle = np.array([r['position'] for r in records])
            camera = np.array([r['camera_position'] for r in records])
            fig.add_trace(go.Scatter3d(x=vehicle[:, 0], y=vehicle[:, 2], z=vehicle[:, 1], mode='lines', line=dict(width=4, color='blue'), name='Vehicle'))
            fig.add_trace(go.Scatter3d(x=camera[:, 0], y=camera[:, 2], z=camera[:, 1], mode='lines', line=dict(width=3, color='orange', dash='dash'), name='Camera'))

        # Renderer space is Y-up; plot with Y as the vertical axis
        fig.update_layout(title='Flight Path and Rig Trajectory', scene=dict(xaxis_title='X', yaxis_title='Z', zaxis_title='Y (up)', aspectmode='data'), margin=dict(r=20, l=10, b=10, t=40))
        return fig

    def save_3d_plot(self, fig: go.Figure, filename: str) -> None:
        fig.write_html(filename)
        logger.info(f"Interactive 3D plot generated: '{filename}'.")

    def plot_angle_history(self, records: Sequence[Dict], filename: str) -> None:
        """Saves bank, pitch and yaw over frames as a static image."""
        frames = [r['frame'] for r in records]
        fig, ax = plt.subplots(figsize=(12, 5))
        ax.plot(frames, [r['bank_deg'] for r in records], label='Bank')
        ax.plot(frames, [r['pitch_deg'] for r in records], label='Pitch')
        ax.plot(frames, [r['yaw_deg'] for r in records], label='Yaw')
        ax.set_title('Smoothed Attitude Angles')
        ax.set_xlabel('Frame')
        ax.set_ylabel('Angle (deg)')
        ax.legend()
        ax.grid(True, alpha=0.3)
        fig.tight_layout()
        fig.savefig(filename)
        plt.close(fig)
        logger.info(f"Angle history saved to '{filename}'")
