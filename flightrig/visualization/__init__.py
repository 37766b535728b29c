from .plotter import FlightVisualizer, simulate_scroll

__all__ = [
    "FlightVisualizer",
    "simulate_scroll"
]
