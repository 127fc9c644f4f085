"""AlgoViz: step-by-step visualizations of classic data structures and algorithms."""

__version__ = "1.0.0"
