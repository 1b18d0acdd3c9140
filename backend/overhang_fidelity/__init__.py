"""Golden Gate overhang cross-reactivity and fidelity engine."""

__version__ = "0.1.0"
