"""Split multi-model PDBQT files into per-model ligand and flexible side-chain files."""

__version__ = "1.0.0"
__all__ = ["cli", "models", "triangular"]