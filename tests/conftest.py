"""Shared test configuration."""
import sys
from pathlib import Path

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
