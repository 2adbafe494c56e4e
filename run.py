#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Usage:
    python run.py play [--turn-order alternate]
    python run.py replay --moves 3,3,4,4,5,5,6
    python run.py catalog --list
    python run.py benchmark --iterations 200
"""

import os
import sys

# Add the project root to Python path so the script works without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connect_four.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
