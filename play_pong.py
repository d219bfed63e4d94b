#!/usr/bin/env python3
"""
Main script to launch Multiball Pong with PyGame graphical interface
"""

import importlib.util
import sys

try:
    from multiball_pong.gui.game_app import main

except ImportError as e:
    print(f"Import error: {e}")
    print()
    print("Checking dependencies:")
    for module, package in (("pygame", "pygame"), ("numpy", "numpy"), ("pydantic", "pydantic")):
        if importlib.util.find_spec(module) is not None:
            print(f"✓ {package} is installed")
        else:
            print(f"✗ {package} is not installed - pip install {package}")
    sys.exit(1)

if __name__ == "__main__":
    print("=== MULTIBALL PONG ===")
    print("Five balls, one paddle each side")
    print()
    print("CONTROLS:")
    print("  Left paddle: Arrow Up / Arrow Down")
    print("  Right paddle: CPU, follows the orange ball")
    print("  ESC or close the window: Quit")
    print()

    sys.exit(main())
