#!/usr/bin/env python3
"""
Main script to launch Crazy Pong with PyGame graphical interface
"""

import importlib.util
import sys

if __name__ == "__main__":
    missing = [name for name in ("pygame", "numpy", "pydantic") if importlib.util.find_spec(name) is None]
    if missing:
        print("Checking dependencies:")
        for name in missing:
            print(f"✗ {name} is not installed - pip install {name}")
        sys.exit(1)

    from crazy_pong.gui.game_app import main

    print("=== CRAZY PONG ===")
    print()
    print("CONTROLS:")
    print("  UP/DOWN arrows or mouse: move both paddles")
    print("  R, ENTER, SPACE or the Start button: play again after a game over")
    print("  ESC: Quit")
    print()

    main(sys.argv[1:])
