"""
Run Crazy Pong with ``python -m crazy_pong``
"""

from crazy_pong.gui.game_app import main

if __name__ == "__main__":
    main()
