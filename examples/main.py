"""
main.py — Drive the rules engine from a toy engine loop
=======================================================

A stand-in for a real engine adapter: it "launches" the ball, hits
blocks in a fixed order, occasionally loses the ball, and prints the
HUD after every step.

    python main.py

The adapter's responsibilities shown here:
  1. Forward pointer presses (the session ignores them while the ball flies)
  2. Report block collisions with the block's key
  3. Report the ball leaving the bottom edge (twice, as a real engine may)
  4. Run the per-frame check and reposition entities after a reset
"""

import logging
import random

from breakout_rules import GameConfig, GameSession, setup_logging

# ── Setup logging (so you can see resets happening) ──
setup_logging(log_file_path=None, level=logging.INFO)

# ── Configuration ──
config = GameConfig(
    initial_lives=3,
    default_block_score=50,
    rows=3,
    columns=5,
)

session = GameSession(config=config)
rng = random.Random(7)

for frame in range(60):
    state = session.state
    if not state.ball_active:
        session.on_pointer_down()
    elif rng.random() < 0.15:
        # ball dropped below the paddle; the engine reports it on two frames
        session.on_ball_out_of_bounds()
        session.on_ball_out_of_bounds()
    elif state.blocks:
        session.on_block_hit(rng.choice(state.blocks).key)

    session.on_frame()
    if session.consume_reset():
        print("-- reset: ball and paddle back to start pose --")

    print(f"frame {frame:>3}: " + " | ".join(session.hud_lines()))
