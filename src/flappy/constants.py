"""
constants.py: Centralized defaults for the playfield, physics and client.
"""

# -------- Game World Config --------
SCREEN_WIDTH = 420
SCREEN_HEIGHT = 640
BIRD_X = 100                    # Fixed bird X position
BOUNDARY_INSET = 4              # Touching within this of top/bottom is fatal

# Bird hitbox: 48x36 sprite drawn at 0.9 scale
BIRD_WIDTH = 48 * 0.9
BIRD_HEIGHT = 36 * 0.9

# -------- Pipe Config --------
PIPE_WIDTH = 96
PIPE_GAP = 140
PIPE_VELOCITY = -200.0          # Horizontal speed (pixels/second), leftward
PIPE_SPAWN_OFFSET = 48          # Spawn this far past the right edge
PIPE_TOP_MARGIN = 50            # Minimum top pipe extent
PIPE_BOTTOM_MARGIN = 50         # Minimum bottom pipe extent
PIPE_PRUNE_MARGIN = 50          # Prune once centre is this far left of x=0

# -------- Timing (seconds) --------
PIPE_SPAWN_INTERVAL = 1.5
FIRST_SPAWN_DELAY = 0.4         # Grace period after start/restart
MAX_FRAME_DELTA = 0.25          # Longest step a single tick simulates

# -------- Physics Config (Pixels / Second / Second) --------
GRAVITY_ACCEL = 900.0           # Vertical acceleration (pixels/s^2)
FLAP_VELOCITY = -350.0          # Velocity override on flap (pixels/s)
ROTATION_SCALE = 6.0            # Velocity (pixels/s) per degree of tilt
MIN_ROTATION = -30.0
MAX_ROTATION = 90.0

# -------- Client Config --------
RENDER_FPS = 60
MIN_PIPE_DISPLAY_HEIGHT = 48
