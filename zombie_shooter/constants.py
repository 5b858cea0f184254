"""
Canvas dimensions, colors, font sizes, enemy motion tuning knobs, scoring,
messages, asset paths, and logging configuration.
"""

import math
import os

WIDTH, HEIGHT = 960, 540           # canvas size, scaled into the window
FPS = 60
BG_COLOR = (25, 28, 33)
TEXT_COLOR = (235, 235, 235)
HITBOX_COLOR = (0, 255, 0)
CROSSHAIR_COLOR = (255, 80, 80)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16
FONT_SIZE_LARGE = 22

# Enemy sprite size (px, width == height)
ENEMY_SIZE_MIN = 50
ENEMY_SIZE_MAX = 90

# Spawn rectangle is inset by this margin on every side
SPAWN_MARGIN = 50

# Motion is tuned for ~16 ms frames at 60 fps
FRAME_SCALE = 60 / 16
MAX_FRAME_DT = 0.05                # seconds, caps hitches (tab switch, drag)

# Linear ("zombie") motion
LINEAR_SPEED_MIN = 0.6
LINEAR_SPEED_MAX = 2.0
BOUNCE_MARGIN = 10
LINEAR_HIDE_CHANCE = 0.0008        # per tick

# Circular ("mummy") motion
CIRCLE_CENTER_MARGIN = 100
CIRCLE_RADIUS_MIN = 30
CIRCLE_RADIUS_MAX = 90
CIRCLE_RECENTER_RADIUS_MAX = 110
ANGULAR_SPEED_MIN = 0.01
ANGULAR_SPEED_MAX = 0.05
RECENTER_ANGULAR_SPEED_MAX = 0.06
FULL_TURN = math.pi * 2
RECENTER_CHANCE = 0.001            # per tick
CIRCULAR_HIDE_CHANCE = 0.0006      # per tick

# Respawn timers (seconds)
HIDE_TIMER_MIN = 0.8
HIDE_TIMER_MAX = 2.5
SHOT_TIMER_MIN = 0.6
SHOT_TIMER_MAX = 2.0

# Hitbox
HITBOX_MIN_RADIUS = 20
HITBOX_SCALE = 0.75

# Population
ENEMY_COUNT = 8
LINEAR_KIND_CHANCE = 0.55

# Scoring
POINTS_LINEAR = 10
POINTS_CIRCULAR = 15
SCORE_POPUP_MS = 600
SCORE_POPUP_COLOR = (255, 220, 90)

# Messages (durations in ms, 0 keeps the message on screen)
MSG_INTRO = "Press Start to play"
MSG_INTRO_MS = 2500
MSG_STARTED = "Started!"
MSG_STARTED_MS = 1000
MSG_PAUSED = "PAUSED"
MSG_PAUSED_MS = 1500
MSG_READY = "Ready. Press Start"
MSG_READY_MS = 1500

# Audio
BGM_VOLUME = 0.45
SFX_VOLUME = 0.8

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
MUSIC_PATH = os.path.join(ASSETS_DIR, "soundtrack.mp3")
SHOT_SFX_PATH = os.path.join(ASSETS_DIR, "gun-sound.mp3")
CURSOR_PATH = os.path.join(ASSETS_DIR, "cursor.png")
BACKGROUND_PATH = os.path.join(ASSETS_DIR, "background.jpg")
SPRITE_PATHS = {
    "zombie": os.path.join(ASSETS_DIR, "zombie.png"),
    "mummy": os.path.join(ASSETS_DIR, "mummy.png"),
}
