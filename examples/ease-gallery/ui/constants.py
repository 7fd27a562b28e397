"""Layout constants and color definitions."""

FPS = 60

SCREEN_W = 800
SCREEN_H = 560
STATUS_H = 36

ORB_RADIUS = 12

BG_COLOR = (20, 20, 30)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
TARGET_COLOR = (90, 90, 120)

# Orb name -> (spring, speed, color)
ORB_STYLES: dict[str, tuple[float, float, tuple[int, int, int]]] = {
    "still": (0.0, 0.2, (0, 220, 220)),
    "soft": (0.3, 0.15, (60, 220, 80)),
    "bouncy": (0.6, 0.12, (255, 160, 40)),
    "wobbly": (0.85, 0.08, (220, 80, 220)),
}
