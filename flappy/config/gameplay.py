"""Gameplay tuning constants.

Units are world pixels and seconds. World space is centred on the viewport
with +y pointing up.
"""

# =============================================================================
# BIRD
# =============================================================================

BIRD_START_X = -275.0
BIRD_SIZE = 27.0
BIRD_GRAVITY = 1000.0  # downward acceleration, px/s^2
BIRD_FLAP_HEIGHT = 75.0  # apex height reached by one flap

# Body box is shrunk for pillar checks so grazing contacts are forgiven
BIRD_COLLISION_SCALE = 0.95


# =============================================================================
# PILLARS
# =============================================================================

PILLAR_GAP = 155.0
PILLAR_WIDTH = 60.0
PILLAR_SPAWN_DISTANCE = 380.0
PILLAR_SPEED = 350.0  # scroll speed, px/s

# Fraction of the viewport height that sits above the gap
PILLAR_GAP_FRACTION_RANGE = (0.2, 0.8)

SCORE_TRIGGER_WIDTH = 5.0
SCORE_TRIGGER_FADE_SPEED = 3.0  # alpha per second


# =============================================================================
# EXPLOSION
# =============================================================================

PARTICLE_COUNT = 32
PARTICLE_SPEED_RANGE = (300.0, 850.0)
PARTICLE_LIFETIME_RANGE = (0.1, 1.0)
PARTICLE_SIZE_FRACTION_RANGE = (0.05, 0.5)


# =============================================================================
# BORDERS
# =============================================================================

BORDER_THICKNESS = 40.0
