WIDTH = 1024
HEIGHT = 768
FPS = 60
TITLE = "Asteroid Game"

SEED = 0xAABBCCFF
POOL_CAPACITY = 50

PLAYER_BASE_HEIGHT = 45.0
PLAYER_SPEED_LIMIT = 3.0
PLAYER_ROTATION_LIMIT = 3.0
PLAYER_THRUST = 0.1
PLAYER_TURN_IMPULSE = 0.3
PLAYER_ROTATION_DAMPING = 0.05
PLAYER_ROTATION_EPSILON = 0.01
PLAYER_TIME_INVUL = 250  # ticks
PLAYER_LIVES = 3

BULLET_SPEED = 7.0
FIRE_COOLDOWN = 0.1  # seconds

ASTEROID_START_NUMBER = 8
ASTEROID_MAX_LIMIT = 20
ASTEROID_INCREMENT_INTERVAL = 5.0  # seconds
ASTEROID_SPIN_PER_TICK = 1.0  # degrees
ASTEROID_MIN_DISTANCE = 32.0
ASTEROID_MAX_DISTANCE = 64.0

PARTICLE_LIFE = (60, 120)
PARTICLE_SIZE = (4, 12)
BURST_ASTEROID = 10
BURST_PLAYER = 5

SOUND_VOLUME = 0.05
SOUND_LASER = "laser-shoot"
SOUND_EXPLOSION_ASTEROID = "explosion-asteroid"
SOUND_EXPLOSION_PLAYER = "explosion-player"
SOUND_FILES = {
    SOUND_LASER: "laserShoot.wav",
    SOUND_EXPLOSION_ASTEROID: "explosionAsteroid.wav",
    SOUND_EXPLOSION_PLAYER: "explosionPlayer.wav",
}

COLORS = {
    "bg": (19, 19, 19, 255),
    "lines": (230, 230, 230, 255),
    "bullet": (200, 60, 60, 255),
    "ship_core": (0, 228, 48, 255),
    "debug": (230, 41, 55, 255),
    "debug_player": (0, 121, 241, 255),
}
