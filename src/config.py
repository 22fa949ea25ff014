WIDTH = 1280
HEIGHT = 800
FULLSCREEN = False
VSYNC = False
FPS = 30
CAPTION = "Cow Herder"
BACKGROUND_COLOR = (0, 200, 0)
# Invisible border around the window that cows turn back from
EDGE_WIDTH = 80
# Iterations run during setup so cow directions get a chance to randomize
SETTLE_TICKS = 10

# Herd
COW_COUNT = 3
# How close the person must be to a cow to lead it
COW_RANGE = 50
COW_SIZE = (128, 128)
COW_DISTANCE_PER_FRAME = 2.5
COW_FRAME_COUNT = 4
# How far from the target a following cow stops
COW_TARGET_PADDING = 40
COW_NORMAL_SPEED = 20.0
COW_TARGET_SPEED = 40.0
# Chance per second that a wandering cow starts or stops moving
COW_TOGGLE_RATE = 0.1

# Person
PERSON_SIZE = (32, 32)
PERSON_DISTANCE_PER_FRAME = 2.5
PERSON_FRAME_COUNT = 3
PERSON_SPEED = 30.0

# Fence
FENCE_SIZE = (400, 400)
FENCE_EDGE_WIDTH = 100
FENCE_OPENING_SIZE = (100, FENCE_EDGE_WIDTH)

# HUD (offsets are relative to the screen centre)
TITLE_SIZE = (400, 60)
TITLE_TOP_OFFSET = 60
DESCRIPTION_X = -250
DESCRIPTION_BOTTOM_OFFSET = 110
DESCRIPTION_SIZE = (480, 80)
DESCRIPTION_COLOR = (255, 255, 255, 220)
DESCRIPTION_FONT = "georgia"
DESCRIPTION_INITIAL = (
    "Grazing time is over! Can you bring the cows back home? "
    "Use the arrow keys to move around and press the space bar near a cow "
    "to start leading it or let it go."
)
DESCRIPTION_INITIAL_FONT_SIZE = 18
DESCRIPTION_SUCCESS = "Yay, you've brought all the cows home!"
DESCRIPTION_SUCCESS_FONT_SIZE = 24
