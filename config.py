"""
Configuration file for the point-separation system.

Holds the I/O locations, the batch range and the rendering parameters.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# OUTPUT SELECTION
# ---------------------------------------------------------------

# Set to False to only write the text solutions
SAVE_IMAGES = True

# Re-check every solution pair by pair before writing it
VERIFY_SOLUTIONS = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_FOLDER = "input"
INSTANCE_FILE_PATTERN = "instance{index:02d}.txt"

OUTPUT_FOLDER = "output_greedy"
SOLUTION_FILE_PATTERN = "greedy_solution{index:02d}"


# ---------------------------------------------------------------
# BATCH LIMITS
# ---------------------------------------------------------------

MAX_POINTS = 100                   # largest point count accepted per instance
FIRST_INSTANCE_INDEX = 1
MAX_INSTANCE_INDEX = 100           # exclusive


# ===============================================================
# RENDERING PARAMETERS
# ===============================================================

RENDER = {
    "RENDER_SIZE": 600,            # square canvas, pixels
    "RENDER_MARGIN": 30,
    "POINT_RADIUS": 4,
    "LINE_THICKNESS": 1,
}


# ---------------------------------------------------------------
# VISUALIZATION COLORS (BGR)
# ---------------------------------------------------------------

COLOR_BACKGROUND = (255, 255, 255)  # white
COLOR_POINT = (0, 0, 0)             # black
COLOR_VERTICAL = (255, 0, 0)        # vertical lines - blue
COLOR_HORIZONTAL = (0, 0, 255)      # horizontal lines - red


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - I/O and batch constants, always present.
    - Rendering values, merged in only when images are saved.
    """

    base = {
        "INPUT_FOLDER": INPUT_FOLDER,
        "INSTANCE_FILE_PATTERN": INSTANCE_FILE_PATTERN,
        "OUTPUT_FOLDER": OUTPUT_FOLDER,
        "SOLUTION_FILE_PATTERN": SOLUTION_FILE_PATTERN,
        "MAX_POINTS": MAX_POINTS,
        "FIRST_INSTANCE_INDEX": FIRST_INSTANCE_INDEX,
        "MAX_INSTANCE_INDEX": MAX_INSTANCE_INDEX,
        "VERIFY_SOLUTIONS": VERIFY_SOLUTIONS,
        "SAVE_IMAGES": SAVE_IMAGES,
    }

    if SAVE_IMAGES:
        base.update(RENDER)

    return base
