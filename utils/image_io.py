"""
Image and directory utilities for the solution outputs.

This module provides:
    • ensure_output_dir(path)
    • save_image(path, image)
"""

import os

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise IOError(f"Could not write image {path}")
