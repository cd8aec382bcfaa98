"""
Plagiarism Engine - Utility Functions
"""
import math


def to_percent(score):
    """Score in [0, 1] -> integer percent, rounding halves up"""
    return int(math.floor(score * 100 + 0.5))


def clamp_percent(percent):
    return max(0, min(100, percent))


def truncate(text, length=150):
    """Cut text to length characters, marking the cut with '...'"""
    if len(text) <= length:
        return text
    return text[:length] + '...'
