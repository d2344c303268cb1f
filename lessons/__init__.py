"""
lessons/
--------
Static Learn-mode content.

    from lessons import SLIDES, SlideDeck
"""

from lessons.slides import Slide, SlideDeck, SLIDES

__all__ = ["Slide", "SlideDeck", "SLIDES"]
