"""
Artha App - Investment Projection and Comparison Engine

Projects compounded growth for a set of Indian investment instruments,
adjusts their nominal rates to the investor's risk tolerance and ranks
them by projected final value.
"""

__version__ = "0.1.0"
__author__ = "ArthaAI Team"
