"""
Character-level Markov language model: training, sampling and text generation.
"""

__version__ = "1.0.0"
