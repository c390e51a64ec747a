"""
Character-level Markov language model services.
"""
