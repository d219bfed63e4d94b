"""
Multiball Pong: five bouncing balls, a player paddle and a CPU paddle
"""

__version__ = "0.1.0"
