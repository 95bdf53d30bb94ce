"""
hyperbox CLI - Command-line driver for the shape algebra.

Usage:
    hyperbox volume rect:0,0:4,3
    hyperbox encapsulate point2d:0,0 point2d:4,3
    hyperbox compare rect:0,0:2,2 rect:0,0:3,3
    hyperbox demo
"""

__version__ = "1.0.0"
