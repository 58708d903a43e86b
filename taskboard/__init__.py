"""
TaskBoard - server-rendered To-Do list backed by MongoDB
"""

__version__ = "1.0.0"
