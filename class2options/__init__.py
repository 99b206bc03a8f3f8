"""Decorated class components to plain options objects"""
from class2options.config import Settings, settings
from class2options.transform import ClassComponentTransformer, transform_program

__all__ = [
    "Settings",
    "settings",
    "ClassComponentTransformer",
    "transform_program",
]

__version__ = "1.0.0"
