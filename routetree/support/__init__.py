"""
RouteTree Support Classes
"""

from routetree.support.config import Config
from routetree.support.class_loader import ClassLoader
from routetree.support.str import Str

__all__ = [
    'Config',
    'ClassLoader',
    'Str',
]
