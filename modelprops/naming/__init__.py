"""
Naming Module - external (wire) names for property definitions.
"""

from .policy import NamingPolicy, split_words
from .strategy import BeanPropertyNamingStrategy, ProfileNamingStrategy

__all__ = [
    "BeanPropertyNamingStrategy",
    "NamingPolicy",
    "ProfileNamingStrategy",
    "split_words",
]
