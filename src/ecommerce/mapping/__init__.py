from .mapper import Mapper, MappingProfile, TypeMap
from .profile import build_profile, get_mapper

__all__ = ["Mapper", "MappingProfile", "TypeMap", "build_profile", "get_mapper"]
