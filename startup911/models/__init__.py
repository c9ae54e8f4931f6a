from .tag import Tag, TagType
from .grant import Grant, grant_tags
from .vc import VC, vc_tags
from .mentor import Mentor, mentor_tags
from .waitlist import WaitlistEntry

__all__ = [
    "Tag",
    "TagType",
    "Grant",
    "grant_tags",
    "VC",
    "vc_tags",
    "Mentor",
    "mentor_tags",
    "WaitlistEntry",
]
