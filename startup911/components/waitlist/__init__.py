from .service import DEFAULT_WAITLIST_SOURCE, WaitlistEntryExistsError, add_to_waitlist

__all__ = ["DEFAULT_WAITLIST_SOURCE", "WaitlistEntryExistsError", "add_to_waitlist"]
