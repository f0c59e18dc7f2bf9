"""Events admin module.

Django autodiscover imports this module, which registers the admin classes
through the @admin.register decorators in the submodules.
"""

from events.admin.event import EventAdmin
from events.admin.group import GroupAdmin, ProfileAdmin

__all__ = ["EventAdmin", "GroupAdmin", "ProfileAdmin"]
