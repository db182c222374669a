"""
Application context shared by every workflow.
"""

from dataclasses import dataclass, field

from ..persistence import LMSManager, UserRegistry


@dataclass
class LMSContext:
    """Registries for one running application, passed explicitly."""
    courses: LMSManager = field(default_factory=LMSManager)
    users: UserRegistry = field(default_factory=UserRegistry)
