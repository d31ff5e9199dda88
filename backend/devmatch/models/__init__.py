from devmatch.models.user import User
from devmatch.models.swipe import Swipe
from devmatch.models.match import Match, Message

__all__ = ["User", "Swipe", "Match", "Message"]
