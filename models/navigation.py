"""
Navigation related data models
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union


class View(Enum):
    HOME = "home"
    CART = "cart"
    LOGIN = "login"
    PROFILE = "profile"
    BLOG = "blog"
    ADVISOR = "advisor"

    @classmethod
    def parse(cls, value) -> "View":
        # Accepts a View or its string id; raises ValueError for anything else
        if isinstance(value, cls):
            return value
        return cls(value)


@dataclass(frozen=True)
class SingleRegion:
    """A view backed by one display region"""
    ref: str

    @property
    def refs(self) -> Tuple[str, ...]:
        return (self.ref,)


@dataclass(frozen=True)
class CompositeRegion:
    """A view backed by several display regions shown and hidden together"""
    parts: Tuple[str, ...]

    @property
    def refs(self) -> Tuple[str, ...]:
        return self.parts


ViewRegion = Union[SingleRegion, CompositeRegion]

VIEW_REGIONS = {
    View.HOME: CompositeRegion(("heroSection", "searchSection", "productsGrid")),
    View.CART: SingleRegion("cartView"),
    View.LOGIN: SingleRegion("authView"),
    View.PROFILE: SingleRegion("profileView"),
    View.BLOG: SingleRegion("blogView"),
    View.ADVISOR: SingleRegion("advisorView"),
}


@dataclass
class NavigationState:
    """Current view plus the bounded visit history (most recent last)"""
    current_view: View = View.HOME
    history: List[View] = field(default_factory=lambda: [View.HOME])
