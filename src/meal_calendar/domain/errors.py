"""Domain errors raised by catalog, planning and persistence code."""


class MealCalendarError(Exception):
    """Base class for application errors."""


class UnknownCategoryError(MealCalendarError, ValueError):
    """Raised when a category name does not match any meal category."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown meal category: {name!r}")
        self.name = name


class InvalidMonthError(MealCalendarError, ValueError):
    """Raised when a zero-based month falls outside 0..11."""

    def __init__(self, month: int) -> None:
        super().__init__(f"Month must be within 0..11, got {month}")
        self.month = month


class EmptyCategoryError(MealCalendarError):
    """Raised when a plan is required for a category with no foods."""

    def __init__(self, category: str) -> None:
        super().__init__(f"No foods available for category {category!r}")
        self.category = category


class PersistenceError(MealCalendarError):
    """Raised when a catalog store fails to load or save."""


class AuthenticationError(MealCalendarError):
    """Raised when the identity provider rejects a request."""
