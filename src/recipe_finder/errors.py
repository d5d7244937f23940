from typing import Optional


class RecipeFinderError(Exception):
    """Base error for the search/detail flow.

    Attributes:
        message: text shown to the user as-is
    """

    default_message = "Something went wrong."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class EmptyQueryError(RecipeFinderError):
    """Raised before any request when the search text is blank."""

    default_message = "Please enter a search term."


class NoResultsError(RecipeFinderError):
    """The API answered with no `meals`. Not a failure, callers show a notice."""

    default_message = "No recipes found 😕"


class RecipeServiceError(RecipeFinderError):
    """Transport or parse failure while talking to TheMealDB."""

    default_message = "Failed to fetch recipes."


class MealNotFoundError(RecipeFinderError):
    default_message = "Meal not found."
