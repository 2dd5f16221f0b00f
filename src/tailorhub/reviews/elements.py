"""Review elements nested below the component folder, loaded at domain init."""

from tailorhub.reviews.review import events, repository, review, submission  # noqa: F401
