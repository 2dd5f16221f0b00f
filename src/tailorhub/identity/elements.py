"""Identity elements nested below the component folder.

Domain traversal only loads modules one level under the domain root, so the
aggregate, its events, command handlers and repository are pulled in here.
"""

from tailorhub.identity.user import events, registration, repository, user  # noqa: F401
