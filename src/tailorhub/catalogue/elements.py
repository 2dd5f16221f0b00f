"""Catalogue elements nested below the component folder, loaded at domain init."""

from tailorhub.catalogue.service import events as service_events  # noqa: F401
from tailorhub.catalogue.service import management as service_management  # noqa: F401
from tailorhub.catalogue.service import repository as service_repository  # noqa: F401
from tailorhub.catalogue.service import service  # noqa: F401
from tailorhub.catalogue.tailor import events as tailor_events  # noqa: F401
from tailorhub.catalogue.tailor import management as tailor_management  # noqa: F401
from tailorhub.catalogue.tailor import repository as tailor_repository  # noqa: F401
from tailorhub.catalogue.tailor import tailor  # noqa: F401
