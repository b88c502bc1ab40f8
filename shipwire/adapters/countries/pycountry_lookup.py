"""Country lookup backed by the pycountry ISO 3166 database."""

import pycountry

from shipwire.core.errors import InvalidCountryError
from shipwire.core.models import Country
from shipwire.core.ports import CountryLookupPort


class PyCountryLookup(CountryLookupPort):
    """Resolves alpha-2, alpha-3, numeric codes and names via pycountry."""

    def find(self, identifier: str) -> Country:
        try:
            record = pycountry.countries.lookup(identifier)
        except LookupError:
            raise InvalidCountryError(f"No country could be found for {identifier!r}") from None
        return Country(alpha2=record.alpha_2, name=record.name)
