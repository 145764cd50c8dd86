from collections import namedtuple

from pyrestfolia import http
from pyrestfolia.errors import InvalidLink


class EntryPoint(namedtuple('EntryPoint', ['href', 'rel'])):
    """A hypermedia link: where it points and what it means.

    >>> ep = EntryPoint('http://service.com/contacts', 'contacts')
    >>> ep.resolve()  # GET http://service.com/contacts
    <Resource(...)>

    """

    __slots__ = ()

    def __new__(cls, href, rel):
        for value in (href, rel):
            if not isinstance(value, str) or value == '':
                raise InvalidLink({'href': href, 'rel': rel})
        return super().__new__(cls, href, rel)

    def resolve(self, fetch=None):
        """Fetch *href* and wrap the decoded JSON in a new Resource.

        *fetch* takes the address and returns the decoded JSON object;
        it defaults to :func:`pyrestfolia.http.fetch`. Whatever it raises
        reaches the caller untouched.

        """
        from pyrestfolia.resource import Resource
        if fetch is None:
            fetch = http.fetch
        return Resource(fetch(self.href))

    async def resolve_async(self, fetch=None):
        from pyrestfolia.resource import Resource
        if fetch is None:
            fetch = http.fetch_async
        return Resource(await fetch(self.href))
