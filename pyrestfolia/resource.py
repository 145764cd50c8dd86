from collections.abc import Mapping

from pyrestfolia.entry_point import EntryPoint
from pyrestfolia.errors import InvalidArgument, InvalidLink, UnknownAttribute


def to_resource(value):
    """Convert a decoded JSON value into a resource graph value.

    Objects become :class:`Resource`, arrays are converted element by
    element and anything else is returned unchanged.

    """
    if isinstance(value, (list, tuple)):
        return [to_resource(item) for item in value]
    if isinstance(value, Mapping):
        return Resource(value)
    return value


def _valid(value):
    return isinstance(value, str) and value != ''


def parse_links(content):
    links = content.get('links')
    if links is None:
        return ()
    if isinstance(links, Mapping):
        links = [links]
    elif not isinstance(links, (list, tuple)):
        raise InvalidLink(links)

    entry_points = []
    for link in links:
        if not isinstance(link, Mapping):
            raise InvalidLink(link)
        if not (_valid(link.get('href')) and _valid(link.get('rel'))):
            raise InvalidLink(link)
        entry_points.append(EntryPoint(link['href'], link['rel']))
    return tuple(entry_points)


_RESERVED = frozenset(['_content', '_attributes', '_links'])


def _is_member(name):
    return any(name in klass.__dict__ for klass in Resource.__mro__)


class Resource:
    """Representation of a JSON object.

    Every key of the object is readable as an attribute; nested objects
    are Resources too and arrays are converted item by item. Keys that
    clash with a Resource member (``links`` for instance) are left to the
    member and stay reachable only through ``_json``.

    >>> resource = Resource({'name': 'test',
    ...                      'tags': ['tag1', 'tag2'],
    ...                      'owner': {'name': 'nested'},
    ...                      'links': {'href': 'http://service.com',
    ...                                'rel': 'self',
    ...                                'type': 'application/json'}})
    >>> resource.tags
    ['tag1', 'tag2']
    >>> resource.owner.name
    'nested'
    >>> resource.links('self').href
    'http://service.com'

    """

    def __init__(self, content):
        if not isinstance(content, Mapping):
            raise InvalidArgument(content)
        attributes = {}
        for name, value in content.items():
            if isinstance(name, str) and (
                    name in _RESERVED or _is_member(name)):
                continue
            attributes[name] = to_resource(value)
        object.__setattr__(self, '_content', content)
        object.__setattr__(self, '_attributes', attributes)

    @property
    def _json(self):
        """The decoded JSON object this Resource was built from."""
        return self._content

    def __getattr__(self, name):
        attributes = self.__dict__.get('_attributes', {})
        if name in attributes:
            return attributes[name]
        if name.startswith('__') or name in _RESERVED:
            raise AttributeError(name)
        raise UnknownAttribute(name)

    def __setattr__(self, name, value):
        raise AttributeError(
            "can't set attribute {!r} on Resource".format(name))

    def __delattr__(self, name):
        raise AttributeError(
            "can't delete attribute {!r} on Resource".format(name))

    def __dir__(self):
        return sorted(set(super().__dir__()) | {
            name for name in self._attributes if isinstance(name, str)})

    def __repr__(self):
        return '<{}({})>'.format(self.__class__.__qualname__,
                                 ', '.join(map(str, self._attributes)))

    def links(self, rel=None):
        """Return the links of this Resource.

        Without *rel*, return every link as a tuple of
        :class:`~pyrestfolia.entry_point.EntryPoint`, empty when the JSON
        has no ``links``. With *rel*, return the first link with that
        relation name, or ``None``.

        Raises :class:`~pyrestfolia.errors.InvalidLink` the first time it
        is called if ``links`` is malformed.

        """
        links = self.__dict__.get('_links')
        if links is None:
            links = self.__dict__.setdefault('_links',
                                             parse_links(self._content))
        if rel is None:
            return links
        for entry_point in links:
            if entry_point.rel == rel:
                return entry_point
        return None
