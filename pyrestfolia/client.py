from pyrestfolia.entry_point import EntryPoint


def at(uri):
    """Entry point for the resource at *uri*."""
    return EntryPoint(uri, 'self')


class Client:

    def __init__(self, host, secure=False, port=None):
        proto = "https" if secure else "http"
        if port is None:
            port = 443 if secure else 80
        self.uri_base = '{}://{}:{}'.format(proto, host, port)

    def _uri(self, path):
        return '{}/{}'.format(self.uri_base, path.lstrip('/'))

    def entry_point(self, path='/'):
        return at(self._uri(path))

    def get(self, path='/', fetch=None):
        return self.entry_point(path).resolve(fetch)

    async def get_async(self, path='/', fetch=None):
        return await self.entry_point(path).resolve_async(fetch)
