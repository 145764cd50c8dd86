from pyrestfolia.client import Client, at
from pyrestfolia.entry_point import EntryPoint
from pyrestfolia.errors import InvalidArgument, InvalidLink, UnknownAttribute
from pyrestfolia.resource import Resource, parse_links, to_resource

__all__ = [
    'Client', 'EntryPoint', 'InvalidArgument', 'InvalidLink', 'Resource',
    'UnknownAttribute', 'at', 'parse_links', 'to_resource',
]
