import logging

import aiohttp
import requests

logger = logging.getLogger(__name__)

HEADERS = {'Accept': 'application/json'}


def fetch(uri):
    logger.debug('getting resource %s', uri)
    response = requests.get(uri, headers=HEADERS)
    response.raise_for_status()
    content = response.json()
    logger.debug('received resource %s', uri)
    return content


async def fetch_async(uri):
    logger.debug('getting resource %s', uri)
    async with aiohttp.request('get', uri, headers=HEADERS) as response:
        response.raise_for_status()
        content = await response.json()
    logger.debug('received resource %s', uri)
    return content
