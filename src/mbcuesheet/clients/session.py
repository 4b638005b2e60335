"""
Shared HTTP session setup.
"""

import requests

from ..core.config import USER_AGENT


def create_session(user_agent: str = USER_AGENT) -> requests.Session:
    """Create a requests session identifying this tool to remote services."""
    session = requests.Session()
    session.headers.update({
        'User-Agent': user_agent,
        'Accept': 'application/json'
    })
    return session
