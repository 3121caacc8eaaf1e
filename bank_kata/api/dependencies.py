"""
Request dependencies
"""

from fastapi import Request

from ..ledger import Ledger


def get_ledger(request: Request) -> Ledger:
    """Ledger owned by the running application"""
    return request.app.state.ledger
