"""Test helper utilities."""


def auth_headers(user) -> dict:
    """Headers the auth gateway attaches for ``user``"""
    return {"X-User-Id": str(user.id)}


def ids(items) -> list:
    """Ids of ORM objects or response dicts, in order"""
    return [item["id"] if isinstance(item, dict) else item.id for item in items]
