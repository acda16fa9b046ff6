"""Request helpers."""


def request_kind(method: str, path: str) -> str:
    """Identify a request as ``"METHOD path"``.

    The method is upper-cased and the path lower-cased, so
    ``request_kind("post", "/Authenticate")`` is ``"POST /authenticate"``.
    """
    return f"{method.upper()} {path.lower()}"
